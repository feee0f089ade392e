"""deepnav — navigate by URL.

Maps URL patterns with typed placeholders to navigables (classes built
from a URL) and open handlers (callables run for a URL).

Basic usage::

    from deepnav import Navigator, NavigatorConfig

    navigator = Navigator(NavigatorConfig(scheme="myapp"))
    navigator.map("/user/<int:id>", UserView)

    view = navigator.navigable_for_url("myapp://user/123")

Stateless matching::

    from deepnav import match_url

    match_url("myapp://user/123", ["myapp://user/<int:id>"])
    # URLMatch(pattern='myapp://user/<int:id>', values={'id': 123})
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "DeepNavError",
    "DeepURL",
    "Navigator",
    "NavigatorConfig",
    "Presenter",
    "RecordingPresenter",
    "Route",
    "RouteKind",
    "RouteMatch",
    "SchemeRequiredError",
    "URLMatch",
    "default_navigator",
    "match_url",
    "normalize_url",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import deepnav`` fast while providing a clean top-level API.
    """
    if name in ("Navigator", "default_navigator"):
        from deepnav import navigator as _nav

        return getattr(_nav, name)

    if name == "NavigatorConfig":
        from deepnav.config import NavigatorConfig

        return NavigatorConfig

    if name == "DeepURL":
        from deepnav.url import DeepURL

        return DeepURL

    if name in ("Presenter", "RecordingPresenter"):
        from deepnav import presenter as _presenter

        return getattr(_presenter, name)

    if name in ("Route", "RouteKind", "RouteMatch"):
        from deepnav.routing import route as _route

        return getattr(_route, name)

    if name in ("URLMatch", "match_url"):
        from deepnav.routing import matcher as _matcher

        return getattr(_matcher, name)

    if name == "normalize_url":
        from deepnav.routing.normalize import normalize_url

        return normalize_url

    if name in ("ConfigurationError", "DeepNavError", "SchemeRequiredError"):
        from deepnav import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
