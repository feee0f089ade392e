"""The Navigator — maps URL patterns to navigables and open handlers.

Navigables are classes built from a URL and its placeholder values
(typically screens). Open handlers are callables run for a URL and
returning ``True`` when they handled it.

Mapping::

    navigator = Navigator(NavigatorConfig(scheme="myapp"))
    navigator.map("/user/<int:id>", UserView)      # -> myapp://user/<int:id>
    navigator.map("http://<path:url>", WebView)

    @navigator.route("/say-hello")
    def say_hello(url, values):
        print("Hello, world!")
        return True

Resolving::

    view = navigator.navigable_for_url("myapp://user/123")  # UserView(url, {"id": 123})
    navigator.open_url("myapp://say-hello")                 # prints "Hello, world!"
    navigator.push_url("myapp://user/123", presenter=presenter)

Thread safety: registration is serialized by each registry's lock and
matching reads a snapshot of the patterns. Changing ``scheme`` while
other threads map or match is not synchronized.
"""

import logging
import threading
from collections.abc import Callable
from typing import Any

from deepnav.config import NavigatorConfig
from deepnav.errors import ConfigurationError
from deepnav.presenter import Presenter
from deepnav.routing.matcher import match_url
from deepnav.routing.normalize import normalize_url
from deepnav.routing.registry import RouteRegistry
from deepnav.routing.route import Navigable, OpenHandler, Route, RouteKind, RouteMatch
from deepnav.url import URLLike

logger = logging.getLogger("deepnav.navigator")


class Navigator:
    """URL-pattern navigator.

    Holds two ordered registries: one for navigables, one for open
    handlers. Patterns are normalized with the navigator's scheme before
    they are stored, and incoming URLs are normalized the same way before
    they are matched.
    """

    __slots__ = ("_handlers", "_navigables", "_scheme", "config", "presenter")

    def __init__(
        self,
        config: NavigatorConfig | None = None,
        *,
        presenter: Presenter | None = None,
    ) -> None:
        self.config: NavigatorConfig = config or NavigatorConfig()
        self.presenter: Presenter | None = presenter
        self._navigables = RouteRegistry()
        self._handlers = RouteRegistry()
        self._scheme: str | None = None
        self.scheme = self.config.scheme

    # -- Scheme --

    @property
    def scheme(self) -> str | None:
        """Default scheme for schemeless URLs and patterns.

        Assigning ``"myapp://"`` stores ``"myapp"``.
        """
        return self._scheme

    @scheme.setter
    def scheme(self, value: str | None) -> None:
        if value is not None and "://" in value:
            value = value.split("://", 1)[0]
        self._scheme = value

    # -- URL mapping --

    def map(self, pattern: URLLike, target: Callable[..., Any]) -> Route:
        """Map *pattern* to a navigable class or an open handler.

        Classes are registered as navigables, any other callable as an
        open handler. Use ``map_navigable`` / ``map_handler`` to force
        the kind (e.g. a factory function that builds screens).
        """
        if isinstance(target, type):
            return self.map_navigable(pattern, target)
        if callable(target):
            return self.map_handler(pattern, target)
        msg = f"Cannot map {pattern!r} to {type(target).__name__}: target must be a class or callable"
        raise ConfigurationError(msg)

    def map_navigable(
        self, pattern: URLLike, navigable: type[Navigable] | Callable[..., Any]
    ) -> Route:
        """Map *pattern* to a navigable built as ``navigable(url, values)``."""
        return self._register(self._navigables, pattern, navigable, RouteKind.NAVIGABLE)

    def map_handler(self, pattern: URLLike, handler: OpenHandler) -> Route:
        """Map *pattern* to an open handler run as ``handler(url, values)``."""
        return self._register(self._handlers, pattern, handler, RouteKind.HANDLER)

    def route(self, pattern: URLLike) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Register a navigable or open handler via decorator."""

        def decorator(target: Callable[..., Any]) -> Callable[..., Any]:
            self.map(pattern, target)
            return target

        return decorator

    def _register(
        self,
        registry: RouteRegistry,
        pattern: URLLike,
        target: Callable[..., Any],
        kind: RouteKind,
    ) -> Route:
        if not callable(target):
            msg = f"Cannot map {pattern!r}: {kind} must be callable"
            raise ConfigurationError(msg)
        normalized = self.normalize(pattern)
        if normalized in registry:
            logger.debug("Replacing %s for %r", kind, normalized)
        route = Route(pattern=normalized, target=target, kind=kind)
        registry.register(route)
        return route

    @property
    def routes(self) -> list[Route]:
        """All registered routes: navigables first, then open handlers."""
        return [*self._navigables, *self._handlers]

    # -- Matching URLs --

    def normalize(self, url: URLLike) -> str:
        """Normalize *url* with this navigator's scheme and strictness."""
        return normalize_url(url, self.scheme, strict=self.config.strict)

    def match(self, url: URLLike, kind: RouteKind | str | None = None) -> RouteMatch | None:
        """Find the route matching *url*.

        Searches navigables, open handlers, or (when *kind* is ``None``)
        navigables first and then open handlers. *kind* may be given as
        ``"navigable"`` / ``"handler"``; any other value raises ``ValueError``.
        """
        if kind is None:
            registries = (self._navigables, self._handlers)
        elif RouteKind(kind) is RouteKind.NAVIGABLE:
            registries = (self._navigables,)
        else:
            registries = (self._handlers,)

        for registry in registries:
            found = match_url(
                url, registry.keys(), scheme=self.scheme, strict=self.config.strict
            )
            if found is None:
                continue
            route = registry.lookup(found.pattern)
            if route is None:
                # Pattern removed between snapshot and lookup
                continue
            if self.config.log_matches:
                logger.info("%r -> %s %r %r", url, route.kind, route.pattern, found.values)
            return RouteMatch(route=route, values=found.values)
        return None

    def navigable_for_url(self, url: URLLike) -> Any | None:
        """Build the navigable mapped to *url*, or return ``None``."""
        found = self.match(url, RouteKind.NAVIGABLE)
        if found is None:
            return None
        return found.route.resolve(url, found.values)

    # -- Pushing and presenting --

    def push_url(
        self,
        url: URLLike,
        *,
        presenter: Presenter | None = None,
        animated: bool = True,
    ) -> Any | None:
        """Build the navigable for *url* and push it.

        Returns the pushed navigable, or ``None`` if nothing matched or the
        presenter refused.
        """
        navigable = self.navigable_for_url(url)
        if navigable is None:
            return None
        return self.push(navigable, presenter=presenter, animated=animated)

    def push(
        self,
        navigable: Any,
        *,
        presenter: Presenter | None = None,
        animated: bool = True,
    ) -> Any | None:
        """Push *navigable* through *presenter* (or the navigator's own)."""
        if presenter is None:
            presenter = self.presenter
        if presenter is None or not presenter.push(navigable, animated=animated):
            return None
        return navigable

    def present_url(
        self,
        url: URLLike,
        *,
        presenter: Presenter | None = None,
        wrap: bool = False,
        animated: bool = True,
        completion: Callable[[], None] | None = None,
    ) -> Any | None:
        """Build the navigable for *url* and present it.

        Set *wrap* to ask the presenter to embed the navigable in a
        navigation container first. Returns the presented navigable, or
        ``None`` if nothing matched or the presenter refused.
        """
        navigable = self.navigable_for_url(url)
        if navigable is None:
            return None
        return self.present(
            navigable, presenter=presenter, wrap=wrap, animated=animated, completion=completion
        )

    def present(
        self,
        navigable: Any,
        *,
        presenter: Presenter | None = None,
        wrap: bool = False,
        animated: bool = True,
        completion: Callable[[], None] | None = None,
    ) -> Any | None:
        """Present *navigable* through *presenter* (or the navigator's own)."""
        if presenter is None:
            presenter = self.presenter
        if presenter is None:
            return None
        if not presenter.present(navigable, wrap=wrap, animated=animated, completion=completion):
            return None
        return navigable

    # -- Opening URLs --

    def open_url(self, url: URLLike) -> bool:
        """Run the open handler mapped to *url*.

        Returns ``True`` only if a handler matched and returned ``True``.
        """
        found = self.match(url, RouteKind.HANDLER)
        if found is None:
            return False
        return found.route.resolve(url, found.values) is True


# -- Default navigator --

_default: Navigator | None = None
_default_lock = threading.Lock()


def default_navigator() -> Navigator:
    """Return the process-wide default navigator, creating it on first use.

    Library code should accept a ``Navigator`` argument instead of calling
    this. Map all patterns at startup from one thread; after that the
    instance is read-mostly and safe to match against from any thread.
    """
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = Navigator()
    return _default
