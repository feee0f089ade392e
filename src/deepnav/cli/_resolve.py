"""Locate the navigator a CLI command should inspect.

``deepnav routes`` and ``deepnav match`` take an import string such as
``myapp.navigation:navigator``. The named object may be:

- a ``Navigator``
- a mapping of URL patterns to targets, mapped onto a fresh navigator
  in iteration order (``{"myapp://user/<int:id>": UserView, ...}``)
- a zero-argument factory returning either of the above
"""

import importlib
from collections.abc import Mapping

from deepnav.errors import ConfigurationError
from deepnav.navigator import Navigator


def _navigator_from(obj: object, import_string: str) -> Navigator | None:
    if isinstance(obj, Navigator):
        return obj
    if isinstance(obj, Mapping):
        navigator = Navigator()
        for pattern, target in obj.items():
            try:
                navigator.map(pattern, target)
            except ConfigurationError as exc:
                msg = f"{import_string!r}: pattern {pattern!r} cannot be mapped: {exc}"
                raise TypeError(msg) from exc
        return navigator
    return None


def resolve_navigator(import_string: str) -> Navigator:
    """Resolve ``"module[:attribute]"`` to a Navigator.

    The attribute defaults to ``navigator``. Schemes are taken from the
    patterns themselves when a mapping is given, so its patterns must be
    absolute (``myapp://...``).

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the module has no such attribute.
        TypeError: If the object is neither a navigator, a pattern
            mapping, nor a factory for one.
    """
    module_path, _, attr_name = import_string.partition(":")
    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name or "navigator")

    navigator = _navigator_from(obj, import_string)
    if navigator is None and callable(obj):
        try:
            built = obj()
        except Exception as exc:
            msg = f"Navigator factory {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc
        navigator = _navigator_from(built, import_string)
        obj = built

    if navigator is None:
        msg = (
            f"{import_string!r} resolved to {type(obj).__name__}; "
            "expected a deepnav.Navigator or a mapping of URL patterns to targets"
        )
        raise TypeError(msg)
    return navigator
