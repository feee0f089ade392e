"""URL pattern matching.

Patterns are tried one by one in the order given, comparing path
components left to right. The first pattern that matches wins; there is
no scoring and no backtracking once a pattern matched.
"""

import logging
from collections.abc import Iterable
from typing import NamedTuple

from deepnav.routing.normalize import normalize_url
from deepnav.routing.params import Value, placeholder_value
from deepnav.url import URLLike

logger = logging.getLogger("deepnav.routing")

PATH_PREFIX = "<path:"


class URLMatch(NamedTuple):
    """Result of a successful match.

    Unpacks as ``pattern, values = match``.
    """

    pattern: str
    values: dict[str, Value]


def _match_pattern(pattern: str, path_components: list[str]) -> dict[str, Value] | None:
    """Compare one pattern against the input components.

    Returns the bound values, or ``None`` when the pattern does not match.
    """
    pattern_components = pattern.split("/")  # e.g. ["myapp:", "", "user", "<int:id>"]
    has_path_placeholder = any(c.startswith(PATH_PREFIX) for c in pattern_components)
    if not has_path_placeholder and len(pattern_components) != len(path_components):
        return None

    values: dict[str, Value] = {}
    for i, component in enumerate(pattern_components):
        if i >= len(path_components):
            return None
        info = placeholder_value(component, path_components, i)
        if info is not None:
            key, value = info
            values[key] = value  # e.g. {"id": 123}
            if component.startswith(PATH_PREFIX):
                # <path:> consumes the rest; components after it are never compared
                break
        elif component != path_components[i]:
            return None
    return values


def match_url(
    url: URLLike,
    patterns: Iterable[str],
    *,
    scheme: str | None = None,
    strict: bool = False,
) -> URLMatch | None:
    """Return the first of *patterns* matching *url*, with placeholder values.

    For example::

        >>> match_url("myapp://user/123", ["myapp://user/<int:id>"])
        URLMatch(pattern='myapp://user/<int:id>', values={'id': 123})

    Args:
        url: The placeholder-filled URL.
        patterns: Normalized URL patterns, tried in iteration order.
        scheme: Default scheme for a schemeless *url*.
        strict: Raise ``SchemeRequiredError`` if *url* ends up schemeless.

    Returns:
        A ``URLMatch``, or ``None`` if no pattern matches.
    """
    normalized = normalize_url(url, scheme, strict=strict)
    path_components = normalized.split("/")  # e.g. ["myapp:", "", "user", "123"]

    for pattern in patterns:
        values = _match_pattern(pattern, path_components)
        if values is not None:
            logger.debug("%r matched %r with %r", normalized, pattern, values)
            return URLMatch(pattern, values)
        logger.debug("%r did not match %r", normalized, pattern)

    return None
