"""Routing — URL normalization and ordered pattern matching.

Patterns are normalized when registered, incoming URLs when matched,
and candidates are tried in registration order.
"""

from deepnav.routing.matcher import URLMatch, match_url
from deepnav.routing.normalize import normalize_url, url_with_scheme
from deepnav.routing.params import CONVERTERS, Placeholder, parse_placeholder, placeholder_value
from deepnav.routing.regex import replace_regex
from deepnav.routing.registry import RouteRegistry
from deepnav.routing.route import Route, RouteKind, RouteMatch

__all__ = [
    "CONVERTERS",
    "Placeholder",
    "Route",
    "RouteKind",
    "RouteMatch",
    "RouteRegistry",
    "URLMatch",
    "match_url",
    "normalize_url",
    "parse_placeholder",
    "placeholder_value",
    "replace_regex",
    "url_with_scheme",
]
