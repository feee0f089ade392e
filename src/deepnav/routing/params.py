"""Placeholder parsing and type conversion.

A pattern component like ``<int:id>`` is a placeholder; anything else is
a literal compared verbatim. Built-in converters::

    <name> / <string:name>   raw component
    <int:id>                 optionally signed decimal integer, any magnitude
    <float:height>           decimal number with optional exponent, finite
    <path:url>               every remaining component, re-joined by "/"
"""

import math
import re
from collections.abc import Sequence
from dataclasses import dataclass

# (regex_pattern, python_type) for each supported converter
CONVERTERS: dict[str, tuple[str, type]] = {
    "string": (r".*", str),
    "int": (r"[+-]?[0-9]+", int),
    "float": (r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?", float),
    "path": (r".*", str),
}

_COMPILED = {name: re.compile(pattern) for name, (pattern, _) in CONVERTERS.items()}

type Value = str | int | float


@dataclass(frozen=True, slots=True)
class Placeholder:
    """A parsed ``<type:key>`` pattern component."""

    key: str
    type: str = "string"


def parse_placeholder(component: str) -> Placeholder | None:
    """Parse a pattern component into a ``Placeholder``.

    Returns ``None`` for literals, for malformed placeholders (``<>``,
    ``<int:>``), and for unknown converter types (``<uuid:id>``), all of
    which are then compared as literals.
    """
    if not (component.startswith("<") and component.endswith(">")):
        return None
    inner = component[1:-1]  # e.g. "<int:id>" -> "int:id"
    if ":" in inner:
        param_type, key = inner.split(":", 1)
    else:
        param_type, key = "string", inner
    if not key or param_type not in CONVERTERS:
        return None
    return Placeholder(key=key, type=param_type)


def convert_param(value: str, param_type: str) -> Value:
    """Convert a single path component to the target type.

    Integers are unbounded (up to the interpreter's int string-conversion
    limit); floats that overflow to infinity are rejected.

    Raises ``ValueError`` if the string is not a valid literal for the type.
    Raises ``KeyError`` if *param_type* is not a registered converter.
    """
    _, target_type = CONVERTERS[param_type]
    if not _COMPILED[param_type].fullmatch(value):
        msg = f"{value!r} is not a valid {param_type}"
        raise ValueError(msg)
    converted = target_type(value)
    if isinstance(converted, float) and not math.isfinite(converted):
        # "1e400" overflows to inf
        msg = f"{value!r} is out of range for float"
        raise ValueError(msg)
    return converted


def placeholder_value(
    component: str,
    path_components: Sequence[str],
    index: int,
) -> tuple[str, Value] | None:
    """Extract the value bound by a placeholder component.

    Args:
        component: The pattern component, e.g. ``"<int:id>"``.
        path_components: The full input URL split on ``"/"``.
        index: Position of *component* within the pattern.

    Returns:
        ``(key, value)`` on success, or ``None`` if *component* is not a
        placeholder, *index* is out of range, or the input component does
        not convert (``"abc"`` for ``<int:id>``).
    """
    placeholder = parse_placeholder(component)
    if placeholder is None or not 0 <= index < len(path_components):
        return None

    if placeholder.type == "path":
        return placeholder.key, "/".join(path_components[index:])

    try:
        value = convert_param(path_components[index], placeholder.type)
    except ValueError:
        return None
    return placeholder.key, value
