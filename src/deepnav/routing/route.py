"""Route and RouteKind definitions."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Protocol

from deepnav.routing.params import Value
from deepnav.url import URLLike


class RouteKind(StrEnum):
    """What a route resolves to.

    NAVIGABLE: a class constructed with ``(url, values)``, e.g. a screen.
    HANDLER:   a callable run with ``(url, values)`` returning ``bool``.
    """

    NAVIGABLE = "navigable"
    HANDLER = "handler"


class Navigable(Protocol):
    """A type that can be built from a URL and its placeholder values."""

    def __init__(self, url: URLLike, values: Mapping[str, Value]) -> None: ...


type OpenHandler = Callable[[URLLike, Mapping[str, Value]], bool]


@dataclass(frozen=True, slots=True)
class Route:
    """A registered URL pattern and its target.

    ``pattern`` is always stored in normalized form.
    """

    pattern: str
    target: Callable[..., Any]
    kind: RouteKind

    @property
    def target_name(self) -> str:
        return getattr(self.target, "__qualname__", repr(self.target))

    def resolve(self, url: URLLike, values: Mapping[str, Value]) -> Any:
        """Invoke the target with *url* and *values*.

        Constructs the navigable or runs the handler; both kinds are
        called the same way.
        """
        return self.target(url, values)


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """A matched route together with its placeholder values."""

    route: Route
    values: dict[str, Value]
