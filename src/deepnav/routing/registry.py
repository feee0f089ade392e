"""Ordered route registry.

Maps normalized URL patterns to ``Route`` entries. Iteration follows
registration order, so "first registered, first tried" holds for
overlapping patterns.

Free-threading safety:
    - Route is a frozen dataclass (immutable, safe to share)
    - Writers hold a Lock while mutating the table
    - ``keys()`` returns a snapshot, so a match in progress never sees a
      half-applied registration
"""

import threading
from collections.abc import Iterator

from deepnav.routing.route import Route


class RouteRegistry:
    """Insertion-ordered ``pattern -> Route`` table.

    Usage::

        registry = RouteRegistry()
        registry.register(Route("myapp://user/<int:id>", UserView, RouteKind.NAVIGABLE))
        match = match_url("myapp://user/1", registry.keys())
        route = registry.lookup(match.pattern)
    """

    __slots__ = ("_lock", "_routes")

    def __init__(self) -> None:
        self._routes: dict[str, Route] = {}
        self._lock = threading.Lock()

    def register(self, route: Route) -> None:
        """Add *route*, replacing any route with the same pattern.

        A replaced pattern keeps its original position in the order.
        """
        with self._lock:
            self._routes[route.pattern] = route

    def lookup(self, pattern: str) -> Route | None:
        return self._routes.get(pattern)

    def keys(self) -> tuple[str, ...]:
        """Snapshot of registered patterns in registration order."""
        with self._lock:
            return tuple(self._routes)

    def clear(self) -> None:
        with self._lock:
            self._routes.clear()

    def __contains__(self, pattern: object) -> bool:
        return pattern in self._routes

    def __iter__(self) -> Iterator[Route]:
        with self._lock:
            routes = tuple(self._routes.values())
        return iter(routes)

    def __len__(self) -> int:
        return len(self._routes)
