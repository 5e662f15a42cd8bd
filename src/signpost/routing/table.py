"""Route table — ordered ``pattern -> handler`` mapping.

The table lives in an option store under ``routes`` so every component
holding the store sees the same routes.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TypeAlias

from signpost._internal.types import Handler
from signpost.options import OptionStore
from signpost.routing.route import Route

ROUTES_KEY = "routes"

# (pattern, handler) pairs, as returned by RouteTable.list()
RouteEntries: TypeAlias = list[tuple[str, Handler]]


class RouteTable:
    """Routes keyed by pattern, in definition order.

    Re-defining a pattern replaces its handler but keeps the position of
    the first definition, which decides ties between overlapping patterns.

    Usage::

        table = RouteTable()
        table.define("/users/:id", show_user)
        table.list()   # [("/users/:id", show_user)]
    """

    __slots__ = ("_routes",)

    def __init__(self) -> None:
        self._routes: dict[str, Route] = {}

    @classmethod
    def from_options(cls, store: OptionStore) -> RouteTable:
        """Return the table held in *store*, creating an empty one if needed."""
        table = store.get(ROUTES_KEY)
        if table is None:
            table = cls()
            store.set(ROUTES_KEY, table)
        return table

    def define(self, pattern: str, handler: Handler) -> None:
        """Map *pattern* to *handler*, replacing any previous handler."""
        if not callable(handler):
            msg = f"Route handler for {pattern!r} must be callable, got {handler!r}"
            raise TypeError(msg)
        self._routes[pattern] = Route(pattern=pattern, handler=handler)

    def get(self, pattern: str) -> Route | None:
        """Return the route defined for exactly *pattern*, if any."""
        return self._routes.get(pattern)

    def list(self) -> RouteEntries:
        """Return ``(pattern, handler)`` pairs in table order."""
        return [(route.pattern, route.handler) for route in self._routes.values()]

    def __contains__(self, pattern: object) -> bool:
        return pattern in self._routes

    def __iter__(self) -> Iterator[Route]:
        return iter(self._routes.values())

    def __len__(self) -> int:
        return len(self._routes)

    def __repr__(self) -> str:
        return f"RouteTable({list(self._routes)!r})"
