"""Route resolution.

Two passes over the table:

1. Exact match: the path is literally a defined pattern. Wins over any
   pattern that could also match it, and captures no parameters.
2. Pattern match: patterns are tried in table order; the first one that
   matches the whole path wins.

Absence is a normal outcome: ``resolve`` returns ``None`` rather than
raising.
"""

from signpost.routing.pattern import match_pattern
from signpost.routing.route import RouteMatch
from signpost.routing.table import RouteTable


def resolve(path: str, table: RouteTable) -> RouteMatch | None:
    """Find the route for *path*, or ``None`` if nothing matches."""
    route = table.get(path)
    if route is not None:
        return RouteMatch(route=route, params=())

    for route in table:
        params = match_pattern(route.pattern, path)
        if params is not None:
            return RouteMatch(route=route, params=params)

    return None
