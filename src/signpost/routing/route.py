"""Route and RouteMatch frozen dataclasses."""

from dataclasses import dataclass

from signpost._internal.types import Handler


@dataclass(frozen=True, slots=True)
class Route:
    """A pattern and the handler it dispatches to.

    Pattern:  ``/users/:id``  — ``:id`` is a positional parameter
    """

    pattern: str
    handler: Handler


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful match: the route plus captured parameters."""

    route: Route
    params: tuple[str, ...] = ()

    @property
    def handler(self) -> Handler:
        return self.route.handler
