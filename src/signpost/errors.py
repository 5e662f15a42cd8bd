"""Signpost exception hierarchy.

Shared across the matcher, view resolver, renderer and dispatcher so
every module raises and catches the same types.
"""


class SignpostError(Exception):
    """Base for all signpost-specific errors."""


class ConfigurationError(SignpostError):
    """Raised when an option the current operation needs is missing or invalid.

    Typically ``view_dir`` being unset when a view lookup or a relative
    render is attempted.
    """


class InvalidArgument(SignpostError, ValueError):  # noqa: N818
    """A render target could not be resolved to an existing file."""


class RouteNotFound(SignpostError, LookupError):  # noqa: N818
    """No route, auto-map hit, view file or 404 handler for a request path.

    The only failure the dispatcher does not recover from locally.
    """

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(
            f"Route not found for {path!r}. "
            'Configure a fallback with app.options.set("error_404", handler).'
        )
