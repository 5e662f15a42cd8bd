"""Signpost application — route registration and request dispatch.

An App owns an option store holding its configuration, its route table
and the parameters of the last match. Dispatching one request walks a
fixed fallback chain:

1. a defined route (exact path first, then patterns in definition order)
2. the ``auto_map`` setting: a custom handler, or a view file named after
   the path
3. the ``error_404`` handler, with the status set to 404
4. ``RouteNotFound``
"""

import logging
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

from signpost._internal.types import ErrorHandler, Handler
from signpost.automap import AutoMap, CustomHandler
from signpost.config import AppConfig
from signpost.errors import RouteNotFound
from signpost.options import OptionStore
from signpost.request import request_path, strip_query
from signpost.response import Response
from signpost.routing.matcher import resolve
from signpost.routing.route import RouteMatch
from signpost.routing.table import RouteTable
from signpost.templating.render import Renderer
from signpost.views.resolver import find_file

logger = logging.getLogger("signpost.dispatch")

PARAMS_KEY = "params"


class App:
    """The signpost application.

    Usage::

        app = App(AppConfig(view_dir="views", auto_map=AutoMap.ENABLED))

        @app.route("/users/:id")
        def show_user(user_id):
            return f"user {user_id}"

        app.run(path="/users/42")   # "user 42"

    Single-threaded: one request is dispatched completely before the next
    starts. Hosts that share an App between threads must serialize calls
    to :meth:`run`.
    """

    __slots__ = ("_renderer", "config", "options")

    def __init__(
        self,
        config: AppConfig | None = None,
        *,
        options: OptionStore | None = None,
    ) -> None:
        self.config: AppConfig = config or AppConfig()
        self.options: OptionStore = options if options is not None else OptionStore()
        for name, value in self.config.to_options().items():
            if name not in self.options:
                self.options.set(name, value)
        self._renderer = Renderer(
            lambda: self.options.get("view_dir"),
            autoescape=self.config.autoescape,
        )
        if self.config.log_level is not None:
            logging.getLogger("signpost").setLevel(self.config.log_level.upper())

    # -- Setup --

    @property
    def routes(self) -> RouteTable:
        """The route table kept in this app's option store."""
        return RouteTable.from_options(self.options)

    def define(self, pattern: str, handler: Handler) -> None:
        """Map *pattern* to *handler*. Re-defining a pattern replaces its handler."""
        self.routes.define(pattern, handler)

    def route(self, pattern: str) -> Callable[[Handler], Handler]:
        """Register the decorated function as the handler for *pattern*."""

        def decorator(func: Handler) -> Handler:
            self.define(pattern, func)
            return func

        return decorator

    def error_404(self, func: ErrorHandler) -> ErrorHandler:
        """Register the decorated function as the 404 handler."""
        self.options.set("error_404", func)
        return func

    # -- Typed option access --

    @property
    def view_dir(self) -> str | Path | None:
        return self.options.get("view_dir")

    @property
    def auto_map(self) -> AutoMap | CustomHandler:
        return AutoMap.coerce(self.options.get("auto_map"))

    @property
    def params(self) -> tuple[str, ...]:
        """Parameters captured by the most recent successful match."""
        return self.options.get(PARAMS_KEY, ())

    # -- Matching and views --

    def match(self, path: str) -> RouteMatch | None:
        """Resolve *path* and record the captured parameters.

        ``params`` in the option store is overwritten on every successful
        match and left untouched when nothing matches.
        """
        result = resolve(path, self.routes)
        if result is not None:
            self.options.set(PARAMS_KEY, result.params)
        return result

    def view(self, path: str) -> Path | None:
        """Return the view file named after *path*, if one exists."""
        return find_file(path, self.view_dir)

    def render(self, file: str | Path, **variables: Any) -> str:
        """Render a view file, given directly or relative to ``view_dir``."""
        return self._renderer.render(file, variables)

    # -- Dispatch --

    def run(
        self,
        environ: Mapping[str, str] | None = None,
        *,
        path: str | None = None,
        response: Response | None = None,
    ) -> Any:
        """Dispatch one request and return the handler's result.

        The path is *path* if given (query string stripped), otherwise it
        is read from *environ* (``os.environ`` when omitted). Rendered
        views are written to *response*, and the 404 fallback sets its
        status; pass one in to observe those side effects.

        Raises ``RouteNotFound`` when every fallback is exhausted.
        """
        if response is None:
            response = Response()
        uri = strip_query(path) if path is not None else request_path(environ)

        match = self.match(uri)
        if match is not None:
            logger.debug(
                "Route %r matched %r with params %r", match.route.pattern, uri, match.params
            )
            return match.handler(*match.params)

        auto_map = self.auto_map
        if isinstance(auto_map, CustomHandler):
            logger.debug("No route for %r, delegating to auto_map handler", uri)
            return auto_map(uri)

        if auto_map is AutoMap.ENABLED:
            file = self.view(uri)
            if file is not None:
                logger.debug("No route for %r, rendering view %s", uri, file)
                response.write(self._renderer.render(file))
                return True

        error_404 = self.options.get("error_404")
        if callable(error_404):
            logger.debug("No route or view for %r, calling error_404", uri)
            response.set_status(404)
            return error_404()

        logger.warning("Route not found for %r", uri)
        raise RouteNotFound(uri)

    # -- WSGI --

    def wsgi_app(self, environ: dict[str, Any], start_response: Callable[..., Any]) -> list[bytes]:
        """WSGI entry point. See :mod:`signpost.wsgi`."""
        from signpost.wsgi import handle

        return handle(self, environ, start_response)

    def __call__(self, environ: dict[str, Any], start_response: Callable[..., Any]) -> list[bytes]:
        return self.wsgi_app(environ, start_response)
