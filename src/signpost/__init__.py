"""Signpost — a small request router and view renderer.

Routes map path patterns to handlers; paths with no route can fall back
to a template file named after them.

Basic usage::

    from signpost import App, AppConfig, AutoMap

    app = App(AppConfig(view_dir="views", auto_map=AutoMap.ENABLED))

    @app.route("/users/:id")
    def show_user(user_id):
        return f"user {user_id}"

    app.run(path="/users/42")
"""

__version__ = "0.1.0-dev"
__all__ = [
    "App",
    "AppConfig",
    "AutoMap",
    "ConfigurationError",
    "CustomHandler",
    "InvalidArgument",
    "OptionStore",
    "Response",
    "RouteNotFound",
    "RouteTable",
    "SignpostError",
    "option",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import signpost`` fast while providing a clean top-level API.
    """
    if name == "App":
        from signpost.app import App

        return App

    if name == "AppConfig":
        from signpost.config import AppConfig

        return AppConfig

    if name in ("AutoMap", "CustomHandler"):
        from signpost import automap as _automap

        return getattr(_automap, name)

    if name in ("OptionStore", "option"):
        from signpost import options as _options

        return getattr(_options, name)

    if name == "Response":
        from signpost.response import Response

        return Response

    if name == "RouteTable":
        from signpost.routing.table import RouteTable

        return RouteTable

    if name in ("ConfigurationError", "InvalidArgument", "RouteNotFound", "SignpostError"):
        from signpost import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
