"""WSGI adapter.

Lets any WSGI server host an App::

    from wsgiref.simple_server import make_server
    make_server("127.0.0.1", 8000, app).serve_forever()

Handler results become the response body: ``bytes`` as-is, ``str``
UTF-8 encoded, ``True``/``None`` mean "use what was written to the
response" (a rendered view). Anything else is sent as ``str(result)``.
``RouteNotFound`` becomes a plain-text 404.
"""

from collections.abc import Callable
from http import HTTPStatus
from typing import TYPE_CHECKING, Any

from signpost.errors import RouteNotFound
from signpost.response import Response

if TYPE_CHECKING:
    from signpost.app import App

CONTENT_TYPE = "text/html; charset=utf-8"


def status_line(status: int) -> str:
    """``404`` -> ``"404 Not Found"``."""
    try:
        return f"{status} {HTTPStatus(status).phrase}"
    except ValueError:
        return f"{status} Unknown"


def request_path_info(environ: dict[str, Any]) -> str:
    """Return ``PATH_INFO`` as text.

    WSGI servers hand the path over as latin-1 decoded bytes; browsers send
    UTF-8, so the bytes are decoded again. Invalid sequences become U+FFFD.
    """
    raw = environ.get("PATH_INFO", "")
    return raw.encode("latin-1").decode("utf-8", "replace") or "/"


def encode_body(result: Any, response: Response) -> bytes:
    """Serialize a dispatch result into response bytes."""
    if isinstance(result, bytes):
        return result
    if isinstance(result, str):
        return result.encode("utf-8")
    if result is None or result is True:
        return response.body.encode("utf-8")
    return str(result).encode("utf-8")


def handle(app: App, environ: dict[str, Any], start_response: Callable[..., Any]) -> list[bytes]:
    """Dispatch one WSGI request through *app*."""
    response = Response()
    path = request_path_info(environ)
    try:
        result = app.run(path=path, response=response)
    except RouteNotFound as exc:
        body = str(exc).encode("utf-8")
        start_response(
            status_line(404),
            [("Content-Type", "text/plain; charset=utf-8"), ("Content-Length", str(len(body)))],
        )
        return [body]

    body = encode_body(result, response)
    start_response(
        status_line(response.status),
        [("Content-Type", CONTENT_TYPE), ("Content-Length", str(len(body)))],
    )
    return [body]
