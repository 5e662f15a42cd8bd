"""Request path extraction.

The host hands over a CGI/WSGI-style environ mapping; the router only
ever needs the path, without its query string.
"""

import os
from collections.abc import Mapping


def strip_query(uri: str) -> str:
    """Drop everything from the first ``?`` onward.

    A ``?`` in the first position is stripped too, leaving the root path.
    """
    path, _, _ = uri.partition("?")
    return path or "/"


def request_path(environ: Mapping[str, str] | None = None) -> str:
    """Return the request path from *environ* with the query string removed.

    Reads ``REQUEST_URI`` when the host provides it, falling back to
    ``PATH_INFO`` and finally ``/``. *environ* defaults to ``os.environ``,
    which is where a CGI host puts the request.
    """
    if environ is None:
        environ = os.environ
    uri = environ.get("REQUEST_URI")
    if uri is None:
        uri = environ.get("PATH_INFO") or "/"
    return strip_query(uri)
