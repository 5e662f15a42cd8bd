"""Route pattern compilation.

A pattern is a path template where ``:name`` tokens (a colon followed by
one or more ASCII letters or digits) capture one path segment::

    "/users/:id"        -> ^/users/([^/]+)$
    "/a/:x/b/:y"        -> ^/a/([^/]+)/b/([^/]+)$
    "/files/v1.0/:name" -> ^/files/v1\\.0/([^/]+)$

Text outside tokens is matched literally.
"""

import re
from functools import lru_cache

TOKEN = re.compile(r":[a-zA-Z0-9]+")

# One path segment: any run of characters except "/"
SEGMENT = r"([^/]+)"


def param_names(pattern: str) -> list[str]:
    """Return the token names in *pattern*, left to right, without colons."""
    return [m.group()[1:] for m in TOKEN.finditer(pattern)]


@lru_cache(maxsize=512)
def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile *pattern* into a regex anchored to the full path.

    Literal parts are escaped, so ``.`` or ``+`` in a pattern only match
    themselves. Results are cached per pattern string.
    """
    parts: list[str] = []
    pos = 0
    for m in TOKEN.finditer(pattern):
        parts.append(re.escape(pattern[pos : m.start()]))
        parts.append(SEGMENT)
        pos = m.end()
    parts.append(re.escape(pattern[pos:]))
    return re.compile(f"^{''.join(parts)}$")


def match_pattern(pattern: str, path: str) -> tuple[str, ...] | None:
    """Match *path* against *pattern*.

    Returns the captured parameters in order, or ``None`` if the path
    does not match in full.
    """
    m = compile_pattern(pattern).match(path)
    if m is None:
        return None
    return m.groups()
