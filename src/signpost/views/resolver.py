"""View file discovery.

A request path maps onto a file in the view directory by name, whatever
its extension::

    /about        -> views/about.html
    /docs/intro/  -> views/docs-intro.md
    /             -> views/index.html

Only extensions already present in the directory are tried, in the
order they are first seen in a name-sorted listing.
"""

import logging
from pathlib import Path

from signpost.errors import ConfigurationError

logger = logging.getLogger("signpost.views")

# Base name used for the root path "/"
INDEX_NAME = "index"


def view_name(path: str) -> str:
    """Derive the view base name from a request path.

    Leading and trailing slashes are dropped and inner slashes become
    dashes: ``/docs/intro/`` -> ``docs-intro``.
    """
    name = path.strip("/").replace("/", "-")
    return name or INDEX_NAME


def observed_extensions(view_dir: Path) -> list[str]:
    """Distinct file extensions directly inside *view_dir*, first seen first.

    Non-recursive. Directories and dot entries are skipped. Extensions are
    returned without the leading dot.
    """
    seen: dict[str, None] = {}
    for entry in sorted(view_dir.iterdir()):
        if entry.name.startswith(".") or not entry.is_file():
            continue
        seen.setdefault(entry.suffix[1:], None)
    return list(seen)


def find_file(path: str, view_dir: str | Path | None) -> Path | None:
    """Return the view file for *path*, or ``None`` if there is none.

    Raises ``ConfigurationError`` when *view_dir* is unset or is not a
    directory.
    """
    if view_dir is None:
        msg = 'Undefined view_dir. Set it with app.options.set("view_dir", path).'
        raise ConfigurationError(msg)

    directory = Path(view_dir)
    if not directory.is_dir():
        msg = f"view_dir {str(directory)!r} is not a directory"
        raise ConfigurationError(msg)

    name = view_name(path)
    for ext in observed_extensions(directory):
        if not ext:
            continue
        candidate = directory / f"{name}.{ext}"
        if candidate.is_file():
            logger.debug("View for %r: %s", path, candidate)
            return candidate

    logger.debug("No view for %r in %s", path, directory)
    return None
