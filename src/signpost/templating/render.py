"""View rendering with kida.

A view is any template file kida can compile. Variables passed to
:meth:`Renderer.render` are the template's whole context; nothing from a
previous render is visible, and kida's strict-undefined mode turns a
reference to an unbound name into an ``UndefinedError``.

One kida Environment is created per template directory on first use and
reused afterwards.
"""

import logging
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

from kida import Environment, FileSystemLoader

from signpost.errors import ConfigurationError, InvalidArgument

logger = logging.getLogger("signpost.templating")


class Renderer:
    """Render view files to strings.

    *view_dir* is called on every render so the renderer follows changes
    to the ``view_dir`` option made after construction.
    """

    __slots__ = ("_autoescape", "_environments", "_view_dir")

    def __init__(
        self,
        view_dir: Callable[[], str | Path | None],
        *,
        autoescape: bool = True,
    ) -> None:
        self._view_dir = view_dir
        self._autoescape = autoescape
        self._environments: dict[Path, Environment] = {}

    def resolve(self, file: str | Path) -> Path:
        """Locate *file* directly or relative to the view directory.

        Raises ``ConfigurationError`` if a relative lookup is needed and no
        view directory is configured, ``InvalidArgument`` if the file does
        not exist either way.
        """
        candidate = Path(file)
        if candidate.is_file():
            return candidate

        view_dir = self._view_dir()
        if view_dir is None:
            msg = (
                f"Cannot resolve view {str(file)!r}: undefined view_dir. "
                'Set it with app.options.set("view_dir", path).'
            )
            raise ConfigurationError(msg)

        candidate = Path(view_dir) / file
        if not candidate.is_file():
            msg = f'View file not found "{candidate}"'
            raise InvalidArgument(msg)
        return candidate

    def environment(self, directory: Path) -> Environment:
        """Return the kida Environment loading templates from *directory*."""
        key = directory.resolve()
        env = self._environments.get(key)
        if env is None:
            env = Environment(
                loader=FileSystemLoader(str(key)),
                autoescape=self._autoescape,
            )
            self._environments[key] = env
        return env

    def render(self, file: str | Path, variables: Mapping[str, Any] | None = None) -> str:
        """Render *file* with *variables* bound and return the output."""
        path = self.resolve(file)
        template = self.environment(path.parent).get_template(path.name)
        logger.debug("Rendering %s", path)
        return template.render(dict(variables or {}))
