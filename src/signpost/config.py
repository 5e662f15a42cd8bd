"""Application configuration.

AppConfig is a frozen dataclass — immutable after creation. An App copies
it into its option store once; runtime overrides go through
``app.options.set(...)``.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from signpost._internal.types import ErrorHandler
from signpost.automap import AutoMap, CustomHandler


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = AppConfig(view_dir="views", auto_map=AutoMap.ENABLED)
    """

    # Views
    view_dir: str | Path | None = None
    auto_map: AutoMap | CustomHandler = AutoMap.DISABLED
    autoescape: bool = True

    # Fallback for unmatched paths
    error_404: ErrorHandler | None = None

    # Logging: level name applied to the "signpost" logger, None leaves it alone
    log_level: str | None = None

    def to_options(self) -> dict[str, Any]:
        """Option-store entries seeded from this config."""
        entries: dict[str, Any] = {"auto_map": self.auto_map}
        if self.view_dir is not None:
            entries["view_dir"] = self.view_dir
        if self.error_404 is not None:
            entries["error_404"] = self.error_404
        return entries
