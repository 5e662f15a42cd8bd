"""Auto-map setting — what the dispatcher does with an unmatched path.

A tagged variant replacing the "callable or truthy flag" option value::

    AutoMap.DISABLED           # skip straight to the 404 handler
    AutoMap.ENABLED            # look for a view file named after the path
    CustomHandler(fn)          # hand the path to fn and return its result
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from signpost._internal.types import AutoMapHandler


class AutoMap(Enum):
    DISABLED = "disabled"
    ENABLED = "enabled"

    @staticmethod
    def coerce(value: Any) -> AutoMap | CustomHandler:
        """Normalize an ``auto_map`` option value.

        Accepts the variant itself plus the loose forms a plain option
        store allows: any falsy value disables, a callable becomes a
        :class:`CustomHandler` and any other truthy value enables.
        """
        if isinstance(value, (AutoMap, CustomHandler)):
            return value
        if not value:
            return AutoMap.DISABLED
        if callable(value):
            return CustomHandler(value)
        return AutoMap.ENABLED


@dataclass(frozen=True, slots=True)
class CustomHandler:
    """Auto-map through a user function called with the unmatched path."""

    handler: AutoMapHandler

    def __call__(self, path: str) -> Any:
        return self.handler(path)
