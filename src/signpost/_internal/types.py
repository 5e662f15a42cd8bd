"""Shared type aliases used across signpost modules."""

from collections.abc import Callable
from typing import Any, TypeAlias

# Route handler: user-defined function taking one positional arg per path token
Handler: TypeAlias = Callable[..., Any]

# 404 handler: called with no arguments, returns the response value
ErrorHandler: TypeAlias = Callable[[], Any]

# Auto-map hook: receives the unmatched request path
AutoMapHandler: TypeAlias = Callable[[str], Any]
