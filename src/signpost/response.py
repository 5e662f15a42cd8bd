"""Per-request response collector.

The dispatcher never talks to the transport. Rendered views are written
here and a 404 fallback sets the status; the host (or the WSGI adapter)
turns the collector into a real response.
"""

from dataclasses import dataclass, field


@dataclass(slots=True)
class Response:
    """Status code plus the text emitted while dispatching."""

    status: int = 200
    chunks: list[str] = field(default_factory=list)

    def set_status(self, status: int) -> None:
        self.status = status

    def write(self, text: str) -> None:
        """Append *text* to the response body."""
        self.chunks.append(text)

    @property
    def body(self) -> str:
        return "".join(self.chunks)
