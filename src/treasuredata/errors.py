"""Error value delivered to `send_data` callbacks for non-2xx responses."""

from __future__ import annotations

from typing import Any


class TreasureDataHttpError(RuntimeError):
    """HTTP-level error returned by the Treasure Data Postback API.

    The client hands instances to callbacks; it never raises them.
    `http_response` is the parsed JSON error body, or None if the body
    could not be parsed.
    """

    def __init__(self, *, http_status: int, http_response: dict[str, Any] | None):
        """Create an error capturing HTTP status code and parsed body (if any)."""
        self._http_status = http_status
        self._http_response = http_response
        super().__init__(f"Treasure Data API HTTP {http_status}: {http_response}")

    @property
    def http_status(self) -> int:
        return self._http_status

    @property
    def http_response(self) -> dict[str, Any] | None:
        return self._http_response
