"""Transport adapters.

The client depends on this small interface so the HTTP stack can be swapped
(or faked in tests) without touching request building or response handling.
"""

from __future__ import annotations

import asyncio
from typing import Protocol

import requests  # type: ignore
from pydantic import BaseModel, ConfigDict

from .request import PreparedRequest


class TransportResponse(BaseModel):
    """Raw outcome of a completed HTTP call."""

    model_config = ConfigDict(frozen=True)

    status_code: int
    body: str


class Transport(Protocol):
    async def send(self, request: PreparedRequest) -> TransportResponse:
        """Send the request and return the raw status and body."""


class RequestsTransport:
    """Default transport: `requests` executed in a worker thread.

    Transport errors (`requests.RequestException`) propagate to the caller.
    """

    def __init__(self, timeout: float = 30.0) -> None:
        self.timeout = timeout

    async def send(self, request: PreparedRequest) -> TransportResponse:
        def _do_request() -> TransportResponse:
            """Execute the HTTP request synchronously (runs in a worker thread)."""
            resp = requests.request(
                request.method,
                request.url,
                headers=request.headers,
                data=request.body.encode("utf-8"),
                timeout=self.timeout,
            )
            return TransportResponse(status_code=resp.status_code, body=resp.text)

        return await asyncio.to_thread(_do_request)
