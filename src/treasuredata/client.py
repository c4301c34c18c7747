"""Async client for the Treasure Data Postback API.

Each `send_data` call is a single fire-and-forget POST:

- The request (URL, headers, JSON body) is built synchronously, so a record
  that cannot be serialized raises at the call site.
- The send itself runs as a background task on the running event loop and
  `send_data` returns immediately.
- When the transport completes, the response is interpreted and the user
  callback is scheduled with `loop.call_soon`, never invoked inline.

There is no retry, batching or rate limiting: one call, one request, one
callback.
"""

from __future__ import annotations

import asyncio
from typing import Any

from .config import DEFAULT_ENDPOINT, TreasureDataConfig
from .dispatch import Callback, dispatch
from .errors import TreasureDataHttpError
from .log import DebugLogger
from .request import PreparedRequest, build_path, build_request
from .response import interpret_response
from .transport import RequestsTransport, Transport


class TreasureDataClient:
    """Client that posts records to `/postback/v3/event/{db}/{table}`.

    Members:
    - Config: `config` (immutable; holds the api key and derived headers)
    - Transport: `transport` (`RequestsTransport` unless one is supplied)
    - In-flight sends: `_pending` (tasks kept alive until they finish)
    """

    def __init__(
        self,
        api_key: str,
        *,
        endpoint: str = DEFAULT_ENDPOINT,
        timeout: float = 30.0,
        debug: bool = False,
        transport: Transport | None = None,
    ):
        """Create a client for the given write key. No I/O is performed."""
        self.config = TreasureDataConfig(api_key=api_key, endpoint=endpoint, timeout=timeout, debug=debug)
        self.transport: Transport = transport or RequestsTransport(timeout=self.config.timeout)
        self._logger = DebugLogger(enabled=self.config.debug)
        self._pending: set[asyncio.Task[TreasureDataHttpError | None]] = set()

    @classmethod
    def from_config(cls, config: TreasureDataConfig, *, transport: Transport | None = None) -> TreasureDataClient:
        """Create a client from a loaded `TreasureDataConfig`."""
        return cls(
            config.api_key,
            endpoint=config.endpoint,
            timeout=config.timeout,
            debug=config.debug,
            transport=transport,
        )

    @property
    def debug(self) -> bool:
        return self._logger.enabled

    def set_debug(self, enabled: bool) -> None:
        """Enable or disable lifecycle logging for subsequent events."""
        self._logger.enabled = bool(enabled)

    def send_data(
        self,
        db_name: str,
        table_name: str,
        data: Any,
        callback: Callback | None = None,
    ) -> asyncio.Task[TreasureDataHttpError | None]:
        """Post `data` to `db_name.table_name` without waiting for the response.

        Must be called from a running event loop. The returned task resolves
        to the error value (None on success) once the callback has been
        scheduled; awaiting it is optional.

        Raises:
        - `ValueError` when `data` is None
        - `TypeError` / `ValueError` when `data` is not JSON-serializable
        - `RuntimeError` when no event loop is running
        """
        if data is None:
            raise ValueError("send_data requires a record (use {} for an empty one)")

        loop = asyncio.get_running_loop()
        path = build_path(db_name, table_name)
        request = build_request("POST", self.config.endpoint, path, self.config.headers, data)
        self._logger.trace("sending %s %s body=%s", request.method, request.url, request.body)

        task = loop.create_task(self._send(request, data, callback), name=f"treasuredata-send {path}")
        self._pending.add(task)
        task.add_done_callback(self._on_send_done)
        return task

    def _on_send_done(self, task: asyncio.Task[TreasureDataHttpError | None]) -> None:
        """Forget a finished send.

        A transport failure stays on the task for callers that await it, but
        is marked retrieved so an unawaited send does not log through asyncio.
        """
        self._pending.discard(task)
        if not task.cancelled():
            task.exception()

    async def _send(self, request: PreparedRequest, data: Any, callback: Callback | None) -> TreasureDataHttpError | None:
        """Send one request and deliver its outcome."""
        try:
            response = await self.transport.send(request)
        except Exception as exc:
            # Transport failures are not recovered; the callback is not invoked.
            self._logger.error("transport failure for %s: %r", request.url, exc)
            raise

        error = interpret_response(response, self._logger)
        dispatch(asyncio.get_running_loop(), self._logger, error, data, callback)
        return error

    async def aclose(self) -> None:
        """Wait for all in-flight sends to finish.

        Safe to call multiple times. Transport failures of individual sends
        are not re-raised here; they remain on the task returned by
        `send_data`.
        """
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)
