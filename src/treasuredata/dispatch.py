"""Delivery of outcomes to user callbacks."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import Any

from .errors import TreasureDataHttpError
from .log import DebugLogger

Callback = Callable[[TreasureDataHttpError | None, Any], None]


def dispatch(
    loop: asyncio.AbstractEventLoop,
    logger: DebugLogger,
    error: TreasureDataHttpError | None,
    data: Any,
    callback: Callback | None,
) -> None:
    """Report an outcome and schedule the callback on a later loop iteration.

    The callback is never run inline; it receives `(error, data)` with the
    exact record object passed to `send_data`.
    """
    if error is not None:
        logger.error("request failed with HTTP status %s", error.http_status)

    if callback is not None:
        loop.call_soon(callback, error, data)
