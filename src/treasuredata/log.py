"""Debug logging for the request/response lifecycle.

Lines go to the stdlib logger named `treasuredata` and carry a fixed tag so
they are easy to grep out of application logs. Nothing is emitted unless the
owning client has debug mode enabled.
"""

from __future__ import annotations

import logging
from typing import Any

LOG_PREFIX = "[TreasureData]"

logger = logging.getLogger("treasuredata")


class DebugLogger:
    """Runtime-toggled logger with two severities: trace and error."""

    def __init__(self, enabled: bool = False) -> None:
        self.enabled = enabled

    def trace(self, msg: str, *args: Any) -> None:
        if self.enabled:
            logger.debug(f"{LOG_PREFIX} {msg}", *args)

    def error(self, msg: str, *args: Any) -> None:
        if self.enabled:
            logger.error(f"{LOG_PREFIX} {msg}", *args)
