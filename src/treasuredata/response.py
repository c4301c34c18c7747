"""Interpretation of postback responses."""

from __future__ import annotations

import json
from typing import Any

from .errors import TreasureDataHttpError
from .log import DebugLogger
from .transport import TransportResponse


def try_parse_json(body: str) -> dict[str, Any]:
    """Parse an error body as a JSON object.

    An empty body parses as `{}`.

    Raises:
    - `ValueError` when the body is not a JSON object
    - `RecursionError` when the body nests too deeply to decode
    """
    if body == "":
        return {}
    parsed = json.loads(body)
    if not isinstance(parsed, dict):
        raise ValueError(f"expected a JSON object, got {type(parsed).__name__}")
    return parsed


def interpret_response(response: TransportResponse, logger: DebugLogger) -> TreasureDataHttpError | None:
    """Classify a response: None on 2xx, otherwise an error value.

    Any status outside [200, 300) is a failure, redirects included. An error
    body that cannot be parsed becomes `http_response=None`.
    """
    logger.trace("response status=%s body=%r", response.status_code, response.body)

    if 200 <= response.status_code < 300:
        return None

    http_response: dict[str, Any] | None
    try:
        http_response = try_parse_json(response.body)
    except Exception as exc:  # noqa: BLE001 - best-effort parsing
        logger.trace("could not parse error body: %s", exc)
        http_response = None

    return TreasureDataHttpError(http_status=response.status_code, http_response=http_response)
