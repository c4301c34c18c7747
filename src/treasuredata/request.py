"""Postback request construction."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict

POSTBACK_PATH_TEMPLATE = "/postback/v3/event/{db}/{table}"


class PreparedRequest(BaseModel):
    """A fully-built request, ready to hand to a transport."""

    model_config = ConfigDict(frozen=True)

    method: str
    url: str
    headers: dict[str, str]
    body: str


def build_path(db_name: str, table_name: str) -> str:
    """Substitute database and table names into the postback path.

    Names are inserted verbatim; callers are responsible for URL-safe values.
    """
    return POSTBACK_PATH_TEMPLATE.format(db=db_name, table=table_name)


def build_request(
    method: str,
    endpoint: str,
    path: str,
    headers: Mapping[str, str],
    data: Any,
) -> PreparedRequest:
    """Build a request for `endpoint + path` with `data` encoded as JSON.

    Raises:
    - `TypeError` / `ValueError` when `data` is not JSON-serializable
    """
    body = json.dumps(data)
    return PreparedRequest(method=method, url=endpoint + path, headers=dict(headers), body=body)
