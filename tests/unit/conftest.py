from __future__ import annotations

from typing import Any

import pytest


@pytest.fixture(autouse=True)
def _no_threads_in_unit_tests(monkeypatch: pytest.MonkeyPatch):
    """Run `asyncio.to_thread` inline for unit tests.

    The default transport uses `asyncio.to_thread` around `requests`. In unit
    tests, this can create threadpool workers that keep the Python process
    alive longer than expected under some runtimes.
    """

    async def _to_thread(func, /, *args, **kwargs):  # noqa: ANN001, D401
        return func(*args, **kwargs)

    monkeypatch.setattr("treasuredata.transport.asyncio.to_thread", _to_thread)
    yield


class FakeResponse:
    """Just enough of `requests.Response` for `RequestsTransport`."""

    def __init__(self, status_code: int, text: str = "") -> None:
        self.status_code = status_code
        self.text = text


@pytest.fixture
def fake_requests(monkeypatch: pytest.MonkeyPatch):
    """Patch `requests.request` and capture every call.

    Set `state["status_code"]` / `state["text"]` to control the response.
    """
    state: dict[str, Any] = {"status_code": 200, "text": "", "calls": []}

    def fake_request(method: str, url: str, *, headers: dict[str, str], data: bytes, timeout: float) -> FakeResponse:
        state["calls"].append({"method": method, "url": url, "headers": headers, "data": data, "timeout": timeout})
        return FakeResponse(state["status_code"], state["text"])

    monkeypatch.setattr("treasuredata.transport.requests.request", fake_request)
    return state
