from __future__ import annotations

import logging

import pytest

from treasuredata.errors import TreasureDataHttpError
from treasuredata.log import DebugLogger
from treasuredata.response import interpret_response, try_parse_json
from treasuredata.transport import TransportResponse


@pytest.mark.parametrize("status", [200, 201, 204, 299])
def test_2xx_is_success(status: int):
    assert interpret_response(TransportResponse(status_code=status, body="whatever"), DebugLogger()) is None


@pytest.mark.parametrize("status", [100, 199, 300, 301, 304, 400, 401, 404, 429, 500, 503])
def test_non_2xx_is_error(status: int):
    error = interpret_response(TransportResponse(status_code=status, body='{"error": "x"}'), DebugLogger())

    assert isinstance(error, TreasureDataHttpError)
    assert error.http_status == status
    assert error.http_response == {"error": "x"}


def test_empty_error_body_is_empty_mapping():
    error = interpret_response(TransportResponse(status_code=404, body=""), DebugLogger())
    assert error is not None
    assert error.http_response == {}


@pytest.mark.parametrize("body", ["not json", "[1, 2]", '"text"', "{"])
def test_unparsable_error_body_is_none(body: str):
    error = interpret_response(TransportResponse(status_code=500, body=body), DebugLogger())
    assert error is not None
    assert error.http_status == 500
    assert error.http_response is None


def test_try_parse_json():
    assert try_parse_json("") == {}
    assert try_parse_json('{"a": 1}') == {"a": 1}
    with pytest.raises(ValueError):
        try_parse_json("nope")


def test_parse_failure_is_traced_when_debug_enabled(caplog: pytest.LogCaptureFixture):
    caplog.set_level(logging.DEBUG, logger="treasuredata")

    interpret_response(TransportResponse(status_code=500, body="not json"), DebugLogger(enabled=True))

    messages = [r.getMessage() for r in caplog.records]
    assert any("status=500" in m for m in messages)
    assert any("could not parse error body" in m for m in messages)
    assert all(m.startswith("[TreasureData]") for m in messages)


def test_nothing_logged_when_debug_disabled(caplog: pytest.LogCaptureFixture):
    caplog.set_level(logging.DEBUG, logger="treasuredata")

    interpret_response(TransportResponse(status_code=500, body="not json"), DebugLogger())

    assert caplog.records == []


def test_error_message_includes_status_and_body():
    error = TreasureDataHttpError(http_status=400, http_response={"message": "bad"})
    assert "400" in str(error)
    assert "bad" in str(error)


@pytest.mark.parametrize("body", ["[" * 200_000, '{"a":' * 200_000])
def test_deeply_nested_error_body_is_none(body: str):
    error = interpret_response(TransportResponse(status_code=500, body=body), DebugLogger())

    assert error is not None
    assert error.http_status == 500
    assert error.http_response is None


def test_error_value_fields_are_read_only():
    error = TreasureDataHttpError(http_status=404, http_response={})

    with pytest.raises(AttributeError):
        error.http_status = 200  # type: ignore[misc]
    with pytest.raises(AttributeError):
        error.http_response = None  # type: ignore[misc]
