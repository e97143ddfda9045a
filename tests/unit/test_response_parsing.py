from __future__ import annotations

import json
from dataclasses import dataclass

import pytest

from mailchimp_client.core.errors import (
    ApiError,
    MalformedErrorBodyError,
    MalformedSuccessBodyError,
    TimestampFormatError,
)
from mailchimp_client.core.response_parsing import (
    decode_error_response,
    decode_success_response,
    resolve_response,
)
from mailchimp_client.core.timestamps import TimestampCodec
from mailchimp_client.resources.members import Member
from tests.shared.payloads import make_error_payload
from tests.shared.transport import FakeResponse


@dataclass(frozen=True)
class _Item:
    id: str = ""
    name: str = ""


def _json_response(status_code: int, payload: object) -> FakeResponse:
    return FakeResponse(status_code, json.dumps(payload).encode("utf-8"))


def test_decode_error_response_returns_api_error():
    err = decode_error_response(_json_response(404, make_error_payload()))
    assert isinstance(err, ApiError)
    assert err.status == 404


def test_decode_error_response_without_status_keeps_title_and_detail():
    err = decode_error_response(
        _json_response(404, {"type": "t", "title": "Resource Not Found", "detail": "gone"})
    )
    assert isinstance(err, ApiError)
    assert err.status == 404
    assert (err.title, err.detail) == ("Resource Not Found", "gone")


@pytest.mark.parametrize(
    "content",
    [b"<html>Bad Gateway</html>", b"", b'{"status": "502"}', b"\xff\xfe"],
    ids=["html", "empty", "string-status", "invalid-utf8"],
)
def test_decode_error_response_raises_malformed_error_body(content: bytes):
    with pytest.raises(MalformedErrorBodyError) as excinfo:
        decode_error_response(FakeResponse(502, content))
    assert excinfo.value.http_status == 502


def test_decode_success_response_into_record(offset_codec: TimestampCodec):
    item = decode_success_response(
        _json_response(200, {"id": "123", "name": "Test"}),
        _Item,
        codec=offset_codec,
    )
    assert item == _Item(id="123", name="Test")


def test_decode_success_response_into_dict(offset_codec: TimestampCodec):
    payload = decode_success_response(_json_response(200, {"a": 1}), dict, codec=offset_codec)
    assert payload == {"a": 1}


@pytest.mark.parametrize(
    ("content", "result_type"),
    [
        (b"not json", _Item),
        (b"[1, 2]", _Item),
        (b"[1, 2]", dict),
        (b'{"id": 5}', _Item),
    ],
    ids=["invalid-json", "array-for-record", "array-for-dict", "wrong-field-type"],
)
def test_decode_success_response_raises_malformed_success_body(
    offset_codec: TimestampCodec,
    content: bytes,
    result_type: type,
):
    with pytest.raises(MalformedSuccessBodyError):
        decode_success_response(FakeResponse(200, content), result_type, codec=offset_codec)


def test_bad_timestamp_in_success_body_is_chained(offset_codec: TimestampCodec):
    response = _json_response(200, {"timestamp_signup": "2020-01-02 23:59:59"})
    with pytest.raises(MalformedSuccessBodyError) as excinfo:
        decode_success_response(response, Member, codec=offset_codec)
    assert isinstance(excinfo.value.__cause__, TimestampFormatError)
    assert excinfo.value.__cause__.field == "timestamp_signup"


def test_resolve_response_without_result_type_skips_body(offset_codec: TimestampCodec):
    assert resolve_response(FakeResponse(204, b"not json"), None, codec=offset_codec) is None


def test_resolve_response_raises_for_error_status_even_without_result_type(
    offset_codec: TimestampCodec,
):
    with pytest.raises(ApiError):
        resolve_response(_json_response(404, make_error_payload()), None, codec=offset_codec)
