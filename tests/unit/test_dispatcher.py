from __future__ import annotations

import base64
import json
import logging
import threading
from dataclasses import dataclass
from datetime import datetime, timezone

import httpx
import pytest

from mailchimp_client.core.dispatcher import Dispatcher
from mailchimp_client.core.errors import (
    ApiError,
    ClientClosedError,
    EncodingError,
    MalformedErrorBodyError,
    MalformedSuccessBodyError,
    NotConfiguredError,
    TransportError,
)
from mailchimp_client.core.timestamps import TimestampFormat
from mailchimp_client.resources.lists import GetListsParams
from mailchimp_client.resources.members import MemberStatus, NewMemberParams
from tests.shared.payloads import make_error_payload
from tests.shared.transport import (
    API_KEY,
    BASE_URL,
    FakeResponse,
    FakeSyncClient,
    SequencedHandler,
    build_config,
    build_credentials,
    build_sync_client,
)


@dataclass(frozen=True)
class _Item:
    id: str = ""
    name: str = ""


@dataclass(frozen=True)
class _Stamped:
    date_created: datetime | None = None


def _dispatcher(handler: SequencedHandler, **config_overrides: object) -> Dispatcher:
    return Dispatcher(
        build_config(**config_overrides),
        credentials=build_credentials(),
        client=build_sync_client(handler),
    )


def test_get_decodes_success_body_into_result_type():
    handler = SequencedHandler([httpx.Response(200, json={"id": "123", "name": "Test"})])
    out = _dispatcher(handler).call("GET", "lists/123", result_type=_Item)

    assert out == _Item(id="123", name="Test")
    request = handler.requests[0]
    assert request.method == "GET"
    assert str(request.url) == BASE_URL + "lists/123"
    assert request.content == b""


def test_request_uses_basic_auth_with_empty_username():
    handler = SequencedHandler([httpx.Response(200, json={})])
    _dispatcher(handler).call("GET", "ping")

    expected = base64.b64encode(f":{API_KEY}".encode()).decode()
    assert handler.requests[0].headers["Authorization"] == f"Basic {expected}"


def test_query_params_are_appended_to_url():
    handler = SequencedHandler([httpx.Response(200, json={"lists": [], "total_items": 0})])
    _dispatcher(handler).call(
        "GET",
        "lists",
        query=GetListsParams(fields=["a", "b"], email="x@y.com"),
        result_type=dict,
    )
    assert str(handler.requests[0].url) == BASE_URL + "lists?fields=a%2Cb&email=x%40y.com"


def test_empty_query_does_not_append_question_mark():
    handler = SequencedHandler([httpx.Response(200, json={})])
    _dispatcher(handler).call("GET", "lists", query=GetListsParams())
    assert str(handler.requests[0].url) == BASE_URL + "lists"


def test_path_is_not_reencoded():
    handler = SequencedHandler([httpx.Response(204)])
    _dispatcher(handler).call("DELETE", "lists/abc/members/62eeb292278cc15f")
    assert handler.requests[0].url.raw_path == b"/3.0/lists/abc/members/62eeb292278cc15f"


def test_body_record_is_serialized_with_timestamp_codec():
    handler = SequencedHandler([httpx.Response(200, json={"id": "m1"})])
    params = NewMemberParams(
        email_address="member@example.com",
        status=MemberStatus.SUBSCRIBED,
        timestamp_opt=datetime(2020, 1, 2, 23, 59, 59, tzinfo=timezone.utc),
    )
    _dispatcher(handler, timestamp_format=TimestampFormat.NAIVE).call(
        "POST",
        "lists/123/members",
        body=params,
    )

    request = handler.requests[0]
    assert request.headers["Content-Type"] == "application/json"
    assert json.loads(request.content) == {
        "email_address": "member@example.com",
        "status": "subscribed",
        "timestamp_opt": "2020-01-02 23:59:59",
    }


def test_error_status_with_valid_body_raises_api_error():
    handler = SequencedHandler([httpx.Response(404, json=make_error_payload())])
    with pytest.raises(ApiError) as excinfo:
        _dispatcher(handler).call("GET", "lists/missing", result_type=_Item)
    assert excinfo.value.status == 404
    assert excinfo.value.is_not_found


def test_error_status_with_unparsable_body_raises_malformed_error_body():
    handler = SequencedHandler([httpx.Response(404, content=b"<html>not found</html>")])
    with pytest.raises(MalformedErrorBodyError) as excinfo:
        _dispatcher(handler).call("GET", "lists/missing", result_type=_Item)
    assert not isinstance(excinfo.value, ApiError)
    assert excinfo.value.http_status == 404


def test_success_body_mismatch_raises_malformed_success_body():
    handler = SequencedHandler([httpx.Response(200, content=b"{not json")])
    with pytest.raises(MalformedSuccessBodyError):
        _dispatcher(handler).call("GET", "lists/123", result_type=_Item)


def test_success_without_result_type_discards_body():
    handler = SequencedHandler([httpx.Response(200, content=b"{not json")])
    assert _dispatcher(handler).call("DELETE", "lists/123") is None


def test_naive_format_deployment_decodes_naive_timestamps():
    handler = SequencedHandler([httpx.Response(200, json={"date_created": "2020-01-02 23:59:59"})])
    out = _dispatcher(handler, timestamp_format=TimestampFormat.NAIVE).call(
        "GET",
        "lists/123",
        result_type=_Stamped,
    )
    assert out.date_created == datetime(2020, 1, 2, 23, 59, 59, tzinfo=timezone.utc)


def test_missing_key_fails_before_network_io():
    handler = SequencedHandler([])
    dispatcher = Dispatcher(
        build_config(),
        credentials=build_credentials(None),
        client=build_sync_client(handler),
    )
    with pytest.raises(NotConfiguredError):
        dispatcher.call("GET", "lists")
    assert handler.calls == 0


def test_query_encoding_failure_fails_before_network_io():
    handler = SequencedHandler([])
    with pytest.raises(EncodingError):
        _dispatcher(handler).call("GET", "lists", query={"filter": {"nested": True}})
    assert handler.calls == 0


def test_body_encoding_failure_fails_before_network_io():
    handler = SequencedHandler([])
    with pytest.raises(EncodingError):
        _dispatcher(handler).call("POST", "lists", body={"blob": object()})
    assert handler.calls == 0


def test_unsupported_method_is_rejected():
    handler = SequencedHandler([])
    with pytest.raises(ValueError):
        _dispatcher(handler).call("TRACE", "lists")
    assert handler.calls == 0


def test_method_is_case_insensitive():
    handler = SequencedHandler([httpx.Response(200, json={})])
    _dispatcher(handler).call("patch", "lists/1", body={"name": "x"})
    assert handler.requests[0].method == "PATCH"


@pytest.mark.parametrize(
    "error",
    [
        httpx.ConnectError("connection refused"),
        httpx.ReadTimeout("timed out"),
    ],
    ids=["connect", "timeout"],
)
def test_transport_failure_is_wrapped_without_retry(error: Exception):
    handler = SequencedHandler([error])
    with pytest.raises(TransportError) as excinfo:
        _dispatcher(handler).call("GET", "lists")
    assert excinfo.value.__cause__ is error
    assert handler.calls == 1


@pytest.mark.parametrize(
    ("status_code", "content", "result_type", "expected"),
    [
        (200, b'{"id": "1"}', _Item, None),
        (200, b"garbage", _Item, MalformedSuccessBodyError),
        (404, b"garbage", _Item, MalformedErrorBodyError),
        (500, json.dumps(make_error_payload(status=500)).encode(), None, ApiError),
    ],
    ids=["success", "bad-success-body", "bad-error-body", "api-error"],
)
def test_response_is_closed_on_every_exit_path(status_code, content, result_type, expected):
    response = FakeResponse(status_code, content)
    dispatcher = Dispatcher(
        build_config(),
        credentials=build_credentials(),
        client=FakeSyncClient(response),  # type: ignore[arg-type]
    )
    if expected is None:
        dispatcher.call("GET", "lists/1", result_type=result_type)
    else:
        with pytest.raises(expected):
            dispatcher.call("GET", "lists/1", result_type=result_type)
    assert response.closed is True


def test_set_transport_routes_later_calls_to_new_handle():
    first = SequencedHandler([httpx.Response(200, json={})])
    second = SequencedHandler([httpx.Response(200, json={})])
    dispatcher = _dispatcher(first)
    dispatcher.call("GET", "lists")
    dispatcher.set_transport(build_sync_client(second))
    dispatcher.call("GET", "lists")
    assert (first.calls, second.calls) == (1, 1)


def test_key_change_updates_endpoint_and_auth():
    handler = SequencedHandler([httpx.Response(200, json={})])
    credentials = build_credentials()
    dispatcher = Dispatcher(build_config(), credentials=credentials, client=build_sync_client(handler))
    credentials.set_key("other-us19")
    dispatcher.call("GET", "lists")
    assert handler.requests[0].url.host == "us19.api.mailchimp.com"


def test_closed_dispatcher_rejects_calls():
    handler = SequencedHandler([])
    dispatcher = _dispatcher(handler)
    dispatcher.close()
    dispatcher.close()
    with pytest.raises(ClientClosedError):
        dispatcher.call("GET", "lists")


class _CloseOnAcquireLock:
    """Lock that lets a concurrent `close` land while the call holds it."""

    def __init__(self, dispatcher: object) -> None:
        self._dispatcher = dispatcher
        self._inner = threading.Lock()

    def __enter__(self) -> _CloseOnAcquireLock:
        self._inner.acquire()
        self._dispatcher._closed = True  # type: ignore[attr-defined]
        return self

    def __exit__(self, *exc_info: object) -> None:
        self._inner.release()


def test_closed_flag_is_read_with_the_transport_snapshot():
    handler = SequencedHandler([httpx.Response(200, json={})])
    dispatcher = _dispatcher(handler)
    dispatcher._lock = _CloseOnAcquireLock(dispatcher)  # type: ignore[assignment]
    with pytest.raises(ClientClosedError):
        dispatcher.call("GET", "lists")
    assert handler.calls == 0


def test_default_transport_is_created_and_closed():
    dispatcher = Dispatcher(build_config(), credentials=build_credentials())
    dispatcher.close()


def test_debug_logs_never_contain_api_key(caplog: pytest.LogCaptureFixture):
    handler = SequencedHandler([httpx.Response(200, json={})])
    with caplog.at_level(logging.DEBUG, logger="mailchimp_client"):
        _dispatcher(handler).call("GET", "lists")
    assert any("request start" in record.getMessage() for record in caplog.records)
    assert all(API_KEY not in record.getMessage() for record in caplog.records)
