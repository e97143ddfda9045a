"""Shared response classification helpers for sync/async dispatchers."""

from __future__ import annotations

import json
from typing import Protocol, TypeVar

from .errors import (
    ApiError,
    MalformedErrorBodyError,
    MalformedSuccessBodyError,
    TimestampFormatError,
    api_error_from_payload,
)
from .records import decode_record
from .timestamps import TimestampCodec

T = TypeVar("T")


class BodyResponse(Protocol):
    status_code: int

    @property
    def content(self) -> bytes: ...


def is_error_status(http_status: int) -> bool:
    return http_status >= 400


def parse_json_body(content: bytes) -> object:
    """Parse raw response bytes; raises `ValueError` on invalid JSON."""

    return json.loads(content)


def decode_error_response(response: BodyResponse) -> ApiError:
    """Decode a 4xx/5xx body into `ApiError`.

    A body without the API error shape yields `MalformedErrorBodyError`
    instead of exposing only the HTTP status.
    """

    http_status = response.status_code
    try:
        payload = parse_json_body(response.content)
        return api_error_from_payload(payload, http_status=http_status)
    except ValueError as exc:
        raise MalformedErrorBodyError(
            f"error response body is not a valid API error (http_status={http_status})",
            http_status=http_status,
        ) from exc


def decode_success_response(
    response: BodyResponse,
    result_type: type[T],
    *,
    codec: TimestampCodec,
) -> T:
    """Decode a success body into `result_type` (a record type or `dict`)."""

    http_status = response.status_code
    try:
        payload = parse_json_body(response.content)
        if result_type is dict:
            if not isinstance(payload, dict):
                raise ValueError("response JSON root must be an object")
            return payload  # type: ignore[return-value]
        return decode_record(result_type, payload, codec=codec)
    except (ValueError, TypeError, TimestampFormatError) as exc:
        raise MalformedSuccessBodyError(
            f"response body does not match {result_type.__name__}: {exc}",
            http_status=http_status,
        ) from exc


def resolve_response(
    response: BodyResponse,
    result_type: type[T] | None,
    *,
    codec: TimestampCodec,
) -> T | None:
    """Raise the API error for a failed response or decode the success body."""

    if is_error_status(response.status_code):
        raise decode_error_response(response)
    if result_type is None:
        return None
    return decode_success_response(response, result_type, codec=codec)


__all__ = [
    "BodyResponse",
    "is_error_status",
    "parse_json_body",
    "decode_error_response",
    "decode_success_response",
    "resolve_response",
]
