"""Error types and error-body decoding."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class FieldError:
    field: str
    message: str


class MailchimpError(Exception):
    """Base exception for this package."""

    def __init__(self, message: str, *, http_status: int | None = None) -> None:
        super().__init__(message)
        self.http_status = http_status


class ConfigurationError(MailchimpError):
    """Client configuration rejected by validation."""


class NotConfiguredError(MailchimpError):
    """Raised when a call is attempted before an API key was set."""


class InvalidKeyFormatError(MailchimpError):
    """API key is not in `<key>-<data center>` form."""


class ClientClosedError(MailchimpError):
    """Raised when client is used after close."""


class EncodingError(MailchimpError):
    """Query or body parameters could not be serialized."""


class TimestampFormatError(MailchimpError):
    """Timestamp text does not match the active format."""

    def __init__(self, message: str, *, raw: str, field: str | None = None) -> None:
        super().__init__(message)
        self.raw = raw
        self.field = field


class TransportError(MailchimpError):
    """Network/transport-level failure."""


class MalformedSuccessBodyError(MailchimpError):
    """Successful response body could not be decoded into the result type."""


class MalformedErrorBodyError(MailchimpError):
    """Error response body is not a valid API error object."""


class ApiError(MailchimpError):
    """Well-formed error returned by the API for a 4xx/5xx response."""

    def __init__(
        self,
        *,
        kind: str,
        title: str,
        status: int,
        detail: str,
        field_errors: tuple[FieldError, ...] = (),
        http_status: int | None = None,
    ) -> None:
        super().__init__(
            f"API error: status={status} title={title} detail={detail}",
            http_status=http_status,
        )
        self.kind = kind
        self.title = title
        self.status = status
        self.detail = detail
        self.field_errors = field_errors

    @property
    def is_not_found(self) -> bool:
        return self.status == 404


def _require_str(payload: Mapping[str, object], key: str) -> str:
    value = payload.get(key, "")
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"error body field {key!r} must be a string")
    return value


def _parse_field_errors(raw: object) -> tuple[FieldError, ...]:
    if raw is None:
        return ()
    if not isinstance(raw, list):
        raise ValueError("error body field 'errors' must be a list")
    parsed: list[FieldError] = []
    for item in raw:
        if not isinstance(item, Mapping):
            raise ValueError("error body 'errors' element must be an object")
        parsed.append(
            FieldError(
                field=_require_str(item, "field"),
                message=_require_str(item, "message"),
            )
        )
    return tuple(parsed)


def api_error_from_payload(payload: object, *, http_status: int) -> ApiError:
    """Build an `ApiError` from a decoded error body.

    Raises `ValueError` when the payload does not have the API error shape.
    `status` defaults to `http_status` when absent and must otherwise be an
    integer; the other keys default to empty.
    """

    if not isinstance(payload, Mapping):
        raise ValueError("error body root must be an object")
    status = payload.get("status", http_status)
    if isinstance(status, bool) or not isinstance(status, int):
        raise ValueError("error body field 'status' must be an integer")
    return ApiError(
        kind=_require_str(payload, "type"),
        title=_require_str(payload, "title"),
        status=status,
        detail=_require_str(payload, "detail"),
        field_errors=_parse_field_errors(payload.get("errors")),
        http_status=http_status,
    )


__all__ = [
    "FieldError",
    "MailchimpError",
    "ConfigurationError",
    "NotConfiguredError",
    "InvalidKeyFormatError",
    "ClientClosedError",
    "EncodingError",
    "TimestampFormatError",
    "TransportError",
    "MalformedSuccessBodyError",
    "MalformedErrorBodyError",
    "ApiError",
    "api_error_from_payload",
]
