"""Public package exports for Mailchimp API client."""

from .async_client import AsyncMailchimpClient
from .client import MailchimpClient
from .config import MailchimpClientConfig, TransportConfig
from .core.errors import (
    ApiError,
    ClientClosedError,
    ConfigurationError,
    EncodingError,
    FieldError,
    InvalidKeyFormatError,
    MailchimpError,
    MalformedErrorBodyError,
    MalformedSuccessBodyError,
    NotConfiguredError,
    TimestampFormatError,
    TransportError,
)
from .core.timestamps import TimestampCodec, TimestampFormat

__all__ = [
    "MailchimpClient",
    "AsyncMailchimpClient",
    "MailchimpClientConfig",
    "TransportConfig",
    "TimestampCodec",
    "TimestampFormat",
    "MailchimpError",
    "ApiError",
    "FieldError",
    "ClientClosedError",
    "ConfigurationError",
    "EncodingError",
    "InvalidKeyFormatError",
    "MalformedErrorBodyError",
    "MalformedSuccessBodyError",
    "NotConfiguredError",
    "TimestampFormatError",
    "TransportError",
]
