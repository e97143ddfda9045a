"""Client configuration."""

from __future__ import annotations

from dataclasses import dataclass, field

from .core.timestamps import TimestampFormat


@dataclass(slots=True, frozen=True)
class TransportConfig:
    """Transport-related settings."""

    timeout_connect_seconds: float = 5.0
    timeout_read_seconds: float = 30.0
    timeout_write_seconds: float = 30.0
    timeout_pool_seconds: float = 5.0

    def validate(self) -> None:
        for field_name in (
            "timeout_connect_seconds",
            "timeout_read_seconds",
            "timeout_write_seconds",
            "timeout_pool_seconds",
        ):
            if getattr(self, field_name) <= 0:
                raise ValueError(f"transport.{field_name} must be > 0")


@dataclass(slots=True, frozen=True)
class MailchimpClientConfig:
    """Runtime configuration for Mailchimp client."""

    scheme: str = "https"
    service_host: str = "api.mailchimp.com"
    api_version: str = "3.0"
    user_agent: str = "mailchimp-api-client/0.1.0"
    timestamp_format: TimestampFormat = TimestampFormat.OFFSET

    transport: TransportConfig = field(default_factory=TransportConfig)

    def endpoint_base(self, data_center: str) -> str:
        return f"{self.scheme}://{data_center}.{self.service_host}/{self.api_version}/"

    def validate(self) -> None:
        if self.scheme not in ("https", "http"):
            raise ValueError("scheme must be 'https' or 'http'")
        if not self.service_host:
            raise ValueError("service_host must not be empty")
        if "/" in self.service_host:
            raise ValueError("service_host must be a bare host name")
        if not self.api_version:
            raise ValueError("api_version must not be empty")
        if not isinstance(self.timestamp_format, TimestampFormat):
            raise ValueError("timestamp_format must be TimestampFormat")
        self.transport.validate()


__all__ = [
    "TransportConfig",
    "MailchimpClientConfig",
]
