"""Shared helpers for sync/async client bootstrap."""

from __future__ import annotations

from .config import MailchimpClientConfig
from .core.credentials import CredentialState
from .core.errors import ConfigurationError


def validate_client_config(config: MailchimpClientConfig) -> None:
    try:
        config.validate()
    except ValueError as exc:
        raise ConfigurationError(str(exc)) from exc


def resolve_credentials(
    *,
    api_key: str | None,
    credentials: CredentialState | None,
) -> CredentialState:
    if credentials is not None:
        if api_key is not None:
            credentials.set_key(api_key)
        return credentials
    return CredentialState(api_key)


__all__ = [
    "validate_client_config",
    "resolve_credentials",
]
