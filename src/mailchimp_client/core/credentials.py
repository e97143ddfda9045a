"""API key parsing and process-wide credential state."""

from __future__ import annotations

import threading
from dataclasses import dataclass

from .errors import InvalidKeyFormatError, NotConfiguredError

KEY_SEPARATOR = "-"


@dataclass(slots=True, frozen=True)
class Credential:
    api_key: str
    data_center: str

    def __repr__(self) -> str:
        return f"Credential(api_key='***', data_center={self.data_center!r})"


def parse_api_key(api_key: str) -> Credential:
    """Split `<key>-<data center>` into a `Credential`."""

    if not isinstance(api_key, str):
        raise InvalidKeyFormatError("API key must be a string")
    segments = api_key.split(KEY_SEPARATOR)
    if len(segments) != 2 or not all(segments):
        raise InvalidKeyFormatError("invalid API key format; expected '<key>-<data center>'")
    return Credential(api_key=api_key, data_center=segments[1])


class CredentialState:
    """Holds the current credential; swaps are atomic, reads are snapshots."""

    def __init__(self, api_key: str | None = None) -> None:
        self._lock = threading.Lock()
        self._credential: Credential | None = None
        if api_key is not None:
            self.set_key(api_key)

    def set_key(self, api_key: str) -> Credential:
        credential = parse_api_key(api_key)
        with self._lock:
            self._credential = credential
        return credential

    @property
    def is_configured(self) -> bool:
        with self._lock:
            return self._credential is not None

    def require(self) -> Credential:
        with self._lock:
            credential = self._credential
        if credential is None:
            raise NotConfiguredError("API key has not been set")
        return credential


__all__ = [
    "KEY_SEPARATOR",
    "Credential",
    "parse_api_key",
    "CredentialState",
]
