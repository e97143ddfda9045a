"""Public client entrypoint."""

from __future__ import annotations

from collections.abc import Mapping
from types import TracebackType
from typing import TypeVar

import httpx

from .client_shared import resolve_credentials, validate_client_config
from .config import MailchimpClientConfig
from .core.credentials import Credential, CredentialState
from .core.dispatcher import Dispatcher
from .core.query import QueryParams
from .resources.services import ListsService, MembersService

T = TypeVar("T")


class MailchimpClient:
    """Public Mailchimp API client.

    Configure once (API key, optional transport) and share the instance
    across threads; `set_key` and `set_transport` may be called at any time
    and affect calls started afterwards.
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        config: MailchimpClientConfig | None = None,
        http_client: httpx.Client | None = None,
        credentials: CredentialState | None = None,
    ) -> None:
        self._config = config or MailchimpClientConfig()
        validate_client_config(self._config)

        self._credentials = resolve_credentials(api_key=api_key, credentials=credentials)
        self._dispatcher = Dispatcher(
            self._config,
            credentials=self._credentials,
            client=http_client,
        )
        self.lists = ListsService(self._dispatcher)
        self.members = MembersService(self._dispatcher)

    @property
    def config(self) -> MailchimpClientConfig:
        return self._config

    def set_key(self, api_key: str) -> Credential:
        return self._credentials.set_key(api_key)

    def set_transport(self, http_client: httpx.Client) -> None:
        self._dispatcher.set_transport(http_client)

    def call(
        self,
        method: str,
        path: str,
        *,
        query: QueryParams | Mapping[str, object] | None = None,
        body: object | None = None,
        result_type: type[T] | None = None,
    ) -> T | None:
        return self._dispatcher.call(
            method,
            path,
            query=query,
            body=body,
            result_type=result_type,
        )

    def close(self) -> None:
        self._dispatcher.close()

    def __enter__(self) -> "MailchimpClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.close()
        return False


__all__ = [
    "MailchimpClient",
]
