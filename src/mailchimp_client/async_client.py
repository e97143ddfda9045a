"""Public async client entrypoint."""

from __future__ import annotations

from collections.abc import Mapping
from types import TracebackType
from typing import TypeVar

import httpx

from .client_shared import resolve_credentials, validate_client_config
from .config import MailchimpClientConfig
from .core.async_dispatcher import AsyncDispatcher
from .core.credentials import Credential, CredentialState
from .core.query import QueryParams
from .resources.async_services import AsyncListsService, AsyncMembersService

T = TypeVar("T")


class AsyncMailchimpClient:
    """Public async Mailchimp API client."""

    def __init__(
        self,
        api_key: str | None = None,
        *,
        config: MailchimpClientConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
        credentials: CredentialState | None = None,
    ) -> None:
        self._config = config or MailchimpClientConfig()
        validate_client_config(self._config)

        self._credentials = resolve_credentials(api_key=api_key, credentials=credentials)
        self._dispatcher = AsyncDispatcher(
            self._config,
            credentials=self._credentials,
            client=http_client,
        )
        self.lists = AsyncListsService(self._dispatcher)
        self.members = AsyncMembersService(self._dispatcher)

    @property
    def config(self) -> MailchimpClientConfig:
        return self._config

    def set_key(self, api_key: str) -> Credential:
        return self._credentials.set_key(api_key)

    def set_transport(self, http_client: httpx.AsyncClient) -> None:
        self._dispatcher.set_transport(http_client)

    async def call(
        self,
        method: str,
        path: str,
        *,
        query: QueryParams | Mapping[str, object] | None = None,
        body: object | None = None,
        result_type: type[T] | None = None,
    ) -> T | None:
        return await self._dispatcher.call(
            method,
            path,
            query=query,
            body=body,
            result_type=result_type,
        )

    async def close(self) -> None:
        await self._dispatcher.close()

    async def __aenter__(self) -> "AsyncMailchimpClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        await self.close()
        return False


__all__ = [
    "AsyncMailchimpClient",
]
