"""Asynchronous request dispatcher."""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from typing import TypeVar

import httpx

from ..config import MailchimpClientConfig
from .credentials import CredentialState
from .dispatch_shared import (
    build_auth,
    build_body,
    build_default_timeout,
    build_request_headers,
    build_url,
    normalize_method,
)
from .errors import ClientClosedError, TransportError
from .query import QueryParams
from .response_parsing import resolve_response
from .timestamps import TimestampCodec

logger = logging.getLogger("mailchimp_client")

T = TypeVar("T")


class AsyncDispatcher:
    """Executes API calls over a shared `httpx.AsyncClient`."""

    def __init__(
        self,
        config: MailchimpClientConfig,
        *,
        credentials: CredentialState,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config
        self._credentials = credentials
        self._codec = TimestampCodec(config.timestamp_format)
        self._lock = threading.Lock()
        self._closed = False
        self._owned: list[httpx.AsyncClient] = []
        if client is None:
            client = httpx.AsyncClient(timeout=build_default_timeout(config))
            self._owned.append(client)
        self._client = client

    @property
    def codec(self) -> TimestampCodec:
        return self._codec

    def set_transport(self, client: httpx.AsyncClient) -> None:
        with self._lock:
            self._client = client

    async def close(self) -> None:
        with self._lock:
            if self._closed:
                return
            self._closed = True
            owned, self._owned = self._owned, []
        for client in owned:
            await client.aclose()

    async def call(
        self,
        method: str,
        path: str,
        *,
        query: QueryParams | Mapping[str, object] | None = None,
        body: object | None = None,
        result_type: type[T] | None = None,
    ) -> T | None:
        with self._lock:
            closed = self._closed
            client = self._client
        if closed:
            raise ClientClosedError("dispatcher is already closed")
        credential = self._credentials.require()
        verb = normalize_method(method)

        url = build_url(self._config, credential, path, query=query, codec=self._codec)
        content = build_body(body, codec=self._codec)

        logger.debug("request start method=%s path=%s", verb, path)
        try:
            response = await client.request(
                verb,
                url,
                content=content,
                headers=build_request_headers(self._config, has_body=content is not None),
                auth=build_auth(credential),
            )
        except httpx.HTTPError as exc:
            logger.debug(
                "request transport error method=%s path=%s error=%s",
                verb,
                path,
                exc.__class__.__name__,
            )
            raise TransportError("network/transport error") from exc

        try:
            logger.debug(
                "response received method=%s path=%s http_status=%s",
                verb,
                path,
                response.status_code,
            )
            return resolve_response(response, result_type, codec=self._codec)
        finally:
            await response.aclose()


__all__ = [
    "AsyncDispatcher",
]
