"""Shared helpers for sync/async dispatcher implementations."""

from __future__ import annotations

import json
from collections.abc import Mapping

import httpx

from ..config import MailchimpClientConfig
from .credentials import Credential
from .errors import EncodingError
from .query import QueryParams, encode_query
from .records import encode_body
from .timestamps import TimestampCodec

ALLOWED_METHODS = frozenset({"GET", "POST", "PUT", "PATCH", "DELETE"})


def normalize_method(method: str) -> str:
    verb = method.upper()
    if verb not in ALLOWED_METHODS:
        raise ValueError(f"unsupported HTTP method {method!r}")
    return verb


def build_url(
    config: MailchimpClientConfig,
    credential: Credential,
    path: str,
    *,
    query: QueryParams | Mapping[str, object] | None,
    codec: TimestampCodec,
) -> str:
    """Compose the endpoint URL; `path` is used verbatim."""

    url = config.endpoint_base(credential.data_center) + path.lstrip("/")
    if query is not None:
        query_string = encode_query(query, codec=codec)
        if query_string:
            url += "?" + query_string
    return url


def build_body(body: object | None, *, codec: TimestampCodec) -> bytes | None:
    if body is None:
        return None
    data = encode_body(body, codec=codec)
    try:
        return json.dumps(data, separators=(",", ":")).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise EncodingError(f"request body is not JSON serializable: {exc}") from exc


def build_request_headers(config: MailchimpClientConfig, *, has_body: bool) -> dict[str, str]:
    headers = {
        "Accept": "application/json",
        "User-Agent": config.user_agent,
    }
    if has_body:
        headers["Content-Type"] = "application/json"
    return headers


def build_auth(credential: Credential) -> httpx.BasicAuth:
    # The username slot is unused; the key is sent as the password.
    return httpx.BasicAuth(username="", password=credential.api_key)


def build_default_timeout(config: MailchimpClientConfig) -> httpx.Timeout:
    return httpx.Timeout(
        connect=config.transport.timeout_connect_seconds,
        read=config.transport.timeout_read_seconds,
        write=config.transport.timeout_write_seconds,
        pool=config.transport.timeout_pool_seconds,
    )


__all__ = [
    "ALLOWED_METHODS",
    "normalize_method",
    "build_url",
    "build_body",
    "build_request_headers",
    "build_auth",
    "build_default_timeout",
]
