"""Query-string encoding for parameter records."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import ClassVar, Protocol
from urllib.parse import urlencode

from .errors import EncodingError
from .timestamps import TimestampCodec


@dataclass(slots=True, frozen=True)
class QueryField:
    """One entry of a parameter record's query schema."""

    name: str
    attr: str
    omit_empty: bool = True
    encoder: Callable[[object], str] | None = None


class QueryParams(Protocol):
    __query_fields__: ClassVar[tuple[QueryField, ...]]


def _scalar_text(value: object, *, name: str, codec: TimestampCodec) -> str | None:
    """Return the wire text for `value`, or None when it is empty."""

    if value is None:
        return None
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else None
    if isinstance(value, datetime):
        return codec.encode(value) or None
    if isinstance(value, (int, float)):
        return str(value) if value != 0 else None
    if isinstance(value, str):
        return value or None
    if isinstance(value, Sequence):
        items: list[str] = []
        for item in value:
            if isinstance(item, Enum):
                item = item.value
            if not isinstance(item, str):
                raise EncodingError(f"query field {name!r} must contain only str values")
            items.append(item)
        return ",".join(items) or None
    raise EncodingError(f"query field {name!r} has unsupported type {type(value).__name__}")


def _field_text(field: QueryField, value: object, *, codec: TimestampCodec) -> str | None:
    if field.encoder is not None:
        try:
            text = field.encoder(value)
        except Exception as exc:
            raise EncodingError(f"query field {field.name!r} encoder failed: {exc}") from exc
        return text if text or not field.omit_empty else None
    text = _scalar_text(value, name=field.name, codec=codec)
    if text is None and not field.omit_empty:
        # Explicit false/zero values are still sent for non-omitting fields.
        if isinstance(value, bool):
            return "false"
        if isinstance(value, (int, float)):
            return str(value)
    return text


def query_pairs(
    params: QueryParams | Mapping[str, object],
    *,
    codec: TimestampCodec,
) -> list[tuple[str, str]]:
    """Return `(name, text)` pairs in declared order, empty fields omitted."""

    if isinstance(params, Mapping):
        pairs: list[tuple[str, str]] = []
        for name, value in params.items():
            if not isinstance(name, str):
                raise EncodingError("query parameter names must be str")
            text = _scalar_text(value, name=name, codec=codec)
            if text is not None:
                pairs.append((name, text))
        return pairs

    schema = getattr(type(params), "__query_fields__", None)
    if schema is None:
        raise EncodingError(
            f"{type(params).__name__} does not declare __query_fields__"
        )
    pairs = []
    for field in schema:
        text = _field_text(field, getattr(params, field.attr), codec=codec)
        if text is not None:
            pairs.append((field.name, text))
    return pairs


def encode_query(
    params: QueryParams | Mapping[str, object],
    *,
    codec: TimestampCodec,
) -> str:
    """Encode `params` as an `application/x-www-form-urlencoded` query string."""

    return urlencode(query_pairs(params, codec=codec))


__all__ = [
    "QueryField",
    "QueryParams",
    "query_pairs",
    "encode_query",
]
