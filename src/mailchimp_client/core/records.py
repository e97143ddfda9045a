"""Generic JSON (de)serialization for dataclass records.

Record fields map to wire keys through `wire_field` metadata. Timestamp
fields go through the shared `TimestampCodec` in both directions.
Union fields decode as their first matching member, so an open enum can be
declared as `SomeEnum | str`.
"""

from __future__ import annotations

import dataclasses
import types
import typing
from collections.abc import Mapping, Sequence
from datetime import datetime
from enum import Enum
from typing import Any, TypeVar

from .errors import EncodingError
from .timestamps import TimestampCodec

T = TypeVar("T")

_WIRE_NAME = "wire_name"
_OMIT_EMPTY = "omit_empty"
_MISSING = dataclasses.MISSING


def wire_field(
    name: str | None = None,
    *,
    omit_empty: bool = False,
    default: Any = None,
    default_factory: Any = _MISSING,
) -> Any:
    """Declare a record field with its wire key and omission policy."""

    metadata = {_WIRE_NAME: name, _OMIT_EMPTY: omit_empty}
    if default_factory is not _MISSING:
        return dataclasses.field(default_factory=default_factory, metadata=metadata)
    return dataclasses.field(default=default, metadata=metadata)


def _wire_name(field: dataclasses.Field[Any]) -> str:
    return field.metadata.get(_WIRE_NAME) or field.name


def _is_empty(value: object) -> bool:
    if isinstance(value, (bool, int, float, str)):
        return not value
    if isinstance(value, (Sequence, Mapping)):
        return len(value) == 0
    return False


def _encode_value(value: object, *, codec: TimestampCodec, path: str) -> object:
    if isinstance(value, Enum):
        return value.value
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, datetime):
        return codec.encode(value)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return encode_record(value, codec=codec)
    if isinstance(value, Mapping):
        encoded: dict[str, object] = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise EncodingError(f"{path}: mapping keys must be str")
            encoded[key] = _encode_value(item, codec=codec, path=f"{path}.{key}")
        return encoded
    if isinstance(value, (list, tuple)):
        return [
            _encode_value(item, codec=codec, path=f"{path}[{idx}]")
            for idx, item in enumerate(value)
        ]
    raise EncodingError(f"{path}: unsupported type {type(value).__name__}")


def encode_record(record: object, *, codec: TimestampCodec) -> dict[str, object]:
    """Encode a dataclass record into a JSON-ready dict.

    `None` values and zero timestamps are always omitted; other empty values
    are omitted only for fields declared with `omit_empty=True`.
    """

    if not dataclasses.is_dataclass(record) or isinstance(record, type):
        raise EncodingError(f"{type(record).__name__} is not a record")
    encoded: dict[str, object] = {}
    for field in dataclasses.fields(record):
        value = getattr(record, field.name)
        if value is None:
            continue
        if field.metadata.get(_OMIT_EMPTY) and _is_empty(value):
            continue
        name = _wire_name(field)
        wire_value = _encode_value(value, codec=codec, path=name)
        if isinstance(value, datetime) and wire_value == "":
            continue
        encoded[name] = wire_value
    return encoded


def encode_body(body: object, *, codec: TimestampCodec) -> object:
    """Encode a request body (record or mapping) into JSON-ready data."""

    if dataclasses.is_dataclass(body) and not isinstance(body, type):
        return encode_record(body, codec=codec)
    if isinstance(body, Mapping):
        return _encode_value(body, codec=codec, path="body")
    raise EncodingError(f"unsupported body type {type(body).__name__}")


def _unwrap_optional(tp: Any) -> tuple[Any, bool]:
    origin = typing.get_origin(tp)
    if origin is typing.Union or origin is types.UnionType:
        args = [arg for arg in typing.get_args(tp) if arg is not type(None)]
        if len(args) == 1:
            return args[0], True
        return typing.Union[tuple(args)], len(args) < len(typing.get_args(tp))
    return tp, False


def _decode_first_match(
    options: tuple[Any, ...], value: object, *, codec: TimestampCodec, path: str
) -> object:
    """Decode `value` as the first union member that accepts it, in declared order."""

    failure: ValueError | None = None
    for option in options:
        try:
            return _decode_value(option, value, codec=codec, path=path)
        except ValueError as exc:
            failure = exc
    raise ValueError(f"{path}: value matches none of the declared types") from failure


def _decode_value(tp: Any, value: object, *, codec: TimestampCodec, path: str) -> object:
    tp, optional = _unwrap_optional(tp)
    if value is None:
        if optional or tp is Any or tp is object:
            return None
        raise ValueError(f"{path}: null is not allowed")
    if tp is Any or tp is object:
        return value
    if typing.get_origin(tp) is typing.Union:
        return _decode_first_match(typing.get_args(tp), value, codec=codec, path=path)
    if tp is datetime:
        if not isinstance(value, str):
            raise ValueError(f"{path}: timestamp must be a string")
        return codec.decode(value, field=path)
    if isinstance(tp, type) and issubclass(tp, Enum):
        return tp(value)
    if isinstance(tp, type) and dataclasses.is_dataclass(tp):
        return decode_record(tp, value, codec=codec, path=path)
    if tp is bool:
        if not isinstance(value, bool):
            raise ValueError(f"{path}: expected bool")
        return value
    if tp is int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"{path}: expected int")
        return value
    if tp is float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"{path}: expected number")
        return float(value)
    if tp is str:
        if not isinstance(value, str):
            raise ValueError(f"{path}: expected str")
        return value

    origin = typing.get_origin(tp)
    args = typing.get_args(tp)
    if origin in (tuple, list, Sequence):
        if not isinstance(value, list):
            raise ValueError(f"{path}: expected array")
        item_type = args[0] if args else Any
        items = [
            _decode_value(item_type, item, codec=codec, path=f"{path}[{idx}]")
            for idx, item in enumerate(value)
        ]
        return items if origin is list else tuple(items)
    if origin in (dict, Mapping):
        if not isinstance(value, Mapping):
            raise ValueError(f"{path}: expected object")
        value_type = args[1] if len(args) == 2 else Any
        return {
            key: _decode_value(value_type, item, codec=codec, path=f"{path}.{key}")
            for key, item in value.items()
        }
    raise ValueError(f"{path}: unsupported field type {tp!r}")


def decode_record(
    record_type: type[T],
    payload: object,
    *,
    codec: TimestampCodec,
    path: str | None = None,
) -> T:
    """Decode a JSON object into `record_type`.

    Unknown keys are ignored; absent keys take the field default. Raises
    `ValueError` (or `TimestampFormatError`) when the payload does not fit.
    """

    label = path or record_type.__name__
    if not isinstance(payload, Mapping):
        raise ValueError(f"{label}: expected object")
    hints = typing.get_type_hints(record_type)
    kwargs: dict[str, object] = {}
    for field in dataclasses.fields(record_type):  # type: ignore[arg-type]
        if not field.init:
            continue
        name = _wire_name(field)
        if name not in payload:
            if field.default is _MISSING and field.default_factory is _MISSING:
                raise ValueError(f"{label}.{name}: required key is missing")
            continue
        kwargs[field.name] = _decode_value(
            hints[field.name],
            payload[name],
            codec=codec,
            path=f"{label}.{name}" if path else name,
        )
    return record_type(**kwargs)


__all__ = [
    "wire_field",
    "encode_record",
    "encode_body",
    "decode_record",
]
