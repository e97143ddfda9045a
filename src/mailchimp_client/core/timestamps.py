"""Timestamp text codec shared by query encoding and record (de)serialization."""

from __future__ import annotations

import re
from datetime import datetime, timezone
from enum import Enum

from .errors import TimestampFormatError

_NAIVE_PATTERN = "%Y-%m-%d %H:%M:%S"
_OFFSET_SHAPE = re.compile(
    r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(?:\.\d+)?(?:Z|[+-]\d{2}:\d{2})",
    re.ASCII,
)
_NAIVE_SHAPE = re.compile(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}", re.ASCII)


class TimestampFormat(str, Enum):
    """Wire format for timestamps; one is active per deployment."""

    OFFSET = "offset"  # 2020-01-02T23:59:59+00:00
    NAIVE = "naive"  # 2020-01-02 23:59:59, UTC


class TimestampCodec:
    """Converts between `datetime` and the active wire format.

    `None` is the zero value: it encodes to `""` and `""` decodes to it.
    """

    __slots__ = ("_format",)

    def __init__(self, fmt: TimestampFormat = TimestampFormat.OFFSET) -> None:
        self._format = TimestampFormat(fmt)

    @property
    def format(self) -> TimestampFormat:
        return self._format

    def encode(self, value: datetime | None) -> str:
        if value is None:
            return ""
        if not isinstance(value, datetime):
            raise TypeError(f"timestamp must be datetime, got {type(value).__name__}")
        if self._format is TimestampFormat.OFFSET:
            if value.tzinfo is None:
                value = value.replace(tzinfo=timezone.utc)
            return value.isoformat(timespec="seconds")
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.strftime(_NAIVE_PATTERN)

    def decode(self, raw: str | None, *, field: str | None = None) -> datetime | None:
        if raw is None or raw == "":
            return None
        if not isinstance(raw, str):
            raise TimestampFormatError(
                f"timestamp must be a string, got {type(raw).__name__}",
                raw=repr(raw),
                field=field,
            )
        if self._format is TimestampFormat.OFFSET:
            return self._decode_offset(raw, field=field)
        return self._decode_naive(raw, field=field)

    @staticmethod
    def _decode_offset(raw: str, *, field: str | None) -> datetime:
        if _OFFSET_SHAPE.fullmatch(raw) is None:
            raise TimestampFormatError(
                f"offset timestamp must look like 2006-01-02T15:04:05+07:00: {raw!r}",
                raw=raw,
                field=field,
            )
        try:
            parsed = datetime.fromisoformat(raw)
        except ValueError as exc:
            raise TimestampFormatError(
                f"invalid offset timestamp {raw!r}",
                raw=raw,
                field=field,
            ) from exc
        return parsed

    @staticmethod
    def _decode_naive(raw: str, *, field: str | None) -> datetime:
        if _NAIVE_SHAPE.fullmatch(raw) is None:
            raise TimestampFormatError(
                f"naive timestamp must look like 2006-01-02 15:04:05: {raw!r}",
                raw=raw,
                field=field,
            )
        try:
            parsed = datetime.strptime(raw, _NAIVE_PATTERN)
        except ValueError as exc:
            raise TimestampFormatError(
                f"invalid naive timestamp {raw!r}",
                raw=raw,
                field=field,
            ) from exc
        return parsed.replace(tzinfo=timezone.utc)

    def __repr__(self) -> str:
        return f"TimestampCodec({self._format.value!r})"


__all__ = [
    "TimestampFormat",
    "TimestampCodec",
]
