"""List member records, request parameters and paths."""

from __future__ import annotations

import hashlib
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import ClassVar

from ..core.query import QueryField
from ..core.records import wire_field
from .lists import list_path


class EmailType(str, Enum):
    HTML = "html"
    TEXT = "text"


class MemberStatus(str, Enum):
    SUBSCRIBED = "subscribed"
    UNSUBSCRIBED = "unsubscribed"
    CLEANED = "cleaned"
    PENDING = "pending"
    TRANSACTIONAL = "transactional"
    ARCHIVED = "archived"


def subscriber_hash(email_address: str) -> str:
    """MD5 hash of the lowercased address, used as the member id in paths."""

    return hashlib.md5(email_address.strip().lower().encode("utf-8")).hexdigest()


def members_path(list_id: str) -> str:
    return f"{list_path(list_id)}/members"


def member_path(list_id: str, member_hash: str) -> str:
    return f"{members_path(list_id)}/{member_hash}"


@dataclass(slots=True, frozen=True)
class MemberStats:
    avg_open_rate: float = 0.0
    avg_click_rate: float = 0.0


@dataclass(slots=True, frozen=True)
class Location:
    latitude: float = wire_field(omit_empty=True, default=0.0)
    longitude: float = wire_field(omit_empty=True, default=0.0)
    gmtoff: int = wire_field(omit_empty=True, default=0)
    dstoff: int = wire_field(omit_empty=True, default=0)
    country_code: str = wire_field(omit_empty=True, default="")
    timezone: str = wire_field(omit_empty=True, default="")


@dataclass(slots=True, frozen=True)
class Note:
    note_id: int = 0
    created_at: datetime | None = None
    created_by: str = ""
    note: str = ""


@dataclass(slots=True, frozen=True)
class Member:
    """A single member within a list."""

    id: str = ""
    email_address: str = ""
    unique_email_id: str = ""
    email_type: EmailType | None = None
    status: MemberStatus | str | None = None  # str for statuses not listed in MemberStatus
    merge_fields: dict[str, object] | None = None
    interests: dict[str, bool] | None = None
    stats: MemberStats | None = None
    ip_signup: str = ""
    timestamp_signup: datetime | None = None
    ip_opt: str = ""
    timestamp_opt: datetime | None = None
    member_rating: int = 0
    last_changed: datetime | None = None
    language: str = ""
    vip: bool = False
    email_client: str = ""
    location: Location | None = None
    last_note: Note | None = None
    list_id: str = ""


@dataclass(slots=True, frozen=True)
class MembersPage:
    members: tuple[Member, ...] = ()
    list_id: str = ""
    total_items: int = 0


@dataclass(slots=True, frozen=True)
class NewMemberParams:
    email_address: str
    status: MemberStatus
    email_type: EmailType | None = None
    merge_fields: dict[str, object] | None = wire_field(omit_empty=True)
    interests: dict[str, bool] | None = wire_field(omit_empty=True)
    language: str = wire_field(omit_empty=True, default="")
    vip: bool = wire_field(omit_empty=True, default=False)
    location: Location | None = None
    ip_signup: str = wire_field(omit_empty=True, default="")
    timestamp_signup: datetime | None = None
    ip_opt: str = wire_field(omit_empty=True, default="")
    timestamp_opt: datetime | None = None


@dataclass(slots=True, frozen=True)
class UpdateMemberParams:
    """Member upsert body; `status_if_new` applies when the member is created."""

    email_address: str = wire_field(omit_empty=True, default="")
    status: MemberStatus | None = None
    status_if_new: MemberStatus | None = None
    email_type: EmailType | None = None
    merge_fields: dict[str, object] | None = wire_field(omit_empty=True)
    interests: dict[str, bool] | None = wire_field(omit_empty=True)
    language: str = wire_field(omit_empty=True, default="")
    vip: bool = wire_field(omit_empty=True, default=False)
    location: Location | None = None
    ip_signup: str = wire_field(omit_empty=True, default="")
    timestamp_signup: datetime | None = None
    ip_opt: str = wire_field(omit_empty=True, default="")
    timestamp_opt: datetime | None = None


@dataclass(slots=True, frozen=True)
class GetMembersParams:
    fields: Sequence[str] = ()
    exclude_fields: Sequence[str] = ()
    count: int = 0
    offset: int = 0
    email_type: EmailType | None = None
    status: MemberStatus | None = None
    since_timestamp_opt: datetime | None = None
    before_timestamp_opt: datetime | None = None
    since_last_changed: datetime | None = None
    before_last_changed: datetime | None = None
    unique_email_id: str = ""
    vip_only: bool = False

    __query_fields__: ClassVar[tuple[QueryField, ...]] = (
        QueryField("fields", "fields"),
        QueryField("exclude_fields", "exclude_fields"),
        QueryField("count", "count"),
        QueryField("offset", "offset"),
        QueryField("email_type", "email_type"),
        QueryField("status", "status"),
        QueryField("since_timestamp_opt", "since_timestamp_opt"),
        QueryField("before_timestamp_opt", "before_timestamp_opt"),
        QueryField("since_last_changed", "since_last_changed"),
        QueryField("before_last_changed", "before_last_changed"),
        QueryField("unique_email_id", "unique_email_id"),
        QueryField("vip_only", "vip_only"),
    )


@dataclass(slots=True, frozen=True)
class GetMemberParams:
    fields: Sequence[str] = ()
    exclude_fields: Sequence[str] = ()

    __query_fields__: ClassVar[tuple[QueryField, ...]] = (
        QueryField("fields", "fields"),
        QueryField("exclude_fields", "exclude_fields"),
    )


__all__ = [
    "EmailType",
    "MemberStatus",
    "subscriber_hash",
    "members_path",
    "member_path",
    "MemberStats",
    "Location",
    "Note",
    "Member",
    "MembersPage",
    "NewMemberParams",
    "UpdateMemberParams",
    "GetMembersParams",
    "GetMemberParams",
]
