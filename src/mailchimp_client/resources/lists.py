"""List records, request parameters and paths."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar

from ..core.query import QueryField
from ..core.records import wire_field

LISTS_PATH = "lists"


def list_path(list_id: str) -> str:
    return f"{LISTS_PATH}/{list_id}"


@dataclass(slots=True, frozen=True)
class Contact:
    """List owner contact shown in campaign footers."""

    company: str = ""
    address1: str = ""
    address2: str = wire_field(omit_empty=True, default="")
    city: str = ""
    state: str = ""
    zip: str = ""
    country: str = ""
    phone: str = wire_field(omit_empty=True, default="")


@dataclass(slots=True, frozen=True)
class CampaignDefaults:
    from_name: str = ""
    from_email: str = ""
    subject: str = ""
    language: str = ""


@dataclass(slots=True, frozen=True)
class ListStats:
    member_count: int = 0
    unsubscribe_count: int = 0
    cleaned_count: int = 0
    member_count_since_send: int = 0
    unsubscribe_count_since_send: int = 0
    cleaned_count_since_send: int = 0
    campaign_count: int = 0
    campaign_last_sent: datetime | None = None
    merge_field_count: int = 0
    avg_sub_rate: float = 0.0
    avg_unsub_rate: float = 0.0
    target_sub_rate: float = 0.0
    open_rate: float = 0.0
    click_rate: float = 0.0
    last_sub_date: datetime | None = None
    last_unsub_date: datetime | None = None


@dataclass(slots=True, frozen=True)
class MailingList:
    """A Mailchimp list (audience)."""

    id: str = ""
    name: str = ""
    contact: Contact | None = None
    permission_reminder: str = ""
    use_archive_bar: bool = False
    campaign_defaults: CampaignDefaults | None = None
    notify_on_subscribe: str = ""
    notify_on_unsubscribe: str = ""
    date_created: datetime | None = None
    list_rating: int = 0
    email_type_option: bool = False
    subscribe_url_short: str = ""
    subscribe_url_long: str = ""
    beamer_address: str = ""
    visibility: str = ""
    modules: tuple[str, ...] = ()
    stats: ListStats | None = None


@dataclass(slots=True, frozen=True)
class ListsPage:
    lists: tuple[MailingList, ...] = ()
    total_items: int = 0


@dataclass(slots=True, frozen=True)
class NewListParams:
    name: str
    contact: Contact
    permission_reminder: str
    campaign_defaults: CampaignDefaults
    email_type_option: bool = False
    use_archive_bar: bool = wire_field(omit_empty=True, default=False)
    notify_on_subscribe: str = wire_field(omit_empty=True, default="")
    notify_on_unsubscribe: str = wire_field(omit_empty=True, default="")
    visibility: str = wire_field(omit_empty=True, default="")


@dataclass(slots=True, frozen=True)
class UpdateListParams:
    """Partial list update; unset fields are not sent."""

    name: str = wire_field(omit_empty=True, default="")
    contact: Contact | None = None
    permission_reminder: str = wire_field(omit_empty=True, default="")
    campaign_defaults: CampaignDefaults | None = None
    email_type_option: bool | None = None
    use_archive_bar: bool | None = None
    notify_on_subscribe: str = wire_field(omit_empty=True, default="")
    notify_on_unsubscribe: str = wire_field(omit_empty=True, default="")
    visibility: str = wire_field(omit_empty=True, default="")


@dataclass(slots=True, frozen=True)
class GetListsParams:
    fields: Sequence[str] = ()
    exclude_fields: Sequence[str] = ()
    count: int = 0
    offset: int = 0
    before_date_created: datetime | None = None
    since_date_created: datetime | None = None
    before_campaign_last_sent: datetime | None = None
    since_campaign_last_sent: datetime | None = None
    email: str = ""

    __query_fields__: ClassVar[tuple[QueryField, ...]] = (
        QueryField("fields", "fields"),
        QueryField("exclude_fields", "exclude_fields"),
        QueryField("count", "count"),
        QueryField("offset", "offset"),
        QueryField("before_date_created", "before_date_created"),
        QueryField("since_date_created", "since_date_created"),
        QueryField("before_campaign_last_sent", "before_campaign_last_sent"),
        QueryField("since_campaign_last_sent", "since_campaign_last_sent"),
        QueryField("email", "email"),
    )


@dataclass(slots=True, frozen=True)
class GetListParams:
    fields: Sequence[str] = ()
    exclude_fields: Sequence[str] = ()

    __query_fields__: ClassVar[tuple[QueryField, ...]] = (
        QueryField("fields", "fields"),
        QueryField("exclude_fields", "exclude_fields"),
    )


__all__ = [
    "LISTS_PATH",
    "list_path",
    "Contact",
    "CampaignDefaults",
    "ListStats",
    "MailingList",
    "ListsPage",
    "NewListParams",
    "UpdateListParams",
    "GetListsParams",
    "GetListParams",
]
