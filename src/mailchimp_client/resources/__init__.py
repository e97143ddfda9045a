"""Resource records and parameters package."""

from .lists import (
    CampaignDefaults,
    Contact,
    GetListParams,
    GetListsParams,
    ListsPage,
    ListStats,
    MailingList,
    NewListParams,
    UpdateListParams,
)
from .members import (
    EmailType,
    GetMemberParams,
    GetMembersParams,
    Location,
    Member,
    MembersPage,
    MemberStats,
    MemberStatus,
    NewMemberParams,
    Note,
    UpdateMemberParams,
    subscriber_hash,
)

__all__ = [
    "CampaignDefaults",
    "Contact",
    "GetListParams",
    "GetListsParams",
    "ListsPage",
    "ListStats",
    "MailingList",
    "NewListParams",
    "UpdateListParams",
    "EmailType",
    "GetMemberParams",
    "GetMembersParams",
    "Location",
    "Member",
    "MembersPage",
    "MemberStats",
    "MemberStatus",
    "NewMemberParams",
    "Note",
    "UpdateMemberParams",
    "subscriber_hash",
]
