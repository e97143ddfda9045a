"""Resource services over the synchronous dispatcher."""

from __future__ import annotations

from ..core.dispatcher import Dispatcher
from .lists import (
    LISTS_PATH,
    GetListParams,
    GetListsParams,
    ListsPage,
    MailingList,
    NewListParams,
    UpdateListParams,
    list_path,
)
from .members import (
    GetMemberParams,
    GetMembersParams,
    Member,
    MembersPage,
    NewMemberParams,
    UpdateMemberParams,
    member_path,
    members_path,
)


class ListsService:
    def __init__(self, dispatcher: Dispatcher) -> None:
        self._dispatcher = dispatcher

    def create(self, params: NewListParams) -> MailingList:
        return self._dispatcher.call("POST", LISTS_PATH, body=params, result_type=MailingList)

    def get_all(self, params: GetListsParams | None = None) -> ListsPage:
        return self._dispatcher.call("GET", LISTS_PATH, query=params, result_type=ListsPage)

    def get(self, list_id: str, params: GetListParams | None = None) -> MailingList:
        return self._dispatcher.call(
            "GET",
            list_path(list_id),
            query=params,
            result_type=MailingList,
        )

    def update(self, list_id: str, params: UpdateListParams) -> MailingList:
        return self._dispatcher.call(
            "PATCH",
            list_path(list_id),
            body=params,
            result_type=MailingList,
        )

    def delete(self, list_id: str) -> None:
        self._dispatcher.call("DELETE", list_path(list_id))


class MembersService:
    def __init__(self, dispatcher: Dispatcher) -> None:
        self._dispatcher = dispatcher

    def create(self, list_id: str, params: NewMemberParams) -> Member:
        return self._dispatcher.call(
            "POST",
            members_path(list_id),
            body=params,
            result_type=Member,
        )

    def get_all(self, list_id: str, params: GetMembersParams | None = None) -> MembersPage:
        return self._dispatcher.call(
            "GET",
            members_path(list_id),
            query=params,
            result_type=MembersPage,
        )

    def get(
        self,
        list_id: str,
        member_hash: str,
        params: GetMemberParams | None = None,
    ) -> Member:
        return self._dispatcher.call(
            "GET",
            member_path(list_id, member_hash),
            query=params,
            result_type=Member,
        )

    def update(self, list_id: str, member_hash: str, params: UpdateMemberParams) -> Member:
        return self._dispatcher.call(
            "PUT",
            member_path(list_id, member_hash),
            body=params,
            result_type=Member,
        )

    def delete(self, list_id: str, member_hash: str) -> None:
        self._dispatcher.call("DELETE", member_path(list_id, member_hash))


__all__ = [
    "ListsService",
    "MembersService",
]
