"""Resource services over the asynchronous dispatcher."""

from __future__ import annotations

from ..core.async_dispatcher import AsyncDispatcher
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


class AsyncListsService:
    def __init__(self, dispatcher: AsyncDispatcher) -> None:
        self._dispatcher = dispatcher

    async def create(self, params: NewListParams) -> MailingList:
        return await self._dispatcher.call(
            "POST",
            LISTS_PATH,
            body=params,
            result_type=MailingList,
        )

    async def get_all(self, params: GetListsParams | None = None) -> ListsPage:
        return await self._dispatcher.call("GET", LISTS_PATH, query=params, result_type=ListsPage)

    async def get(self, list_id: str, params: GetListParams | None = None) -> MailingList:
        return await self._dispatcher.call(
            "GET",
            list_path(list_id),
            query=params,
            result_type=MailingList,
        )

    async def update(self, list_id: str, params: UpdateListParams) -> MailingList:
        return await self._dispatcher.call(
            "PATCH",
            list_path(list_id),
            body=params,
            result_type=MailingList,
        )

    async def delete(self, list_id: str) -> None:
        await self._dispatcher.call("DELETE", list_path(list_id))


class AsyncMembersService:
    def __init__(self, dispatcher: AsyncDispatcher) -> None:
        self._dispatcher = dispatcher

    async def create(self, list_id: str, params: NewMemberParams) -> Member:
        return await self._dispatcher.call(
            "POST",
            members_path(list_id),
            body=params,
            result_type=Member,
        )

    async def get_all(
        self,
        list_id: str,
        params: GetMembersParams | None = None,
    ) -> MembersPage:
        return await self._dispatcher.call(
            "GET",
            members_path(list_id),
            query=params,
            result_type=MembersPage,
        )

    async def get(
        self,
        list_id: str,
        member_hash: str,
        params: GetMemberParams | None = None,
    ) -> Member:
        return await self._dispatcher.call(
            "GET",
            member_path(list_id, member_hash),
            query=params,
            result_type=Member,
        )

    async def update(
        self,
        list_id: str,
        member_hash: str,
        params: UpdateMemberParams,
    ) -> Member:
        return await self._dispatcher.call(
            "PUT",
            member_path(list_id, member_hash),
            body=params,
            result_type=Member,
        )

    async def delete(self, list_id: str, member_hash: str) -> None:
        await self._dispatcher.call("DELETE", member_path(list_id, member_hash))


__all__ = [
    "AsyncListsService",
    "AsyncMembersService",
]
