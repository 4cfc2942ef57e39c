"""Admin dashboard endpoints."""

from pydantic import TypeAdapter

from wellnessai.api.client import ApiClient, parse_response
from wellnessai.models.admin import AdminMessage, AdminStats, AdminUser

_users = TypeAdapter(list[AdminUser])
_messages = TypeAdapter(list[AdminMessage])


class AdminApi:
    def __init__(self, client: ApiClient) -> None:
        self._client = client

    async def get_stats(self) -> AdminStats:
        return parse_response(AdminStats, await self._client.get("/admin/stats"))

    async def get_users(self) -> list[AdminUser]:
        return parse_response(_users, await self._client.get("/admin/users") or [])

    async def get_messages(self) -> list[AdminMessage]:
        return parse_response(_messages, await self._client.get("/admin/messages") or [])
