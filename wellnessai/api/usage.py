"""Usage endpoints."""

from pydantic import TypeAdapter

from wellnessai.api.client import ApiClient, parse_response
from wellnessai.models.usage import UsageHistoryEntry, UsageStats

_history = TypeAdapter(list[UsageHistoryEntry])


class UsageApi:
    def __init__(self, client: ApiClient) -> None:
        self._client = client

    async def get_usage(self) -> UsageStats:
        return parse_response(UsageStats, await self._client.get("/usage"))

    async def get_usage_history(self, days: int = 30) -> list[UsageHistoryEntry]:
        data = await self._client.get("/usage/history", params={"days": days})
        return parse_response(_history, data or [])
