"""Chat endpoints."""

from pydantic import TypeAdapter

from wellnessai.api.client import ApiClient, parse_response
from wellnessai.models.chat import ChatReply, ChatRequest, Message, StopGenerationRequest

_messages = TypeAdapter(list[Message])


class ChatApi:
    """Client for ``/chat/*``."""

    def __init__(self, client: ApiClient) -> None:
        self._client = client

    async def send_message(self, request: ChatRequest) -> ChatReply:
        """Send a message; the server answers with the whole conversation."""
        data = await self._client.post("/chat/message", request)
        return parse_response(ChatReply, data)

    async def stop_generation(self, conversation_id: str | None = None) -> None:
        """Best-effort signal that the user stopped the reply."""
        await self._client.post(
            "/chat/stop-generation", StopGenerationRequest(conversation_id=conversation_id)
        )

    async def get_history(self, limit: int = 50) -> list[Message]:
        data = await self._client.get("/chat/history", params={"limit": limit})
        return parse_response(_messages, data or [])

    async def delete_message(self, message_id: str) -> None:
        await self._client.delete(f"/chat/messages/{message_id}")

    async def clear_history(self) -> None:
        await self._client.delete("/chat/history")
