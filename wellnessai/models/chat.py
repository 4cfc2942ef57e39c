"""Chat conversation models."""

from datetime import datetime
from typing import Literal

from pydantic import Field, field_validator

from wellnessai.models.base import CamelModel


class Message(CamelModel):
    """A single chat message.

    Attributes:
        id: Message identifier (client-generated for optimistic inserts).
        content: Message text.
        role: Either "user" or "assistant".
        timestamp: When the message was created.
        tokens: Tokens spent generating an assistant message.
    """

    id: str
    content: str
    role: Literal["user", "assistant"]
    timestamp: datetime = Field(default_factory=datetime.now)
    tokens: int | None = None


class ChatRequest(CamelModel):
    """Request payload for POST /chat/message."""

    message: str = Field(..., min_length=1)
    voice: bool = False
    conversation_id: str | None = None

    @field_validator("message", mode="before")
    @classmethod
    def strip_message(cls, v: str) -> str:
        """Strip whitespace from message before validation."""
        if isinstance(v, str):
            return v.strip()
        return v


class ChatReply(CamelModel):
    """Full conversation returned after sending a message.

    Attributes:
        conversation_id: Conversation the message was appended to.
        messages: Whole conversation including the new assistant reply.
        tokens: Tokens consumed by this exchange.
    """

    conversation_id: str
    messages: list[Message]
    tokens: int = Field(default=0, ge=0)

    @property
    def assistant_message(self) -> Message | None:
        """The newest assistant message, if the server produced one."""
        for message in reversed(self.messages):
            if message.role == "assistant":
                return message
        return None


class StopGenerationRequest(CamelModel):
    conversation_id: str | None = None
