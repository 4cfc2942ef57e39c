"""Chat page controller.

Drives one conversation through ``idle -> sending -> streaming -> idle``.
While streaming, ``stop()`` moves to ``stopping`` until the server has been
told, then back to ``idle``.
"""

import asyncio
import logging
import random
import uuid
from collections.abc import Awaitable, Callable
from enum import Enum

from wellnessai.api.chat import ChatApi
from wellnessai.api.errors import ApiError
from wellnessai.chat.streaming import SimulatedStream
from wellnessai.config import StreamPacing
from wellnessai.models.chat import ChatRequest, Message
from wellnessai.state.usage import UsageStore
from wellnessai.views.notify import Notifier

logger = logging.getLogger(__name__)

STOP_SUFFIX = "\n\n[Generation stopped]"


class ChatState(str, Enum):
    IDLE = "idle"
    SENDING = "sending"
    STREAMING = "streaming"
    STOPPING = "stopping"


class ChatController:
    """Conversation state plus the send/stream/stop flow.

    Attributes:
        messages: Conversation as shown, including optimistic user messages.
        streaming_text: Partial assistant reply while streaming, else "".
        state: Current ``ChatState``.
        conversation_id: Server conversation id once one exists.
    """

    def __init__(
        self,
        chat_api: ChatApi,
        usage: UsageStore,
        notifier: Notifier,
        pacing: StreamPacing | None = None,
        rng: random.Random | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        on_change: Callable[[], None] | None = None,
    ) -> None:
        self._api = chat_api
        self._usage = usage
        self._notifier = notifier
        self._pacing = pacing
        self._rng = rng
        self._sleep = sleep
        self._on_change = on_change

        self.messages: list[Message] = []
        self.streaming_text = ""
        self.state = ChatState.IDLE
        self.conversation_id: str | None = None

        self._stream: SimulatedStream | None = None
        self._pending: Message | None = None

    @property
    def is_busy(self) -> bool:
        return self.state is not ChatState.IDLE

    def _changed(self) -> None:
        if self._on_change is not None:
            self._on_change()

    async def submit(self, text: str, voice: bool = False) -> None:
        """Send ``text`` and reveal the reply.

        Blank input and submits while busy are ignored.
        """
        content = text.strip()
        if not content or self.state is not ChatState.IDLE:
            return

        self.messages.append(Message(id=uuid.uuid4().hex, content=content, role="user"))
        self.state = ChatState.SENDING
        self._changed()

        try:
            reply = await self._api.send_message(
                ChatRequest(message=content, voice=voice, conversation_id=self.conversation_id)
            )
        except ApiError as e:
            logger.error(f"Chat error: {e}")
            self._notifier.error("Failed to send message. Please try again.")
            self.state = ChatState.IDLE
            self._changed()
            return

        self.conversation_id = reply.conversation_id
        assistant = reply.assistant_message
        if assistant is None:
            logger.warning("Reply contained no assistant message")
            self.state = ChatState.IDLE
            self._changed()
            return

        stream = SimulatedStream(assistant.content, self._pacing, self._rng, self._sleep)
        self._stream = stream
        self._pending = assistant
        self.streaming_text = ""
        self.state = ChatState.STREAMING
        self._changed()

        async for prefix in stream:
            self.streaming_text = prefix
            self._changed()

        if self._stream is stream:
            self._stream = None
            self._pending = None
        if stream.cancelled:
            # stop() owns the rest of the transition
            return

        self.messages.append(assistant)
        self.streaming_text = ""
        self.state = ChatState.IDLE
        self._usage.increment_usage(assistant.tokens or reply.tokens, 1)
        self._changed()

    async def stop(self) -> None:
        """Stop the reveal, keep the partial reply and notify the server."""
        stream, pending = self._stream, self._pending
        if self.state is not ChatState.STREAMING or stream is None or pending is None:
            return

        stream.cancel()
        self._stream = None
        self._pending = None
        self.messages.append(
            pending.model_copy(update={"content": stream.revealed + STOP_SUFFIX})
        )
        self.streaming_text = ""
        self.state = ChatState.STOPPING
        self._changed()

        try:
            await self._api.stop_generation(self.conversation_id)
        except ApiError as e:
            logger.warning(f"Stop signal failed: {e}")
        finally:
            self.state = ChatState.IDLE
            self._changed()

    async def load_history(self) -> None:
        try:
            self.messages = await self._api.get_history()
        except ApiError as e:
            logger.error(f"Failed to load chat history: {e}")
            return
        self._changed()

    async def clear_history(self) -> None:
        try:
            await self._api.clear_history()
        except ApiError as e:
            logger.error(f"Failed to clear history: {e}")
            self._notifier.error("Failed to clear history")
            return
        self.messages = []
        self.conversation_id = None
        self._notifier.success("Chat history cleared")
        self._changed()
