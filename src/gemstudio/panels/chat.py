import logging
import time
from collections.abc import Callable
from uuid import uuid4

from ..config import CHAT_ERROR_TEXT, CHAT_GREETING
from ..contracts import ChatMessage, Role
from ..errors import StudioError
from ..llm import ModelGateway
from ..prompts import compose_chat_request
from .base import Panel

logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class ChatPanel(Panel):
    """Chat playground state: an append-only conversation.

    The user message is recorded before the request is dispatched and
    the reply after it resolves, so message order matches causal order.
    A failed request appends an apology from the model instead of
    raising, keeping the conversation going.
    """

    name = "chat"

    def __init__(
        self,
        gateway: ModelGateway,
        greeting: str | None = CHAT_GREETING,
        clock: Callable[[], int] = _now_ms,
    ):
        super().__init__(gateway)
        self._clock = clock
        self._last_timestamp = 0
        self._messages: list[ChatMessage] = []
        if greeting:
            self._append(Role.MODEL, greeting)

    @property
    def messages(self) -> tuple[ChatMessage, ...]:
        return tuple(self._messages)

    def _append(self, role: Role, content: str) -> ChatMessage:
        timestamp = max(self._clock(), self._last_timestamp + 1)
        self._last_timestamp = timestamp
        message = ChatMessage(id=uuid4().hex, role=role, content=content, timestamp=timestamp)
        self._messages.append(message)
        return message

    async def send(self, text: str) -> ChatMessage | None:
        """Send a user message and append the model's reply.

        Returns:
            The appended model message, or None for blank input
        """
        if not text.strip():
            return None
        async with self._in_flight():
            history = list(self._messages)
            self._append(Role.USER, text)
            contents = compose_chat_request(history, text)
            try:
                reply = await self._gateway.send_chat(contents)
            except StudioError as e:
                logger.info("Chat request failed: %s", e)
                reply = CHAT_ERROR_TEXT
            return self._append(Role.MODEL, reply)
