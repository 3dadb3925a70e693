"""Chat message records, the bounded display buffer and the sent-message history."""

from __future__ import annotations

import enum
from collections import deque
from dataclasses import dataclass
from datetime import datetime
from typing import Deque, Iterator, Tuple


class MessageType(enum.Enum):
    """How a chat line is presented."""

    USER = "user"
    SYSTEM = "system"
    CONNECTION_INFO = "connection_info"
    ERROR = "error"


@dataclass(frozen=True)
class ChatMessage:
    """One line shown in the chat area."""

    timestamp: str
    sender: str
    content: str
    message_type: MessageType


class MessageManager:
    """Keeps the most recent chat messages, oldest first."""

    def __init__(self, max_messages: int) -> None:
        self.max_messages = max_messages
        self._messages: Deque[ChatMessage] = deque(maxlen=max(max_messages, 0))

    def add_message(
        self, sender: str, content: str, message_type: MessageType
    ) -> ChatMessage:
        """Append a message stamped with the local time and return it."""
        message = ChatMessage(
            timestamp=datetime.now().strftime("%H:%M:%S"),
            sender=sender,
            content=content,
            message_type=message_type,
        )
        self._messages.append(message)
        return message

    @property
    def messages(self) -> Tuple[ChatMessage, ...]:
        """The stored messages, oldest first."""
        return tuple(self._messages)

    def clear(self) -> None:
        """Drop every stored message."""
        self._messages.clear()

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[ChatMessage]:
        return iter(tuple(self._messages))


class MessageHistory:
    """The last ``max_history`` messages this user sent."""

    def __init__(self, max_history: int) -> None:
        self.max_history = max_history
        self._entries: Deque[str] = deque(maxlen=max(max_history, 0))

    def add_message(self, message: str) -> None:
        """Record a sent message, discarding the oldest beyond the limit."""
        self._entries.append(message)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._entries))