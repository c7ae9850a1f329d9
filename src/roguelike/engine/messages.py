from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..entities.entity import Color

logger = logging.getLogger(__name__)

DEFAULT_MESSAGE_COLOR: Color = (255, 255, 255)


@dataclass(frozen=True)
class Message:
    """A plain-text notification for the renderer or the log.

    Attributes:
        turn: Turn counter when the message was produced.
        text: Human-readable text.
        color: Suggested display color.
    """

    turn: int
    text: str
    color: Color = DEFAULT_MESSAGE_COLOR


class MessageLog:
    """Bounded, in-memory history of event notifications for one session.

    Oldest entries are dropped once ``capacity`` is exceeded.
    """

    def __init__(self, capacity: int = 100) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._messages: List[Message] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._messages)

    def add(self, turn: int, text: str, color: Optional[Color] = None) -> Message:
        msg = Message(turn=turn, text=text, color=color or DEFAULT_MESSAGE_COLOR)
        self._messages.append(msg)
        if len(self._messages) > self._capacity:
            dropped = len(self._messages) - self._capacity
            del self._messages[0:dropped]
            logger.debug("MessageLog capacity exceeded, dropped=%d old messages", dropped)
        logger.debug("Message [turn %d]: %s", turn, text)
        return msg

    def messages(self) -> List[Message]:
        return list(self._messages)

    def get_recent(self, n: int) -> List[Message]:
        if n <= 0:
            return []
        return self._messages[-n:]

    def recent_text(self, n: int) -> Tuple[str, ...]:
        return tuple(m.text for m in self.get_recent(n))

    def clear(self) -> None:
        self._messages.clear()


__all__ = ["Message", "MessageLog", "DEFAULT_MESSAGE_COLOR"]
