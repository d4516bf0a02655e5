"""Newest-first, fixed-capacity log of operator-visible messages."""

import logging
from collections import deque

_LOGGER = logging.getLogger(__name__)


class ActionLog:
    """Ring buffer of the most recent action messages."""

    def __init__(self, capacity: int = 5) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._messages: deque[str] = deque(maxlen=capacity)

    def __len__(self) -> int:
        return len(self._messages)

    def record(self, message: str) -> None:
        """Insert ``message`` at the front, dropping the oldest when full."""
        self._messages.appendleft(message)
        _LOGGER.info(message)

    def messages(self) -> tuple[str, ...]:
        """Return retained messages, newest first."""
        return tuple(self._messages)
