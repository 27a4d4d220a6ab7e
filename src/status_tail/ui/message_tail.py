"""Bounded most-recent-first message window for the terminal display."""

from __future__ import annotations

from collections import deque

DEFAULT_MAX_MESSAGES = 10


class MessageTail:
    """Keep the newest messages first and drop anything past the cap.

    Not internally locked: the owning display guards it with the same lock
    that guards the header lines.
    """

    def __init__(self, max_messages: int = DEFAULT_MAX_MESSAGES) -> None:
        if max_messages < 1:
            raise ValueError("max_messages must be >= 1.")
        self._max_messages = max_messages
        self._messages: deque[str] = deque(maxlen=max_messages)

    def push(self, message: str) -> None:
        # appendleft on a bounded deque evicts from the right, i.e. the oldest.
        self._messages.appendleft(message)

    def snapshot(self) -> list[str]:
        """Return a copy of tracked messages, newest first."""
        return list(self._messages)

    def clear(self) -> None:
        self._messages.clear()

    def __len__(self) -> int:
        return len(self._messages)

    @property
    def max_messages(self) -> int:
        return self._max_messages
