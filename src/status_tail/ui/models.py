"""Typed state models for the in-place terminal display."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DisplaySnapshot:
    """One consistent view of header lines and message tail, taken under lock."""

    header_lines: tuple[str, ...]
    separator: str
    messages: tuple[str, ...] = ()

    def lines(self) -> list[str]:
        """Return display lines in paint order: headers, separator, newest message first."""
        return [*self.header_lines, self.separator, *self.messages]
