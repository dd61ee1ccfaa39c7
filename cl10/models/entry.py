"""Data model for a single clipboard history slot."""

from dataclasses import dataclass, replace
from datetime import datetime

from cl10.utils.text_utils import byte_count, count_lines, first_line


@dataclass(frozen=True)
class HistoryEntry:
    """One stored text snippet with its cached metadata.

    Entries are immutable values: the store replaces an entry instead of
    mutating it, so snapshots handed to readers never change underneath them.
    """

    text: str
    created_at: datetime
    last_used_at: datetime
    size_bytes: int
    preview_first_line: str

    @classmethod
    def create(cls, text: str, now: datetime) -> "HistoryEntry":
        """Build an entry for freshly pushed text, deriving the cached fields."""
        return cls(
            text=text,
            created_at=now,
            last_used_at=now,
            size_bytes=byte_count(text),
            preview_first_line=first_line(text),
        )

    @property
    def line_count(self) -> int:
        """Number of lines in the full text."""
        return count_lines(self.text)

    def touched(self, now: datetime) -> "HistoryEntry":
        """Return a copy with last_used_at refreshed."""
        return replace(self, last_used_at=now)

    def __str__(self) -> str:
        return f"HistoryEntry({self.preview_first_line!r}, {self.size_bytes}B)"
