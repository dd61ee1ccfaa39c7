"""Thread-safe, capacity-bounded clipboard history."""

import logging
from collections.abc import Callable
from datetime import datetime, timezone

from cl10.models import HistoryEntry
from cl10.utils import ReadWriteLock

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 10


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class HistoryStore:
    """Ordered history of entries, index 0 being the most recent.

    The store exclusively owns the entry sequence. Reads (list, get, len)
    share a reader-writer lock; every mutation holds it exclusively, so each
    mutation is applied in full before any later read can observe it.

    All index arguments are positions in the ordering at the time of the
    call. Invalid indices (negative or past the end) make mutations a silent
    no-op; callers that need to report them check with get() first.
    """

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        clock: Callable[[], datetime] | None = None,
    ):
        """Initialize an empty history.

        Args:
            capacity: Maximum number of entries kept
            clock: Returns the current time; defaults to UTC now

        Raises:
            ValueError: If capacity is not positive
        """
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._clock = clock or _utc_now
        self._items: list[HistoryEntry] = []
        self._lock = ReadWriteLock()

    def _valid(self, index: int) -> bool:
        return 0 <= index < len(self._items)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def list(self) -> list[HistoryEntry]:
        """Snapshot of all entries in display order."""
        with self._lock.read_locked():
            return list(self._items)

    def get(self, index: int) -> HistoryEntry | None:
        """Entry at index, or None if index is out of range."""
        with self._lock.read_locked():
            return self._items[index] if self._valid(index) else None

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._items)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def push(self, text: str) -> None:
        """Insert text as the most recent entry.

        If an entry with identical text exists it is moved to the front with
        a refreshed last_used_at (created_at is kept) and nothing is evicted.
        Otherwise a new entry is inserted and the oldest entry is dropped
        when the history grows past capacity.

        Args:
            text: Already normalized, non-blank text within the size limit
        """
        now = self._clock()
        with self._lock.write_locked():
            for i, entry in enumerate(self._items):
                if entry.text == text:
                    del self._items[i]
                    self._items.insert(0, entry.touched(now))
                    return
            self._items.insert(0, HistoryEntry.create(text, now))
            if len(self._items) > self.capacity:
                evicted = self._items.pop()
                logger.debug(f"Evicted oldest entry ({evicted.size_bytes}B)")

    def touch(self, index: int) -> None:
        """Refresh last_used_at of the entry at index."""
        now = self._clock()
        with self._lock.write_locked():
            if self._valid(index):
                self._items[index] = self._items[index].touched(now)

    def delete(self, index: int) -> None:
        """Remove the entry at index."""
        with self._lock.write_locked():
            if self._valid(index):
                del self._items[index]

    def move_up(self, index: int) -> None:
        """Swap the entry at index with the one before it."""
        with self._lock.write_locked():
            if 0 < index < len(self._items):
                items = self._items
                items[index - 1], items[index] = items[index], items[index - 1]

    def move_down(self, index: int) -> None:
        """Swap the entry at index with the one after it."""
        with self._lock.write_locked():
            if 0 <= index < len(self._items) - 1:
                items = self._items
                items[index], items[index + 1] = items[index + 1], items[index]

    def move_top(self, index: int) -> None:
        """Move the entry at index to the front."""
        with self._lock.write_locked():
            if self._valid(index):
                self._items.insert(0, self._items.pop(index))

    def clear(self) -> None:
        """Remove every entry."""
        with self._lock.write_locked():
            self._items.clear()
