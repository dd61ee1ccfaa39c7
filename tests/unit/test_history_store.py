"""Tests for history_store module."""

import threading
from datetime import datetime, timedelta, timezone

import pytest

from cl10.services.history_store import HistoryStore


class FakeClock:
    """Clock advancing one second per call."""

    def __init__(self):
        self.now = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def __call__(self):
        self.now += timedelta(seconds=1)
        return self.now


def _texts(store):
    return [entry.text for entry in store.list()]


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def filled_store(clock):
    """Store holding c (index 0), b, a."""
    store = HistoryStore(capacity=10, clock=clock)
    for text in ("a", "b", "c"):
        store.push(text)
    return store


# ---------------------------------------------------------------------------
# TestPush
# ---------------------------------------------------------------------------


class TestPush:
    """Tests for HistoryStore.push."""

    def test_newest_first(self, filled_store):
        """Should put the most recent push at index 0."""
        assert _texts(filled_store) == ["c", "b", "a"]

    def test_caches_derived_fields(self, store):
        """Should cache byte size and first line at insertion."""
        store.push("héllo\nworld")
        entry = store.get(0)
        assert entry.size_bytes == len("héllo\nworld".encode("utf-8"))
        assert entry.preview_first_line == "héllo"
        assert entry.line_count == 2

    def test_duplicate_promotes_existing(self, filled_store, clock):
        """Should move an existing text to the front without growing."""
        original = filled_store.get(2)
        filled_store.push("a")

        assert _texts(filled_store) == ["a", "c", "b"]
        promoted = filled_store.get(0)
        assert promoted.created_at == original.created_at
        assert promoted.last_used_at > original.last_used_at

    def test_capacity_evicts_oldest(self, clock):
        """Should keep only the most recent `capacity` entries."""
        store = HistoryStore(capacity=3, clock=clock)
        for i in range(5):
            store.push(f"t{i}")
        assert _texts(store) == ["t4", "t3", "t2"]

    def test_repush_counts_as_most_recent(self, clock):
        """Should treat a re-pushed text as fresh when evicting."""
        store = HistoryStore(capacity=3, clock=clock)
        for text in ("a", "b", "c"):
            store.push(text)
        store.push("a")
        store.push("d")
        assert _texts(store) == ["d", "a", "c"]

    def test_length_never_exceeds_capacity(self):
        """Should hold the capacity invariant for any push sequence."""
        store = HistoryStore(capacity=4)
        for i in range(50):
            store.push(f"text {i % 7}")
            assert len(store) <= 4

    def test_rejects_non_positive_capacity(self):
        with pytest.raises(ValueError):
            HistoryStore(capacity=0)


# ---------------------------------------------------------------------------
# TestReads
# ---------------------------------------------------------------------------


class TestReads:
    """Tests for HistoryStore.list and HistoryStore.get."""

    def test_empty_list(self, store):
        assert store.list() == []

    def test_get_out_of_range(self, filled_store):
        assert filled_store.get(3) is None

    def test_get_negative_is_invalid(self, filled_store):
        """Should not index from the end."""
        assert filled_store.get(-1) is None

    def test_list_is_snapshot(self, filled_store):
        """Mutating the returned list should not affect the store."""
        snapshot = filled_store.list()
        snapshot.clear()
        assert len(filled_store) == 3


# ---------------------------------------------------------------------------
# TestMutations
# ---------------------------------------------------------------------------


class TestMutations:
    """Tests for touch, delete, moves and clear."""

    def test_touch_updates_last_used(self, filled_store):
        before = filled_store.get(1)
        filled_store.touch(1)
        after = filled_store.get(1)
        assert after.last_used_at > before.last_used_at
        assert after.created_at == before.created_at
        assert _texts(filled_store) == ["c", "b", "a"]

    def test_touch_invalid_is_noop(self, filled_store):
        filled_store.touch(9)
        assert _texts(filled_store) == ["c", "b", "a"]

    def test_delete(self, filled_store):
        filled_store.delete(1)
        assert _texts(filled_store) == ["c", "a"]

    def test_delete_invalid_is_noop(self, filled_store):
        filled_store.delete(5)
        filled_store.delete(-1)
        assert _texts(filled_store) == ["c", "b", "a"]

    def test_move_up(self, filled_store):
        filled_store.move_up(2)
        assert _texts(filled_store) == ["c", "a", "b"]

    def test_move_up_first_is_noop(self, filled_store):
        filled_store.move_up(0)
        assert _texts(filled_store) == ["c", "b", "a"]

    def test_move_down(self, filled_store):
        filled_store.move_down(0)
        assert _texts(filled_store) == ["b", "c", "a"]

    def test_move_down_last_is_noop(self, filled_store):
        filled_store.move_down(2)
        assert _texts(filled_store) == ["c", "b", "a"]

    def test_move_top(self, filled_store):
        filled_store.move_top(2)
        assert _texts(filled_store) == ["a", "c", "b"]

    def test_move_top_invalid_is_noop(self, filled_store):
        filled_store.move_top(3)
        assert _texts(filled_store) == ["c", "b", "a"]

    def test_clear(self, filled_store):
        filled_store.clear()
        assert filled_store.list() == []


# ---------------------------------------------------------------------------
# TestConcurrency
# ---------------------------------------------------------------------------


class TestConcurrency:
    """Tests for concurrent access to the store."""

    def test_concurrent_pushes_respect_capacity(self):
        """Concurrent distinct pushes should leave exactly capacity entries."""
        store = HistoryStore(capacity=10)
        texts = [f"entry-{i}" for i in range(200)]
        barrier = threading.Barrier(8)

        def worker(chunk):
            barrier.wait()
            for text in chunk:
                store.push(text)

        threads = [threading.Thread(target=worker, args=(texts[i::8],)) for i in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        entries = store.list()
        assert len(entries) == 10
        assert len({e.text for e in entries}) == 10
        assert all(e.text in texts for e in entries)

    def test_readers_and_writers_interleave(self):
        """Reads during mutations should always see a consistent history."""
        store = HistoryStore(capacity=5)
        errors = []
        stop = threading.Event()

        def reader():
            while not stop.is_set():
                entries = store.list()
                if len(entries) > 5 or len({e.text for e in entries}) != len(entries):
                    errors.append(entries)

        readers = [threading.Thread(target=reader) for _ in range(4)]
        for t in readers:
            t.start()
        for i in range(500):
            store.push(f"x{i % 13}")
            if i % 7 == 0:
                store.move_top(3)
            if i % 11 == 0:
                store.delete(1)
        stop.set()
        for t in readers:
            t.join()

        assert errors == []
