"""Background poller feeding newly copied text into the history."""

import logging
import threading

from cl10.config import Cl10Config
from cl10.exceptions import ClipboardError
from cl10.interfaces import ClipboardSource
from cl10.services.history_store import HistoryStore
from cl10.utils import byte_count, escape_preview, first_line, is_blank, normalize_text

logger = logging.getLogger(__name__)


class ClipboardWatcher:
    """Poll a clipboard source and push new text into the store.

    The watcher only ever calls HistoryStore.push, with text that is already
    normalized, non-blank and within the size limit.
    """

    def __init__(self, source: ClipboardSource, store: HistoryStore, config: Cl10Config):
        """Initialize the watcher.

        Args:
            source: Clipboard to poll
            store: History receiving captured text
            config: Provides poll_interval and max_text_bytes
        """
        self.source = source
        self.store = store
        self.config = config
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None
        self._failing = False

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Start polling on a daemon thread."""
        if self.running:
            return
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._run, name="cl10-watcher", daemon=True)
        self._thread.start()
        logger.info("Watcher started")

    def stop(self) -> None:
        """Stop polling and wait briefly for the thread to exit."""
        if self._thread is None:
            return
        self._stop_event.set()
        self._thread.join(timeout=max(1.0, self.config.poll_interval * 4))
        self._thread = None
        logger.info("Watcher stopped")

    def _run(self) -> None:
        while not self._stop_event.is_set():
            self.tick()
            self._stop_event.wait(self.config.poll_interval)

    def tick(self) -> bool:
        """Check the clipboard once.

        Returns:
            True if new text was pushed into the store
        """
        try:
            raw = self.source.read_new_text()
        except ClipboardError as e:
            # Log once per failure streak, keep polling
            if not self._failing:
                logger.warning(f"Clipboard poll failed: {e}")
                self._failing = True
            return False
        self._failing = False

        if raw is None:
            return False
        text = normalize_text(raw)
        if is_blank(text):
            return False
        if byte_count(text) > self.config.max_text_bytes:
            logger.warning(f"Skipped text >{self.config.max_text_bytes // 1024}KB")
            return False

        self.store.push(text)
        logger.info(f"Capture: {escape_preview(first_line(text), self.config.preview_max_len)}")
        return True
