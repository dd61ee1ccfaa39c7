"""System clipboard access through pyperclip."""

import logging
import threading

import pyperclip

from cl10.exceptions import ClipboardError

logger = logging.getLogger(__name__)


class PyperclipClipboard:
    """Clipboard sink and source backed by pyperclip.

    pyperclip has no change counter, so new content is detected by comparing
    against the last text seen. Text written by write_text counts as seen,
    which keeps the poller from re-capturing the watcher's own COPY.
    """

    def __init__(self, skip_current: bool = True):
        """Initialize the clipboard adapter.

        Args:
            skip_current: Treat whatever is on the clipboard right now as
                already seen, so starting the watcher does not capture it
        """
        self._lock = threading.Lock()
        self._last_seen: str | None = None
        if skip_current:
            try:
                self._last_seen = pyperclip.paste()
            except pyperclip.PyperclipException as e:
                logger.warning(f"Clipboard not readable at startup: {e}")

    def write_text(self, text: str) -> None:
        """Place text on the system clipboard.

        Raises:
            ClipboardError: If no clipboard mechanism is available
        """
        with self._lock:
            try:
                pyperclip.copy(text)
            except pyperclip.PyperclipException as e:
                raise ClipboardError(f"Cannot write clipboard: {e}") from e
            self._last_seen = text

    def read_new_text(self) -> str | None:
        """Return the clipboard text if it changed since the last look.

        Raises:
            ClipboardError: If no clipboard mechanism is available
        """
        with self._lock:
            try:
                current = pyperclip.paste()
            except pyperclip.PyperclipException as e:
                raise ClipboardError(f"Cannot read clipboard: {e}") from e
            if not current or current == self._last_seen:
                return None
            self._last_seen = current
            return current
