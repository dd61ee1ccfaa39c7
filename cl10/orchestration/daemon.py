"""Host process wiring the store, server and clipboard poller together."""

import logging
import signal
import threading

from cl10 import __version__
from cl10.config import Cl10Config
from cl10.exceptions import AlreadyRunningError
from cl10.interfaces import ClipboardSink, ClipboardSource
from cl10.ipc import IPCClient, IPCServer
from cl10.services import ClipboardWatcher, CommandRouter, HistoryStore, PyperclipClipboard

logger = logging.getLogger(__name__)


class Daemon:
    """Own the history for the lifetime of the watcher process.

    Shutdown is cooperative: QUIT (via the server) and SIGINT/SIGTERM both
    set the same event, run() wakes up and stops the poller and the server.
    """

    def __init__(self, config: Cl10Config, clipboard=None, watch_clipboard: bool = True):
        """Initialize the daemon.

        Args:
            config: Configuration
            clipboard: Object implementing ClipboardSink (and ClipboardSource
                when watch_clipboard is set); defaults to PyperclipClipboard
            watch_clipboard: Poll the clipboard for new text
        """
        self.config = config
        self.clipboard: ClipboardSink = clipboard if clipboard is not None else PyperclipClipboard()
        self.store = HistoryStore(capacity=config.capacity)
        self.router = CommandRouter(
            self.store,
            self.clipboard,
            version=__version__,
            max_text_bytes=config.max_text_bytes,
            preview_max_len=config.preview_max_len,
        )
        self.shutdown_requested = threading.Event()
        self.server = IPCServer(self.router, config, self.shutdown_requested)
        self.watcher: ClipboardWatcher | None = None
        if watch_clipboard:
            source: ClipboardSource = self.clipboard  # type: ignore[assignment]
            self.watcher = ClipboardWatcher(source, self.store, config)
        self._stopped = False

    def start(self) -> None:
        """Claim the socket, start the server and then the poller.

        Raises:
            AlreadyRunningError: If another watcher answers on the socket
            ServerStartError: If the socket cannot be bound
        """
        path = self.config.socket_path
        if path.exists():
            if IPCClient(self.config).ping():
                raise AlreadyRunningError(f"Watcher already running at {path}")
            logger.info(f"Removing stale socket {path}")
            path.unlink(missing_ok=True)

        self.server.start()
        if self.watcher is not None:
            self.watcher.start()
        self._stopped = False
        logger.info(f"cl10 watcher {__version__} started (capacity {self.config.capacity})")

    def request_shutdown(self) -> None:
        """Ask run() to shut down; safe from any thread or signal handler."""
        self.shutdown_requested.set()

    def stop(self) -> None:
        """Stop the poller and the server."""
        if self._stopped:
            return
        self._stopped = True
        logger.info("Shutting down…")
        if self.watcher is not None:
            self.watcher.stop()
        self.server.stop()

    def run(self) -> None:
        """Start, block until shutdown is requested, then stop."""
        self.start()
        self._install_signal_handlers()
        try:
            # Timed waits keep the main thread responsive to signals
            while not self.shutdown_requested.wait(0.5):
                pass
        finally:
            self.stop()

    def _install_signal_handlers(self) -> None:
        if threading.current_thread() is not threading.main_thread():
            return

        def _on_signal(_signum, _frame):
            # No logging here: the handler may interrupt a thread holding the logging lock
            self.request_shutdown()

        signal.signal(signal.SIGINT, _on_signal)
        signal.signal(signal.SIGTERM, _on_signal)
