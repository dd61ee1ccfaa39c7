"""Business logic services for cl10."""

from .clipboard_service import PyperclipClipboard
from .clipboard_watcher import ClipboardWatcher
from .command_router import CommandRouter
from .history_store import HistoryStore
from .wire_codec import parse_line

__all__ = [
    "HistoryStore",
    "CommandRouter",
    "parse_line",
    "PyperclipClipboard",
    "ClipboardWatcher",
]
