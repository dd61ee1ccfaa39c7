"""Single source of truth for command behavior.

Both the socket server and any direct caller go through CommandRouter so
the reply text for a command can never differ between entry points.
"""

import logging
import re

from cl10 import __version__
from cl10.exceptions import ClipboardError
from cl10.interfaces import ClipboardSink
from cl10.models import Command, HistoryEntry, Request
from cl10.services.history_store import HistoryStore
from cl10.utils import byte_count, escape_preview, human_bytes, is_blank, normalize_text

logger = logging.getLogger(__name__)

DEFAULT_MAX_TEXT_BYTES = 256 * 1024

_INDEX_RE = re.compile(r"([+-]?)([0-9]+)")

# Indices are signed 64-bit on the wire; anything wider is malformed
INDEX_MIN = -(2**63)
INDEX_MAX = 2**63 - 1
_INDEX_MAX_DIGITS = len(str(INDEX_MAX))

# Reply texts
OK = "OK\n"
PONG = "PONG\n"
EMPTY = "EMPTY\n"
ERR_UNKNOWN = "ERR unknown\n"
ERR_BAD_INDEX = "ERR bad index\n"
ERR_NO_SUCH_INDEX = "ERR no-such-index\n"
ERR_MISSING_TEXT = "ERR missing text\n"
ERR_MISSING_QUERY = "ERR missing query\n"
ERR_BLANK = "ERR blank\n"
ERR_OVERSIZE = "ERR oversize\n"
ERR_CLIPBOARD = "ERR clipboard\n"


def parse_index(argument: str | None) -> int | None:
    """Parse an index argument: optional sign and ASCII digits, nothing else.

    Values outside the signed 64-bit range are rejected like any other
    malformed index.
    """
    match = _INDEX_RE.fullmatch(argument) if argument is not None else None
    if match is None:
        return None
    sign, digits = match.groups()
    digits = digits.lstrip("0") or "0"
    if len(digits) > _INDEX_MAX_DIGITS:
        return None
    index = int(sign + digits)
    if not INDEX_MIN <= index <= INDEX_MAX:
        return None
    return index


class CommandRouter:
    """Map wire commands to store operations and produce reply text."""

    def __init__(
        self,
        store: HistoryStore,
        clipboard: ClipboardSink,
        version: str = __version__,
        max_text_bytes: int = DEFAULT_MAX_TEXT_BYTES,
        preview_max_len: int = 120,
    ):
        """Initialize the router.

        Args:
            store: History the commands operate on
            clipboard: Sink written by COPY
            version: Version reported by VERSION
            max_text_bytes: Largest ADD payload accepted, in UTF-8 bytes
            preview_max_len: Maximum preview length in LIST/FIND rows
        """
        self.store = store
        self.clipboard = clipboard
        self.version = version
        self.max_text_bytes = max_text_bytes
        self.preview_max_len = preview_max_len

    def handle(self, request: Request) -> str:
        """Handle one request and return the newline-terminated reply."""
        cmd = request.command
        arg = request.argument

        if cmd is Command.PING:
            return PONG
        if cmd is Command.VERSION:
            return f"CL10 {self.version}\n"
        if cmd is Command.LIST:
            return self._rows(enumerate(self.store.list()))
        if cmd is Command.FIND:
            return self._find(arg)
        if cmd is Command.ADD:
            return self._add(arg)
        if cmd is Command.COPY:
            return self._copy(arg)
        if cmd is Command.CLEAR:
            self.store.clear()
            return OK
        if cmd in (Command.DEL, Command.UP, Command.DOWN, Command.TOP):
            # Out-of-range indices are a silent no-op; only unparseable ones fail
            index = parse_index(arg)
            if index is None:
                return ERR_BAD_INDEX
            self._move_or_delete(cmd, index)
            return OK

        # UNKNOWN, and QUIT which only the server acts on
        return ERR_UNKNOWN

    def _move_or_delete(self, cmd: Command, index: int) -> None:
        if cmd is Command.DEL:
            self.store.delete(index)
        elif cmd is Command.UP:
            self.store.move_up(index)
        elif cmd is Command.DOWN:
            self.store.move_down(index)
        else:
            self.store.move_top(index)

    def _add(self, arg: str | None) -> str:
        if arg is None:
            return ERR_MISSING_TEXT
        text = normalize_text(arg)
        if is_blank(text):
            return ERR_BLANK
        if byte_count(text) > self.max_text_bytes:
            return ERR_OVERSIZE
        self.store.push(text)
        return OK

    def _copy(self, arg: str | None) -> str:
        index = parse_index(arg)
        if index is None:
            return ERR_BAD_INDEX
        entry = self.store.get(index)
        if entry is None:
            return ERR_NO_SUCH_INDEX
        try:
            self.clipboard.write_text(entry.text)
        except ClipboardError as e:
            logger.error(f"COPY {index} failed: {e}")
            return ERR_CLIPBOARD
        self.store.touch(index)
        return OK

    def _find(self, arg: str | None) -> str:
        query = (arg or "").strip()
        if not query:
            return ERR_MISSING_QUERY
        needle = query.lower()
        matches = (
            (i, entry)
            for i, entry in enumerate(self.store.list())
            if needle in entry.preview_first_line.lower() or needle in entry.text.lower()
        )
        return self._rows(matches)

    def _rows(self, indexed_entries) -> str:
        rows = "".join(self.format_row(i, entry) for i, entry in indexed_entries)
        return rows or EMPTY

    def format_row(self, index: int, entry: HistoryEntry) -> str:
        """Render one LIST/FIND row: index, quoted preview, size and line count."""
        preview = escape_preview(entry.preview_first_line, self.preview_max_len)
        metric = human_bytes(entry.size_bytes)
        lines = entry.line_count
        if lines > 1:
            metric = f"{metric} · {lines}L"
        return f'{index}  "{preview}"  {metric}\n'
