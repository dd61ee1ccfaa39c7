"""Protocols for the system clipboard collaborators."""

from typing import Protocol


class ClipboardSink(Protocol):
    """Something COPY can write text to.

    The router only ever calls write_text; any clipboard backend (pyperclip,
    a test double, a GUI toolkit) implements this protocol.
    """

    def write_text(self, text: str) -> None:
        """Replace the clipboard contents with text.

        Args:
            text: Text to place on the clipboard

        Raises:
            ClipboardError: If the clipboard cannot be written
        """
        ...


class ClipboardSource(Protocol):
    """Something the poller can read newly copied text from."""

    def read_new_text(self) -> str | None:
        """Return clipboard text that has not been seen before.

        Returns:
            The new text, or None if the clipboard has not changed since the
            last call (or last holds text this process wrote itself).

        Raises:
            ClipboardError: If the clipboard cannot be read
        """
        ...
