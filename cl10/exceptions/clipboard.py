"""Clipboard related exceptions."""

from .base import Cl10Exception


class ClipboardError(Cl10Exception):
    """Raised when the system clipboard cannot be read or written."""

    pass
