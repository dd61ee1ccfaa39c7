"""Interface protocols for cl10."""

from .clipboard import ClipboardSink, ClipboardSource
from .presenter import PresenterProtocol

__all__ = ["ClipboardSink", "ClipboardSource", "PresenterProtocol"]
