"""Data models for cl10."""

from .command import Command, Request
from .entry import HistoryEntry

__all__ = [
    "HistoryEntry",
    "Command",
    "Request",
]
