"""Utility functions for cl10."""

from .rwlock import ReadWriteLock
from .text_utils import (
    byte_count,
    count_lines,
    escape_preview,
    first_line,
    human_bytes,
    is_blank,
    normalize_text,
)

__all__ = [
    "ReadWriteLock",
    "normalize_text",
    "is_blank",
    "byte_count",
    "first_line",
    "count_lines",
    "human_bytes",
    "escape_preview",
]
