"""Text processing utilities."""

# Characters that start a new line for line counting purposes
LINE_BREAKS = frozenset("\n\r\v\f\x85\u2028\u2029")

TRAILING_WHITESPACE = "\n\r\t "


def normalize_text(text: str) -> str:
    """Canonicalize line endings and drop trailing whitespace.

    Args:
        text: Raw text from the clipboard or an ADD request

    Returns:
        Text with CRLF converted to LF and trailing newlines, tabs and
        spaces removed
    """
    return text.replace("\r\n", "\n").rstrip(TRAILING_WHITESPACE)


def is_blank(text: str) -> bool:
    """Check whether text contains nothing but whitespace."""
    return not text.strip()


def byte_count(text: str) -> int:
    """Length of text in bytes under UTF-8."""
    return len(text.encode("utf-8"))


def first_line(text: str) -> str:
    """Text up to (not including) the first newline."""
    return text.split("\n", 1)[0]


def count_lines(text: str) -> int:
    """Count lines as one plus the number of line break characters."""
    return 1 + sum(1 for ch in text if ch in LINE_BREAKS)


def human_bytes(size: int) -> str:
    """Render a byte count as B, KB or MB.

    Args:
        size: Number of bytes

    Returns:
        "512B" below 1 KiB, otherwise one decimal place, e.g. "1.5KB", "2.0MB"
    """
    if size < 1024:
        return f"{size}B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f}KB"
    return f"{size / (1024 * 1024):.1f}MB"


def escape_preview(text: str, max_len: int = 120) -> str:
    """Make a single-line preview safe to show between double quotes.

    Tabs become spaces, double quotes are backslash-escaped and anything
    longer than max_len is cut to max_len - 1 characters plus an ellipsis.

    Args:
        text: Preview text (normally the first line of an entry)
        max_len: Maximum length of the returned preview

    Returns:
        Escaped, possibly truncated preview
    """
    escaped = text.replace("\t", " ").replace('"', '\\"')
    if len(escaped) > max_len:
        escaped = escaped[: max_len - 1] + "…"
    return escaped
