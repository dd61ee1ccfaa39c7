"""Line protocol codec.

A request is one UTF-8 line, ``COMMAND[ argument]\\n``. A reply is one or
more newline-terminated lines; failures are a single ``ERR <reason>`` line.
"""

from cl10.models import Command, Request

ENCODING = "utf-8"
LINE_TERMINATOR = "\n"


def parse_line(line: str) -> Request:
    """Parse one request line into a Request.

    Trailing whitespace and newlines are stripped. The command token is
    everything before the first space, upper-cased; the argument is
    everything after that space, untouched, so multi-word ADD payloads
    survive intact.

    Args:
        line: Request line, with or without its terminator

    Returns:
        Parsed request (command UNKNOWN for empty or unrecognized input)
    """
    trimmed = line.rstrip()
    if not trimmed:
        return Request(Command.UNKNOWN, None, "")

    token, sep, rest = trimmed.partition(" ")
    token = token.upper()
    return Request(Command.from_token(token), rest if sep else None, token)


def encode_request(line: str) -> bytes:
    """Frame a request line for the socket.

    Raises:
        ValueError: If line contains a newline, which would end the request early
    """
    if LINE_TERMINATOR in line:
        raise ValueError("request line must not contain a newline")
    return (line + LINE_TERMINATOR).encode(ENCODING)


def encode_reply(text: str) -> bytes:
    return text.encode(ENCODING)


def decode_reply(data: bytes) -> str:
    """Decode a full reply buffer; invalid bytes are replaced, never raised."""
    return data.decode(ENCODING, errors="replace")


def decode_request(data: bytes) -> str:
    return data.decode(ENCODING, errors="replace")
