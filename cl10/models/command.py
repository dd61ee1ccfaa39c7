"""Wire command models."""

from dataclasses import dataclass
from enum import Enum


class Command(Enum):
    """Closed set of commands understood on the wire."""

    PING = "PING"
    VERSION = "VERSION"
    LIST = "LIST"
    FIND = "FIND"
    ADD = "ADD"
    COPY = "COPY"
    DEL = "DEL"
    CLEAR = "CLEAR"
    UP = "UP"
    DOWN = "DOWN"
    TOP = "TOP"
    QUIT = "QUIT"
    UNKNOWN = ""

    @classmethod
    def from_token(cls, token: str) -> "Command":
        """Map an upper-cased command token to a Command (UNKNOWN if unrecognized)."""
        if not token:
            return cls.UNKNOWN
        try:
            return cls(token)
        except ValueError:
            return cls.UNKNOWN


@dataclass(frozen=True)
class Request:
    """A parsed request line."""

    command: Command
    argument: str | None = None
    token: str = ""  # Raw upper-cased token, kept for logging unknown commands

    def __str__(self) -> str:
        if self.argument is None:
            return self.token or "<empty>"
        return f"{self.token} <{len(self.argument)} chars>"
