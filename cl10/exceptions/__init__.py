"""Custom exceptions for cl10."""

from .base import Cl10Exception
from .clipboard import ClipboardError
from .ipc import (
    AlreadyRunningError,
    IPCError,
    ServerNotRunningError,
    ServerStartError,
    ServerTimeoutError,
)

__all__ = [
    "Cl10Exception",
    "ClipboardError",
    "IPCError",
    "ServerNotRunningError",
    "ServerTimeoutError",
    "ServerStartError",
    "AlreadyRunningError",
]
