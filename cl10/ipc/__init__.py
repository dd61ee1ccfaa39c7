"""Local socket transport for cl10."""

from .client import IPCClient
from .server import IPCServer

__all__ = ["IPCClient", "IPCServer"]
