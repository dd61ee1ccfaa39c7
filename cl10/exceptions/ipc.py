"""Socket transport exceptions."""

from .base import Cl10Exception


class IPCError(Cl10Exception):
    """Base class for failures talking over the local socket."""

    pass


class ServerNotRunningError(IPCError):
    """Raised when the socket is absent or refuses connections."""

    pass


class ServerTimeoutError(IPCError):
    """Raised when the watcher does not accept the connection in time."""

    pass


class ServerStartError(IPCError):
    """Raised when the server cannot bind or listen on its socket."""

    pass


class AlreadyRunningError(IPCError):
    """Raised when another watcher already answers on the socket."""

    pass
