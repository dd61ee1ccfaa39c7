"""Client side of the line protocol."""

import logging
import socket

from cl10.config import Cl10Config
from cl10.exceptions import ServerNotRunningError, ServerTimeoutError
from cl10.services.wire_codec import decode_reply, encode_request

logger = logging.getLogger(__name__)


class IPCClient:
    """Send one request line to the watcher and collect the reply.

    Failure categories stay distinct for callers:

    - ServerNotRunningError: no socket file, or nothing accepting on it
    - ServerTimeoutError: the connect did not complete within connect_timeout
    - empty reply: nothing (or only part of a reply) arrived within
      io_timeout; an empty history is the literal text EMPTY, never ""
    """

    def __init__(self, config: Cl10Config):
        """Initialize the client.

        Args:
            config: Provides socket path and timeouts
        """
        self.config = config

    def send(self, line: str) -> str:
        """Send a request line and return the full reply text.

        Args:
            line: Request without its newline, e.g. "COPY 3"

        Returns:
            Reply text, or "" if the watcher did not answer in time

        Raises:
            ServerNotRunningError: If the watcher is not reachable
            ServerTimeoutError: If the connection could not be set up in time
            ValueError: If line contains a newline
        """
        payload = encode_request(line)
        path = str(self.config.socket_path)
        with socket.socket(socket.AF_UNIX, socket.SOCK_STREAM) as sock:
            sock.settimeout(self.config.connect_timeout)
            try:
                sock.connect(path)
            except TimeoutError as e:
                raise ServerTimeoutError(f"Timed out connecting to {path}") from e
            except OSError as e:
                raise ServerNotRunningError(f"Watcher not reachable at {path}: {e}") from e

            # sendall retries interrupted writes until everything is out
            sock.settimeout(self.config.io_timeout)
            try:
                sock.sendall(payload)
                data = self._read_until_eof(sock)
            except TimeoutError:
                logger.debug(f"No reply within {self.config.io_timeout}s")
                return ""
            except (ConnectionResetError, BrokenPipeError) as e:
                raise ServerNotRunningError(f"Watcher dropped the connection: {e}") from e
        return decode_reply(data)

    def _read_until_eof(self, sock: socket.socket) -> bytes:
        chunks = []
        while True:
            chunk = sock.recv(4096)
            if not chunk:
                return b"".join(chunks)
            chunks.append(chunk)

    def ping(self) -> bool:
        """Check whether a watcher answers on the socket."""
        try:
            return self.send("PING").strip() == "PONG"
        except (ServerNotRunningError, ServerTimeoutError):
            return False
