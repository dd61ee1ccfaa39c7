"""Unix socket server: one request line, one reply, one connection."""

import logging
import os
import socket
import threading
from pathlib import Path

from cl10.config import Cl10Config
from cl10.exceptions import ServerStartError
from cl10.models import Command
from cl10.services.command_router import OK, CommandRouter
from cl10.services.wire_codec import decode_request, encode_reply, parse_line

logger = logging.getLogger(__name__)


class IPCServer:
    """Serve the line protocol on the per-user socket.

    Each accepted connection gets its own worker thread which reads a single
    line, answers it and closes. QUIT never reaches the router: the worker
    replies OK, closes the connection and only then sets the shutdown event
    the hosting process waits on.
    """

    def __init__(
        self,
        router: CommandRouter,
        config: Cl10Config,
        shutdown_requested: threading.Event | None = None,
    ):
        """Initialize the server (does not bind yet).

        Args:
            router: Resolves every command except QUIT
            config: Provides socket path, backlog and buffer sizes
            shutdown_requested: Event set after a QUIT has been acknowledged
        """
        self.router = router
        self.config = config
        self.shutdown_requested = shutdown_requested or threading.Event()
        self._socket: socket.socket | None = None
        self._accept_thread: threading.Thread | None = None
        self._stop_event = threading.Event()

    @property
    def socket_path(self) -> Path:
        return self.config.socket_path

    @property
    def is_listening(self) -> bool:
        return self._socket is not None

    def start(self) -> None:
        """Bind, restrict permissions, listen and start accepting.

        Raises:
            ServerStartError: If the socket cannot be bound or listened on
        """
        if self._socket is not None:
            return

        path = self.socket_path
        sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
        try:
            path.unlink(missing_ok=True)
            sock.bind(str(path))
            os.chmod(path, 0o600)
            sock.listen(self.config.listen_backlog)
            # Bounded accept() so stop() is noticed promptly
            sock.settimeout(self.config.accept_poll_interval)
        except OSError as e:
            sock.close()
            raise ServerStartError(f"Cannot listen on {path}: {e}") from e

        self._socket = sock
        self._stop_event.clear()
        self._accept_thread = threading.Thread(
            target=self._accept_loop, args=(sock,), name="cl10-accept", daemon=True
        )
        self._accept_thread.start()
        logger.info(f"IPC listening at {path}")

    def stop(self) -> None:
        """Stop accepting, close the listening socket and remove its file.

        Connections already being handled are left to finish on their own.
        """
        sock = self._socket
        if sock is None:
            return
        self._socket = None
        self._stop_event.set()
        if self._accept_thread is not None:
            self._accept_thread.join(timeout=self.config.accept_poll_interval * 5)
            self._accept_thread = None
        sock.close()
        try:
            self.socket_path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning(f"Could not remove socket file {self.socket_path}: {e}")
        logger.info("IPC server stopped")

    def _accept_loop(self, sock: socket.socket) -> None:
        while not self._stop_event.is_set():
            try:
                conn, _ = sock.accept()
            except TimeoutError:
                continue
            except OSError as e:
                if self._stop_event.is_set():
                    break
                logger.warning(f"accept() failed: {e}")
                continue
            worker = threading.Thread(
                target=self._handle_connection, args=(conn,), name="cl10-conn", daemon=True
            )
            worker.start()

    def _handle_connection(self, conn: socket.socket) -> None:
        """Read one line, answer it, close the connection."""
        quit_requested = False
        try:
            with conn:
                # Plain blocking I/O for the worker
                conn.settimeout(None)
                line = self._read_line(conn)
                if line is None:
                    logger.debug("Peer closed before sending a full line")
                    return
                request = parse_line(line)
                logger.debug(f"Request: {request}")
                if request.command is Command.QUIT:
                    reply = OK
                    quit_requested = True
                else:
                    reply = self.router.handle(request)
                conn.sendall(encode_reply(reply))
        except BrokenPipeError:
            logger.debug("Client disconnected before receiving reply")
        except Exception:
            logger.exception("Error handling connection")
        finally:
            if quit_requested:
                logger.info("QUIT received, requesting shutdown")
                self.shutdown_requested.set()

    def _read_line(self, conn: socket.socket) -> str | None:
        """Read until a newline; None if the peer closes first."""
        buf = bytearray()
        while True:
            chunk = conn.recv(self.config.recv_chunk_size)
            if not chunk:
                return None
            buf += chunk
            newline = buf.find(b"\n")
            if newline != -1:
                return decode_request(bytes(buf[:newline]))
