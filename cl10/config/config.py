"""Configuration classes for cl10."""

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Cl10Config:
    """Immutable configuration shared by the watcher and the command line.

    All configuration is frozen (immutable) so the same instance can be
    handed to the server, the poller and every connection worker.
    """

    # History settings
    capacity: int = 10
    max_text_bytes: int = 256 * 1024
    preview_max_len: int = 120

    # Socket location: <socket_dir>/<socket_name_prefix><uid>.sock
    socket_dir: Path = Path("/tmp")
    socket_name_prefix: str = "cl10-"
    socket_path_override: Path | None = None

    # Client timeouts (seconds)
    connect_timeout: float = 0.2
    io_timeout: float = 2.0

    # Server settings
    listen_backlog: int = 64
    accept_poll_interval: float = 0.2  # How often the accept loop checks for stop()
    recv_chunk_size: int = 1024

    # Clipboard poller
    poll_interval: float = 0.15

    def __post_init__(self):
        """Convert string paths to Path objects if needed."""
        if isinstance(self.socket_dir, str):
            object.__setattr__(self, "socket_dir", Path(self.socket_dir))
        if isinstance(self.socket_path_override, str):
            object.__setattr__(
                self,
                "socket_path_override",
                Path(self.socket_path_override) if self.socket_path_override else None,
            )

    @property
    def socket_path(self) -> Path:
        """Per-user socket path, unless an explicit override is configured."""
        if self.socket_path_override is not None:
            return self.socket_path_override
        return self.socket_dir / f"{self.socket_name_prefix}{os.getuid()}.sock"
