"""Orchestration of the long-running watcher process."""

from .daemon import Daemon

__all__ = ["Daemon"]
