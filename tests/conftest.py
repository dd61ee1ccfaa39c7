"""Pytest configuration and shared fixtures."""

import shutil
import tempfile
from pathlib import Path

import pytest

from cl10.config import Cl10Config
from cl10.exceptions import ClipboardError
from cl10.ipc import IPCClient, IPCServer
from cl10.presenters import NullPresenter
from cl10.services import CommandRouter, HistoryStore


@pytest.fixture
def socket_dir():
    """Provide a short temporary directory for Unix sockets.

    pytest's tmp_path can exceed the ~100 byte limit on AF_UNIX paths, so
    sockets live in a short mkdtemp directory under /tmp instead.
    """
    path = Path(tempfile.mkdtemp(prefix="cl10-", dir="/tmp"))
    yield path
    shutil.rmtree(path, ignore_errors=True)


@pytest.fixture
def test_config(socket_dir):
    """Provide a test configuration with a private socket and fast timings."""
    return Cl10Config(
        capacity=10,
        socket_path_override=socket_dir / "s.sock",
        io_timeout=1.0,
        accept_poll_interval=0.05,
        poll_interval=0.01,
    )


class FakeClipboard:
    """A real ClipboardSink/ClipboardSource that records writes in memory."""

    def __init__(self):
        self.writes = []
        self.pending = []
        self.fail_writes = False
        self.fail_reads = False

    def write_text(self, text: str) -> None:
        if self.fail_writes:
            raise ClipboardError("no clipboard")
        self.writes.append(text)

    def read_new_text(self):
        if self.fail_reads:
            raise ClipboardError("no clipboard")
        return self.pending.pop(0) if self.pending else None


@pytest.fixture
def fake_clipboard():
    """Provide an in-memory clipboard."""
    return FakeClipboard()


@pytest.fixture
def store():
    """Provide an empty history with the default capacity."""
    return HistoryStore(capacity=10)


@pytest.fixture
def router(store, fake_clipboard):
    """Provide a router over the store and fake clipboard."""
    return CommandRouter(store, fake_clipboard, version="9.9.9")


@pytest.fixture
def null_presenter():
    """Provide a null presenter for testing (no output)."""
    return NullPresenter()


class RecordingPresenter:
    """A real presenter implementation that records all output for assertion."""

    def __init__(self, confirm_answer=True):
        self.replies = []
        self.infos = []
        self.errors = []
        self.questions = []
        self.confirm_answer = confirm_answer

    def show_reply(self, text: str) -> None:
        self.replies.append(text)

    def show_info(self, message: str) -> None:
        self.infos.append(message)

    def show_error(self, message: str) -> None:
        self.errors.append(message)

    def confirm(self, question: str) -> bool:
        self.questions.append(question)
        return self.confirm_answer


@pytest.fixture
def recording_presenter():
    """Provide a presenter that records all calls for assertion."""
    return RecordingPresenter()


@pytest.fixture
def running_server(router, test_config):
    """Start a real server on the test socket; stopped after the test."""
    server = IPCServer(router, test_config)
    server.start()
    yield server
    server.stop()


@pytest.fixture
def client(test_config):
    """Provide a client pointed at the test socket."""
    return IPCClient(test_config)
