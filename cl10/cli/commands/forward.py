"""CLI commands that forward to the running watcher.

Behavior lives in the watcher's CommandRouter; these commands only shape
the request line and map the reply to output and an exit code.
"""

import logging
import re

from cl10 import __version__
from cl10.cli.exit_codes import ExitCode
from cl10.exceptions import IPCError, ServerNotRunningError, ServerTimeoutError
from cl10.interfaces import PresenterProtocol
from cl10.ipc import IPCClient
from cl10.services.command_router import parse_index
from cl10.services.history_store import DEFAULT_CAPACITY

logger = logging.getLogger(__name__)

MSG_TIMEOUT = "E4 Timed out talking to watcher. Is it running?"
MSG_NOT_RUNNING = "E3 Watcher not running. Start it with: cl10 watch"
MSG_MISSING_QUERY = "E2 Missing query"
MSG_BAD_INDEX = "E2 Bad or missing index/indices. Use 'cl10 list' for valid indices."
MSG_MULTILINE = "E2 Text spans several lines; the watcher accepts one line per request"

_NUMBER_RE = re.compile(r"[0-9]+")


def talk(client: IPCClient, presenter: PresenterProtocol, line: str) -> ExitCode:
    """Send one request line and present the reply.

    Args:
        client: Client connected to the watcher's socket
        presenter: Where replies and errors go
        line: Request line, e.g. "COPY 3"

    Returns:
        Exit code for the reply category
    """
    if "\n" in line:
        presenter.show_error(MSG_MULTILINE)
        return ExitCode.BAD_ARGS
    try:
        reply = client.send(line)
    except ServerTimeoutError:
        presenter.show_error(MSG_TIMEOUT)
        return ExitCode.TIMEOUT
    except ServerNotRunningError:
        presenter.show_error(MSG_NOT_RUNNING)
        return ExitCode.NOT_RUNNING

    if not reply:
        presenter.show_error(MSG_TIMEOUT)
        return ExitCode.TIMEOUT
    if reply.startswith("ERR"):
        presenter.show_error(reply)
        if "no-such-index" in reply:
            return ExitCode.BAD_ARGS
        return ExitCode.GENERIC
    presenter.show_reply(reply)
    return ExitCode.OK


def build_line(command: str, words: list[str]) -> str:
    """Join a command and its words into a request line."""
    tail = " ".join(words)
    return f"{command.upper()} {tail}" if tail else command.upper()


def forward_command(args, client: IPCClient, presenter: PresenterProtocol) -> ExitCode:
    """Forward list/copy/add/up/down/top/quit unchanged to the watcher."""
    words = getattr(args, "words", None) or []
    return talk(client, presenter, build_line(args.command, words))


def find_command(args, client: IPCClient, presenter: PresenterProtocol) -> ExitCode:
    """Forward FIND with all query words joined by single spaces."""
    if not args.words:
        presenter.show_error(MSG_MISSING_QUERY)
        return ExitCode.BAD_ARGS
    return talk(client, presenter, build_line("FIND", args.words))


def _parse_number(text: str) -> int | None:
    return parse_index(text) if _NUMBER_RE.fullmatch(text) else None


def parse_targets(parts: list[str], max_index: int = DEFAULT_CAPACITY - 1) -> list[int] | None:
    """Expand index targets like "3", "1-4" or "2,5,7-8".

    Ranges are cut off at max_index, since no entry can live past it.

    Args:
        parts: Target tokens from the command line
        max_index: Highest index a range may expand to

    Returns:
        Unique indices sorted highest first (so earlier deletions do not
        shift later ones), or None if any target is malformed
    """
    indices: set[int] = set()
    for token in parts:
        for piece in token.split(","):
            low, dash, high = piece.partition("-")
            if dash:
                a, b = _parse_number(low), _parse_number(high)
                if a is None or b is None:
                    return None
                indices.update(range(min(a, b), min(max(a, b), max_index) + 1))
            else:
                index = _parse_number(piece)
                if index is None:
                    return None
                indices.add(index)
    return sorted(indices, reverse=True)


def delete_command(
    args,
    client: IPCClient,
    presenter: PresenterProtocol,
    max_index: int = DEFAULT_CAPACITY - 1,
) -> ExitCode:
    """Delete one or many entries, one DEL request per index."""
    targets = parse_targets(args.targets, max_index) if args.targets else None
    if not targets:
        presenter.show_error(MSG_BAD_INDEX)
        return ExitCode.BAD_ARGS

    result = ExitCode.OK
    for index in targets:
        code = talk(client, presenter, f"DEL {index}")
        if code != ExitCode.OK:
            result = code
    return result


def clear_command(args, client: IPCClient, presenter: PresenterProtocol, interactive: bool) -> ExitCode:
    """Clear the history, asking first when running on a terminal."""
    if interactive and not args.yes:
        if not presenter.confirm("Clear all clipboard history?"):
            presenter.show_info("Aborted")
            return ExitCode.OK
    return talk(client, presenter, "CLEAR")


def version_command(client: IPCClient, presenter: PresenterProtocol) -> ExitCode:
    """Print the CLI version and, when reachable, the watcher version."""
    presenter.show_info(f"CLI {__version__}")
    try:
        reply = client.send("VERSION")
    except IPCError as e:
        logger.debug(f"Watcher version unavailable: {e}")
        return ExitCode.OK
    if reply:
        watcher_version = reply.strip().removeprefix("CL10 ")
        presenter.show_info(f"Watcher {watcher_version}")
    return ExitCode.OK
