"""Main CLI entry point for cl10."""

import argparse
import re
import sys

from cl10 import __version__
from cl10.cli.commands import forward, shell, watch
from cl10.cli.exit_codes import ExitCode
from cl10.config import Cl10Config, create_default_config
from cl10.interfaces import PresenterProtocol
from cl10.ipc import IPCClient
from cl10.presenters import ConsolePresenter

_INDEX_RE = re.compile(r"[+-]?[0-9]+")

# Subcommands passed through to the watcher as "<CMD> <words...>"
FORWARDED = {
    "copy": "Copy entry at index N to the clipboard",
    "add": "Add arbitrary text as newest entry (no clipboard)",
    "up": "Move entry N one place up",
    "down": "Move entry N one place down",
    "top": "Move entry N to the top",
}


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="cl10",
        description="Ten-slot clipboard history",
        epilog="A bare index (cl10 3) is shorthand for 'cl10 copy 3'",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--socket",
        metavar="PATH",
        help="Socket path (default: per-user socket in /tmp)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # cl10 watch
    watch_parser = subparsers.add_parser(
        "watch",
        help="Start the watcher (foreground)",
        description="Watch the clipboard and serve the history over the local socket",
    )
    watch_parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    watch_parser.add_argument(
        "--no-clipboard",
        action="store_true",
        help="Do not poll the clipboard; history only grows through 'add'",
    )

    subparsers.add_parser("list", help="Show indices with previews")

    find_parser = subparsers.add_parser(
        "find", help="Show only entries matching a query (canonical indices)"
    )
    find_parser.add_argument("words", nargs=argparse.REMAINDER, help="Query text")

    for name, help_text in FORWARDED.items():
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("words", nargs=argparse.REMAINDER)

    del_parser = subparsers.add_parser("del", help="Delete one or many indices (N, N-M, N,M)")
    del_parser.add_argument("targets", nargs="*", help="Indices, ranges or comma lists")

    clear_parser = subparsers.add_parser("clear", help="Clear all entries")
    clear_parser.add_argument("-y", "--yes", action="store_true", help="Do not ask to confirm")

    subparsers.add_parser("version", help="Print CLI and watcher versions")
    subparsers.add_parser("quit", help="Ask the watcher to shut down")
    subparsers.add_parser("shell", help="Interactive prompt")

    return parser


def expand_digit_shortcut(argv: list[str]) -> list[str]:
    """Rewrite a lone index argument into a copy command."""
    pre = argparse.ArgumentParser(add_help=False)
    pre.add_argument("--socket")
    _, remaining = pre.parse_known_args(argv)
    if len(remaining) == 1 and _INDEX_RE.fullmatch(remaining[0]):
        position = argv.index(remaining[0])
        return argv[:position] + ["copy"] + argv[position:]
    return argv


def dispatch(
    args,
    parser: argparse.ArgumentParser,
    config: Cl10Config,
    client: IPCClient,
    presenter: PresenterProtocol,
    in_shell: bool = False,
) -> ExitCode:
    """Run the subcommand selected in args."""
    command = args.command

    if command == "watch":
        if in_shell:
            presenter.show_error("E5 'watch' is not available inside the shell")
            return ExitCode.UNSUPPORTED
        return watch.watch_command(args, config, presenter)
    if command == "shell":
        return shell.shell_command(
            lambda parts: run_args(parts, parser, config, client, presenter), presenter
        )
    if command == "version":
        return forward.version_command(client, presenter)
    if command == "find":
        return forward.find_command(args, client, presenter)
    if command == "del":
        return forward.delete_command(args, client, presenter, max_index=config.capacity - 1)
    if command == "clear":
        return forward.clear_command(args, client, presenter, interactive=sys.stdin.isatty())
    if command in ("list", "quit") or command in FORWARDED:
        return forward.forward_command(args, client, presenter)

    parser.print_help(sys.stderr)
    return ExitCode.BAD_ARGS


def run_args(
    parts: list[str],
    parser: argparse.ArgumentParser,
    config: Cl10Config,
    client: IPCClient,
    presenter: PresenterProtocol,
) -> ExitCode:
    """Run one tokenized line from the interactive shell."""
    try:
        args = parser.parse_args(expand_digit_shortcut(parts))
    except SystemExit as e:
        return ExitCode.OK if e.code == 0 else ExitCode.BAD_ARGS
    return dispatch(args, parser, config, client, presenter, in_shell=True)


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point with subcommands."""
    argv = expand_digit_shortcut(list(sys.argv[1:] if argv is None else argv))
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.socket:
        config = create_default_config(socket_path_override=args.socket)
    else:
        config = create_default_config()

    return int(dispatch(args, parser, config, IPCClient(config), ConsolePresenter()))


if __name__ == "__main__":
    sys.exit(main())
