"""Interactive cl10 prompt."""

import shlex
from collections.abc import Callable

from cl10.cli.exit_codes import ExitCode
from cl10.interfaces import PresenterProtocol

PROMPT = "cl10> "


def shell_command(
    run_args: Callable[[list[str]], int],
    presenter: PresenterProtocol,
    read_line: Callable[[str], str] = input,
) -> ExitCode:
    """Read commands until exit/quit or end of input.

    Each line is split like a shell would (quotes and backslashes honored)
    and run as if it had been given on the command line.

    Args:
        run_args: Runs one tokenized command line, returns its exit code
        presenter: Output presenter for tokenizing errors
        read_line: Prompt function, input() by default
    """
    while True:
        try:
            line = read_line(PROMPT)
        except EOFError:
            break
        line = line.strip()
        if not line:
            continue
        if line in ("exit", "quit"):
            break
        try:
            parts = shlex.split(line)
        except ValueError as e:
            presenter.show_error(f"E2 {e}")
            continue
        if not parts or parts[0] == "shell":
            continue
        run_args(parts)
    return ExitCode.OK
