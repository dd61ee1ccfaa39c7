"""Console presenter for CLI output."""

import sys


class ConsolePresenter:
    """Present output to the terminal (CLI implementation).

    Replies go to stdout untouched so they can be piped; errors and
    diagnostics go to stderr.
    """

    def __init__(self, stdout=None, stderr=None, stdin=None):
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr
        self.stdin = stdin or sys.stdin

    def show_reply(self, text: str) -> None:
        """Write a watcher reply verbatim."""
        self.stdout.write(text)
        self.stdout.flush()

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        print(message, file=self.stdout)

    def show_error(self, message: str) -> None:
        """Display an error message on stderr."""
        self.stderr.write(message if message.endswith("\n") else message + "\n")
        self.stderr.flush()

    def confirm(self, question: str) -> bool:
        """Ask a yes/no question; anything but y/yes is a no."""
        self.stderr.write(f"{question} [y/N] ")
        self.stderr.flush()
        answer = self.stdin.readline()
        return answer.strip().lower() in ("y", "yes")
