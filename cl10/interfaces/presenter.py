"""Presenter protocol for output abstraction."""

from typing import Protocol


class PresenterProtocol(Protocol):
    """Interface for presenting command output to the user.

    The CLI commands only talk to a presenter, so the same forwarding logic
    works for the one-shot command line, the interactive shell and tests.
    """

    def show_reply(self, text: str) -> None:
        """Display a successful reply from the watcher verbatim.

        Args:
            text: Reply text, already newline-terminated
        """
        ...

    def show_info(self, message: str) -> None:
        """Display an informational message.

        Args:
            message: The informational message to display
        """
        ...

    def show_error(self, message: str) -> None:
        """Display an error message.

        Args:
            message: The error message to display
        """
        ...

    def confirm(self, question: str) -> bool:
        """Ask the user a yes/no question.

        Args:
            question: Prompt to show

        Returns:
            True if the user answered yes
        """
        ...
