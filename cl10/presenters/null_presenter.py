"""Null presenter for testing (no output)."""


class NullPresenter:
    """Present output to nowhere (testing implementation)."""

    def show_reply(self, text: str) -> None:
        """Display a watcher reply (no-op)."""
        pass

    def show_info(self, message: str) -> None:
        """Display an informational message (no-op)."""
        pass

    def show_error(self, message: str) -> None:
        """Display an error message (no-op)."""
        pass

    def confirm(self, question: str) -> bool:
        """Always confirm."""
        return True
