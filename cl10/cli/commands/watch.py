"""CLI command running the watcher in the foreground."""

import logging

from cl10.cli.exit_codes import ExitCode
from cl10.config import Cl10Config
from cl10.exceptions import AlreadyRunningError, ServerStartError
from cl10.interfaces import PresenterProtocol
from cl10.orchestration import Daemon

LOG_FORMAT = "[%(levelname)s] %(asctime)s %(message)s"


def watch_command(args, config: Cl10Config, presenter: PresenterProtocol) -> ExitCode:
    """Execute the watch subcommand.

    Args:
        args: Parsed command-line arguments
        config: Configuration
        presenter: Output presenter

    Returns:
        Exit code (0 = clean shutdown, 1 = could not start)
    """
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=LOG_FORMAT,
    )

    daemon = Daemon(config, watch_clipboard=not args.no_clipboard)
    try:
        daemon.run()
    except AlreadyRunningError:
        presenter.show_error("Watcher already running.")
        return ExitCode.GENERIC
    except ServerStartError:
        presenter.show_error(
            f"Failed to start IPC server. Remove stale socket at {config.socket_path} and retry."
        )
        return ExitCode.GENERIC
    return ExitCode.OK
