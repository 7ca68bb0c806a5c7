#!/usr/bin/env python3
"""
yabai scratchpad CLI

Usage:
    scratchpad --toggle <name>

Exit codes:
    0 - Scratchpad shown or hidden
    1 - Any error (message printed to stdout)
"""

import logging
import sys
from typing import List, Optional

import click
from rich.console import Console

from .config import ConfigLoader
from .environment import Environment
from .errors import InvalidArgumentsError, ScratchpadError, ScratchpadNotFoundError
from .ipc import SocketTransport, YabaiClient
from .services import Launcher, ScratchpadToggler, ToggleResult

logger = logging.getLogger(__name__)

PROG_NAME = "scratchpad"


class ScratchpadApp:
    """Wires configuration, yabai IPC and the launcher for one invocation."""

    def __init__(self, environment: Environment):
        self.environment = environment

    def toggle(self, name: str) -> ToggleResult:
        """
        Toggle the named scratchpad.

        Raises:
            ScratchpadNotFoundError: If the config has no scratchpad with that name
            ScratchpadError: For config, socket, launch and window manager failures
        """
        config = ConfigLoader(self.environment).load()
        scratchpad = config.get_scratchpad(name)

        client = YabaiClient(SocketTransport(self.environment))
        toggler = ScratchpadToggler(client, Launcher())
        return toggler.toggle(scratchpad)


@click.command(name=PROG_NAME, add_help_option=False)
@click.option("--toggle", "name", metavar="NAME", help="Scratchpad to show or hide")
@click.pass_obj
def cli(app: ScratchpadApp, name: Optional[str]):
    """Show or hide a yabai scratchpad window."""
    if name is None:
        raise InvalidArgumentsError("--toggle is required")

    result = app.toggle(name)
    logger.info(f"Scratchpad '{name}' {result.value}")


def configure_logging(level_name: str) -> None:
    """Send log records to stderr; stdout is kept for the user-facing message."""
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def run(argv: Optional[List[str]] = None, app: Optional[ScratchpadApp] = None) -> int:
    """
    Run the CLI.

    Args:
        argv: Arguments without the program name (defaults to sys.argv[1:])
        app: Application to dispatch to (defaults to one built from the process environment)

    Returns:
        Process exit code
    """
    console = Console()
    args = sys.argv[1:] if argv is None else list(argv)

    try:
        if app is None:
            environment = Environment.from_process()
            configure_logging(environment.log_level)
            app = ScratchpadApp(environment)

        # Exactly `--toggle NAME`; click alone would also take `--toggle=NAME` or a repeated option
        if len(args) != 2 or args[0] != "--toggle":
            raise InvalidArgumentsError(f"expected '--toggle NAME', got {args!r}")

        cli.main(args=args, prog_name=PROG_NAME, obj=app, standalone_mode=False)
    except click.UsageError as e:
        logger.debug(f"Usage error: {e}")
        _print_error(console, InvalidArgumentsError(str(e)).message)
        return 1
    except (InvalidArgumentsError, ScratchpadNotFoundError) as e:
        _log_error(e)
        _print_error(console, e.message)
        return 1
    except (click.Abort, KeyboardInterrupt):
        _print_error(console, "Interrupted")
        return 130
    except ScratchpadError as e:
        _log_error(e)
        _print_error(console, f"An unexpected error occurred: {e.message}")
        return 1
    except Exception as e:
        logger.debug("Toggle failed", exc_info=True)
        _print_error(console, f"An unexpected error occurred: {e}")
        return 1

    return 0


def _log_error(error: ScratchpadError) -> None:
    logger.debug(f"{error.code.name}: {error.message}", exc_info=True)
    if error.context:
        logger.debug(f"Context: {error.context}")
    if error.suggestion:
        logger.info(f"Suggestion: {error.suggestion}")


def _print_error(console: Console, message: str) -> None:
    console.print(message, markup=False, highlight=False, emoji=False, soft_wrap=True)


def main():
    """Main entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
