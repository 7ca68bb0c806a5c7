"""
Application launcher for scratchpads.

Launching blocks until the spawned process exits. For `open` and most GUI
wrappers that is as soon as the app has been handed off to the system; the
window itself is waited for by the caller.
"""

import logging
import subprocess
from typing import Callable, List

from ..errors import LaunchError
from ..models import LaunchKind, LaunchOption

logger = logging.getLogger(__name__)

OPEN_PATH = "/usr/bin/open"
ENV_PATH = "/usr/bin/env"
APPLICATIONS_DIR = "/Applications"


class Launcher:
    """Starts scratchpad applications."""

    def __init__(self, run: Callable[..., subprocess.CompletedProcess] = subprocess.run):
        """
        Initialize launcher.

        Args:
            run: Process runner with subprocess.run's signature
        """
        self.run = run

    @staticmethod
    def build_argv(option: LaunchOption) -> List[str]:
        """
        Build the argument vector for a launch option.

        Raw commands are split on single spaces; no shell quoting is applied.

        Returns:
            argv list, empty when there is nothing to run
        """
        if option.kind == LaunchKind.APPLICATION:
            return [OPEN_PATH, "-n", f"{APPLICATIONS_DIR}/{option.value}"]

        if option.kind == LaunchKind.APPLICATION_WITH_ARGS:
            return [OPEN_PATH, "-n", f"{APPLICATIONS_DIR}/{option.value}", "--args", *option.args]

        components = [part for part in option.value.split(" ") if part]
        if not components:
            return []
        return [ENV_PATH, *components]

    def launch(self, option: LaunchOption) -> None:
        """
        Start the application and wait for the launching process to exit.

        Raises:
            LaunchError: If the process cannot be started
        """
        argv = self.build_argv(option)
        if not argv:
            logger.warning("Empty launch command, nothing to start")
            return

        logger.info(f"Launching: {' '.join(argv)}")
        try:
            result = self.run(argv, check=False)
        except OSError as e:
            raise LaunchError(argv, str(e)) from e

        if result.returncode != 0:
            logger.warning(f"Launch command exited with status {result.returncode}")
