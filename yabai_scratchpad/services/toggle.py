"""
Scratchpad toggle.

Given a scratchpad, either parks its focused window on the scratchpad space
(hide) or floats it onto the focused space at the configured geometry and
focuses it (show). A missing window is launched and waited for first.

Each step is a separate yabai command. A failure midway leaves the window in
whatever state the earlier commands produced.
"""

import logging
import time
from enum import Enum
from typing import Callable, Optional

from ..errors import LaunchTimeoutError, NoFocusedSpaceError
from ..ipc.client import YabaiClient
from ..models import Scratchpad, Window
from .launcher import Launcher
from .polling import DEFAULT_POLL_INTERVAL, wait_for

logger = logging.getLogger(__name__)


class ToggleResult(str, Enum):
    SHOWN = "shown"
    HIDDEN = "hidden"


class ScratchpadToggler:
    """Runs the show/hide sequence for one scratchpad at a time."""

    def __init__(
        self,
        client: YabaiClient,
        launcher: Launcher,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Initialize toggler.

        Args:
            client: yabai query layer
            launcher: Starts applications whose window is missing
            poll_interval: Seconds between window lookups while waiting for a launch
            clock: Time source for the launch deadline
            sleep: Sleep function used between lookups
        """
        self.client = client
        self.launcher = launcher
        self.poll_interval = poll_interval
        self.clock = clock
        self.sleep = sleep

    def find_window(self, scratchpad: Scratchpad) -> Optional[Window]:
        """First window matching the scratchpad target, or None."""
        return next(
            (window for window in self.client.list_windows() if scratchpad.target.matches(window)),
            None
        )

    def toggle(self, scratchpad: Scratchpad) -> ToggleResult:
        """
        Show or hide a scratchpad.

        Raises:
            LaunchTimeoutError: If a launched window does not appear within launch_timeout
            NoFocusedSpaceError: If yabai reports no focused space when showing
        """
        window = self.find_window(scratchpad)
        if window is None:
            window = self._launch_and_wait(scratchpad)

        if window.has_focus:
            logger.info(f"Hiding '{scratchpad.name}' (window {window.id}) on space {scratchpad.scratchpad_space}")
            self.client.window_focus_on_space(window.id, scratchpad.scratchpad_space)
            return ToggleResult.HIDDEN

        focused_space = self.client.focused_space()
        if focused_space is None:
            raise NoFocusedSpaceError()

        logger.info(f"Showing '{scratchpad.name}' (window {window.id}) on space {focused_space.index}")

        if not window.is_floating:
            self.client.window_toggle_float(window.id)

        self.client.window_move_to_space(window.id, focused_space.index)
        self.client.window_move(window.id, scratchpad.position)
        self.client.window_resize(window.id, scratchpad.size)
        self.client.focus_window(window.id)
        return ToggleResult.SHOWN

    def _launch_and_wait(self, scratchpad: Scratchpad) -> Window:
        started_at = self.clock()
        self.launcher.launch(scratchpad.launch_command)

        window = wait_for(
            lambda: self.find_window(scratchpad),
            timeout=scratchpad.launch_timeout,
            interval=self.poll_interval,
            started_at=started_at,
            clock=self.clock,
            sleep=self.sleep,
        )
        if window is None:
            raise LaunchTimeoutError(scratchpad.name, scratchpad.launch_timeout)

        logger.debug(f"Window {window.id} appeared for '{scratchpad.name}'")
        return window
