"""
Scratchpad services.

Modules:
- toggle: Show/hide state machine
- launcher: Starts missing scratchpad applications
- polling: Deadline-bounded wait used after a launch
"""

from .launcher import Launcher
from .polling import wait_for
from .toggle import ScratchpadToggler, ToggleResult

__all__ = [
    "Launcher",
    "ScratchpadToggler",
    "ToggleResult",
    "wait_for",
]
