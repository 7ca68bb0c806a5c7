"""
Process environment lookups used to derive socket and config paths.

Kept in one place so tests can hand in fixed values instead of reading the
real environment.
"""

import os
from dataclasses import dataclass
from pathlib import Path


DEFAULT_TMP_DIR = Path("/tmp")
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVEL_VAR = "YABAI_SCRATCHPAD_LOG_LEVEL"


@dataclass(frozen=True)
class Environment:
    """Snapshot of the environment values the tool depends on."""

    username: str
    home: Path
    tmp_dir: Path = DEFAULT_TMP_DIR
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_process(cls) -> "Environment":
        """Read values from the running process."""
        return cls(
            username=os.environ.get("USER", "unknown"),
            home=Path.home(),
            log_level=os.environ.get(LOG_LEVEL_VAR, DEFAULT_LOG_LEVEL).upper(),
        )

    @property
    def socket_path(self) -> Path:
        """yabai control socket for this user."""
        return self.tmp_dir / f"yabai_{self.username}.socket"

    @property
    def config_path(self) -> Path:
        """Scratchpad definitions file."""
        return self.home / ".config" / "scratchpad" / "config.json"
