"""
Configuration loader for scratchpad definitions.

Loads ~/.config/scratchpad/config.json once per invocation.
"""

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from ..environment import Environment
from ..errors import ConfigError
from ..models import Config

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Loads the scratchpad configuration file."""

    def __init__(self, environment: Environment, config_path: Optional[Path] = None):
        """
        Initialize configuration loader.

        Args:
            environment: Source of the home directory
            config_path: Explicit file path (defaults to ~/.config/scratchpad/config.json)
        """
        self.config_path = config_path or environment.config_path

    def load(self) -> Config:
        """
        Load and validate the configuration.

        Returns:
            Parsed Config

        Raises:
            ConfigError: If the file is missing, not JSON, or fails validation
        """
        if not self.config_path.exists():
            raise ConfigError(
                "Couldn't find scratchpad config file!",
                suggestion=f"Create {self.config_path}",
                context={"file_path": str(self.config_path)}
            )

        try:
            with open(self.config_path, "r") as f:
                data = json.load(f)
            config = Config.model_validate(data)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError) as e:
            logger.debug(f"Rejected config {self.config_path}: {e}")
            raise ConfigError(
                "Invalid config!",
                suggestion="Check file syntax against the README example",
                context={"file_path": str(self.config_path), "reason": str(e)}
            ) from e

        logger.debug(f"Loaded {len(config.scratchpads)} scratchpad(s) from {self.config_path}")
        return config
