"""Configuration loading for yabai scratchpad."""

from .loader import ConfigLoader

__all__ = ["ConfigLoader"]
