"""
yabai scratchpad

Toggles named scratchpad windows managed by the yabai window manager.
Talks to yabai directly over its Unix socket instead of shelling out to `yabai -m`.
"""

__version__ = "1.0.0"
