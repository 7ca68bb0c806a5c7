"""
Error handling for yabai scratchpad.

Every failure is terminal for the invocation; the CLI turns these into a
one-line message and exit code 1.
"""

from enum import Enum
from typing import Optional, Dict, Any


class ErrorCode(Enum):
    """
    Error codes for yabai scratchpad.

    - 100-199: Invocation errors
    - 200-299: Configuration errors
    - 300-399: yabai IPC errors
    - 400-499: Window manager state errors
    - 500-599: Launch errors
    """

    # Invocation errors (100-199)
    INVALID_ARGUMENTS = 100
    SCRATCHPAD_NOT_FOUND = 101

    # Configuration errors (200-299)
    CONFIG_ERROR = 200
    LAUNCH_TIMEOUT = 201

    # yabai IPC errors (300-399)
    SOCKET_ERROR = 300
    RESPONSE_PARSE_ERROR = 301

    # Window manager state errors (400-499)
    NO_FOCUSED_SPACE = 400

    # Launch errors (500-599)
    LAUNCH_FAILED = 500


class ScratchpadError(Exception):
    """Base exception for scratchpad errors."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        suggestion: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize scratchpad error.

        Args:
            code: Error code from ErrorCode enum
            message: Human-readable error message
            suggestion: Suggested recovery action
            context: Additional context for debugging
        """
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.context = context or {}
        super().__init__(message)


class InvalidArgumentsError(ScratchpadError):
    """Command line did not have the `--toggle <name>` shape."""

    def __init__(self, reason: Optional[str] = None):
        super().__init__(
            code=ErrorCode.INVALID_ARGUMENTS,
            message="Invalid arguments! Try 'scratchpad --toggle example' to toggle scratchpad named 'example'",
            context={"reason": reason} if reason else None
        )


class ScratchpadNotFoundError(ScratchpadError):
    """No scratchpad with the requested name in the config."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            code=ErrorCode.SCRATCHPAD_NOT_FOUND,
            message=f"Didn't find scratchpad named '{name}'",
            suggestion="Check the scratchpad names in ~/.config/scratchpad/config.json",
            context={"name": name}
        )


class ConfigError(ScratchpadError):
    """Configuration file missing or invalid, or a configured limit was exceeded."""

    def __init__(
        self,
        reason: str,
        code: ErrorCode = ErrorCode.CONFIG_ERROR,
        suggestion: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize configuration error.

        Args:
            reason: Reason for failure
            code: Error code (CONFIG_ERROR unless a subclass narrows it)
            suggestion: Recovery suggestion
            context: Additional context for debugging
        """
        self.reason = reason
        super().__init__(
            code=code,
            message=reason,
            suggestion=suggestion,
            context=context
        )


class LaunchTimeoutError(ConfigError):
    """Launched application never produced a matching window."""

    def __init__(self, scratchpad: str, timeout: int):
        super().__init__(
            "Application didn't launch within timeout period!",
            code=ErrorCode.LAUNCH_TIMEOUT,
            suggestion="Increase launchTimeout or check that the target matches the launched window",
            context={"scratchpad": scratchpad, "timeout": timeout}
        )


class SocketError(ScratchpadError):
    """yabai socket missing or unreachable."""

    def __init__(self, reason: str, socket_path: Optional[str] = None):
        """
        Initialize socket error.

        Args:
            reason: Reason for failure
            socket_path: Socket path that was tried
        """
        self.reason = reason
        super().__init__(
            code=ErrorCode.SOCKET_ERROR,
            message=reason,
            suggestion="Ensure yabai is running: yabai --start-service",
            context={"socket_path": socket_path} if socket_path else None
        )


class ResponseParseError(ScratchpadError):
    """yabai query reply could not be decoded into records."""

    def __init__(self, command: str, reason: str):
        super().__init__(
            code=ErrorCode.RESPONSE_PARSE_ERROR,
            message=f"Failed to parse yabai reply to '{command}': {reason}",
            context={"command": command, "reason": reason}
        )


class NoFocusedSpaceError(ScratchpadError):
    """yabai reported no focused space."""

    def __init__(self):
        super().__init__(
            code=ErrorCode.NO_FOCUSED_SPACE,
            message="yabai reported no focused space",
            suggestion="Check `yabai -m query --spaces` for a space with has-focus set"
        )


class LaunchError(ScratchpadError):
    """Launch command could not be started."""

    def __init__(self, argv: list, reason: str):
        super().__init__(
            code=ErrorCode.LAUNCH_FAILED,
            message=f"Failed to launch {' '.join(argv)}: {reason}",
            context={"argv": argv, "reason": reason}
        )
