"""
Typed yabai queries and window commands.

Commands are fire-and-forget: their effect is only observable by querying
again.
"""

import json
import logging
from typing import List, Optional, Protocol, Sequence, Type, TypeVar

from pydantic import ValidationError

from ..errors import ResponseParseError
from ..models import Coordinate, Space, Window, YabaiRecord

logger = logging.getLogger(__name__)

# yabai prefixes failed command replies with this byte
FAILURE_MARKER = "\x07"

RecordT = TypeVar("RecordT", bound=YabaiRecord)


class Transport(Protocol):
    def query(self, command: Sequence[str]) -> str: ...


class YabaiClient:
    """yabai query layer."""

    def __init__(self, transport: Transport):
        """
        Initialize client.

        Args:
            transport: Sends command tokens and returns the raw reply
        """
        self.transport = transport

    # Queries

    def list_windows(self) -> List[Window]:
        """All windows known to yabai."""
        return self._query_records(["query", "--windows"], Window)

    def list_spaces(self) -> List[Space]:
        """All spaces across displays."""
        return self._query_records(["query", "--spaces"], Space)

    def focused_space(self) -> Optional[Space]:
        """First space with focus, or None."""
        return next((space for space in self.list_spaces() if space.has_focus), None)

    # Window commands

    def window_focus_on_space(self, window_id: int, space: int) -> str:
        """Send a window to a space (used to park a hidden scratchpad)."""
        return self._command("window", window_id, "--space", space)

    def window_toggle_float(self, window_id: int) -> str:
        return self._command("window", window_id, "--toggle", "float")

    def window_move_to_space(self, window_id: int, space: int) -> str:
        return self._command("window", window_id, "--space", space)

    def window_move(self, window_id: int, position: Coordinate) -> str:
        return self._command("window", window_id, "--move", position.to_protocol())

    def window_resize(self, window_id: int, size: Coordinate) -> str:
        return self._command("window", window_id, "--resize", size.to_protocol())

    def focus_window(self, window_id: int) -> str:
        return self._command("window", "--focus", window_id)

    def _command(self, *tokens) -> str:
        command = [str(token) for token in tokens]
        response = self.transport.query(command)
        if response.startswith(FAILURE_MARKER):
            logger.warning(f"yabai rejected '{' '.join(command)}': {response[1:].strip()}")
        return response

    def _query_records(self, command: List[str], model: Type[RecordT]) -> List[RecordT]:
        """
        Run a query and parse its JSON array reply.

        Raises:
            ResponseParseError: If the reply is not a JSON array of valid records
        """
        response = self.transport.query(command)
        name = " ".join(command)

        try:
            data = json.loads(response)
        except json.JSONDecodeError as e:
            raise ResponseParseError(name, f"invalid JSON: {e}") from e

        if not isinstance(data, list):
            raise ResponseParseError(name, f"expected a JSON array, got {type(data).__name__}")

        try:
            return [model.model_validate(item) for item in data]
        except ValidationError as e:
            raise ResponseParseError(name, str(e)) from e
