"""
Pydantic data models for yabai scratchpad.

Two groups:
- Configuration entities loaded from config.json (Scratchpad, Config and their parts)
- Snapshot records returned by yabai queries (Window, Space)
"""

from enum import Enum
from typing import Any, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_serializer, model_validator

from .errors import ScratchpadNotFoundError


INT16_MIN = -32768
INT16_MAX = 32767
UINT8_MAX = 255

APP_MARKER = ".app"


# Enumerations

class TargetKind(str, Enum):
    """What a scratchpad target is matched against."""
    TITLE = "title"
    APP = "app"


class LaunchKind(str, Enum):
    """How a scratchpad application is started."""
    APPLICATION = "application"
    APPLICATION_WITH_ARGS = "application_with_args"
    COMMAND = "command"


# Configuration Entities

class Coordinate(BaseModel):
    """Absolute point or size, written as [x, y] in config."""

    model_config = ConfigDict(frozen=True)

    x: int = Field(..., strict=True, ge=INT16_MIN, le=INT16_MAX)
    y: int = Field(..., strict=True, ge=INT16_MIN, le=INT16_MAX)

    @model_validator(mode="before")
    @classmethod
    def from_sequence(cls, data: Any) -> Any:
        """Accept the two-element list form."""
        if isinstance(data, (list, tuple)):
            if len(data) != 2:
                raise ValueError(f"Coordinate needs exactly 2 values, got {len(data)}")
            return {"x": data[0], "y": data[1]}
        return data

    @model_serializer
    def to_list(self) -> List[int]:
        return [self.x, self.y]

    def to_protocol(self) -> str:
        """Render as a yabai absolute argument."""
        return f"abs:{self.x}:{self.y}"


class Target(BaseModel):
    """
    Window a scratchpad refers to.

    Config holds either a bare string, classified by whether it contains ".app",
    or the explicit form {"kind": "title" | "app", "value": "..."}.
    """

    model_config = ConfigDict(frozen=True)

    kind: TargetKind
    value: str

    @staticmethod
    def classify(value: str) -> TargetKind:
        """Heuristic kind of a bare target string."""
        return TargetKind.APP if APP_MARKER in value else TargetKind.TITLE

    @model_validator(mode="before")
    @classmethod
    def from_string(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"kind": cls.classify(data), "value": data}
        return data

    @model_serializer
    def serialize(self) -> Union[str, dict]:
        # Bare string only when reading it back yields the same kind
        if self.classify(self.value) == self.kind:
            return self.value
        return {"kind": self.kind.value, "value": self.value}

    @classmethod
    def title(cls, value: str) -> "Target":
        return cls(kind=TargetKind.TITLE, value=value)

    @classmethod
    def app(cls, value: str) -> "Target":
        return cls(kind=TargetKind.APP, value=value)

    def matches(self, window: "Window") -> bool:
        if self.kind == TargetKind.APP:
            return window.app == self.value
        return window.title == self.value


class LaunchOption(BaseModel):
    """
    How to start a scratchpad's application.

    Config only ever decodes to COMMAND. APPLICATION and APPLICATION_WITH_ARGS
    exist for direct construction; their encoded forms do not decode back to
    the same kind.
    """

    model_config = ConfigDict(frozen=True)

    kind: LaunchKind
    value: str = Field(..., description="Application bundle name or raw command line")
    args: Tuple[str, ...] = ()

    @classmethod
    def application(cls, name: str) -> "LaunchOption":
        return cls(kind=LaunchKind.APPLICATION, value=name)

    @classmethod
    def application_with_args(cls, name: str, args: List[str]) -> "LaunchOption":
        return cls(kind=LaunchKind.APPLICATION_WITH_ARGS, value=name, args=tuple(args))

    @classmethod
    def command(cls, command: str) -> "LaunchOption":
        return cls(kind=LaunchKind.COMMAND, value=command)

    @classmethod
    def decode(cls, data: Any) -> "LaunchOption":
        """
        Decode the config representation.

        Raises:
            ValueError: If data is not a string
        """
        if not isinstance(data, str):
            raise ValueError(f"launchCommand must be a string, got {type(data).__name__}")
        return cls.command(data)

    @model_serializer
    def encode(self) -> Union[str, List[str]]:
        if self.kind == LaunchKind.APPLICATION_WITH_ARGS:
            return [self.value, *self.args]
        return self.value


class Scratchpad(BaseModel):
    """Named scratchpad definition."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(..., min_length=1, description="Name used with --toggle")
    target: Target = Field(..., description="Window title or application name to match")
    position: Coordinate = Field(..., description="Top-left corner when shown")
    size: Coordinate = Field(..., description="Width and height when shown")
    launch_command: LaunchOption = Field(..., alias="launchCommand")
    launch_timeout: int = Field(..., strict=True, ge=0, le=UINT8_MAX, alias="launchTimeout", description="Seconds to wait for the window after launching")
    scratchpad_space: int = Field(..., strict=True, ge=0, le=UINT8_MAX, alias="scratchpadSpace", description="Space index the window is parked on when hidden")

    @field_validator("launch_command", mode="before")
    @classmethod
    def decode_launch_command(cls, v: Any) -> LaunchOption:
        if isinstance(v, LaunchOption):
            return v
        return LaunchOption.decode(v)


class Config(BaseModel):
    """Top-level contents of config.json."""

    model_config = ConfigDict(populate_by_name=True)

    launch_timeout: int = Field(..., strict=True, ge=0, le=UINT8_MAX, alias="launchTimeout")
    scratchpad_space: int = Field(..., strict=True, ge=0, le=UINT8_MAX, alias="scratchpadSpace")
    scratchpads: List[Scratchpad] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def inherit_defaults(cls, data: Any) -> Any:
        """Fill per-scratchpad launchTimeout/scratchpadSpace from the top level."""
        if not isinstance(data, dict) or not isinstance(data.get("scratchpads"), list):
            return data

        inherited = {}
        for alias, name in (("launchTimeout", "launch_timeout"), ("scratchpadSpace", "scratchpad_space")):
            if alias in data:
                inherited[alias] = data[alias]
            elif name in data:
                inherited[alias] = data[name]

        scratchpads = []
        for entry in data["scratchpads"]:
            if isinstance(entry, dict):
                entry = dict(entry)
                for alias, name in (("launchTimeout", "launch_timeout"), ("scratchpadSpace", "scratchpad_space")):
                    if alias not in entry and name not in entry and alias in inherited:
                        entry[alias] = inherited[alias]
            scratchpads.append(entry)

        return {**data, "scratchpads": scratchpads}

    def find_scratchpad(self, name: str) -> Optional[Scratchpad]:
        """First scratchpad with the given name, or None."""
        return next((s for s in self.scratchpads if s.name == name), None)

    def get_scratchpad(self, name: str) -> Scratchpad:
        """
        Look up a scratchpad by name.

        Raises:
            ScratchpadNotFoundError: If no scratchpad has that name
        """
        scratchpad = self.find_scratchpad(name)
        if scratchpad is None:
            raise ScratchpadNotFoundError(name)
        return scratchpad


# yabai Query Records

def _kebab(name: str) -> str:
    return name.replace("_", "-")


class YabaiRecord(BaseModel):
    """Base for yabai query results, which use kebab-case keys."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=_kebab,
        populate_by_name=True,
        extra="ignore",
    )


class Frame(YabaiRecord):
    x: float
    y: float
    w: float
    h: float


class Window(YabaiRecord):
    """Entry of `query --windows`."""

    id: int
    pid: int
    app: str
    title: str
    frame: Frame
    role: str = ""
    subrole: str = ""
    display: int = 0
    space: int = 0
    level: int = 0
    opacity: float = 1.0
    split_type: str = "none"
    stack_index: int = 0
    can_move: bool = True
    can_resize: bool = True
    has_focus: bool
    has_shadow: bool = False
    has_parent_zoom: bool = False
    has_fullscreen_zoom: bool = False
    is_native_fullscreen: bool = False
    is_visible: bool = True
    is_minimized: bool = False
    is_hidden: bool = False
    is_floating: bool
    is_sticky: bool = False
    is_grabbed: bool = False


class Space(YabaiRecord):
    """Entry of `query --spaces`."""

    id: int
    uuid: str = ""
    index: int
    label: str = ""
    space_type: str = Field("bsp", alias="type")
    display: int = 1
    windows: List[int] = Field(default_factory=list)
    first_window: int = 0
    last_window: int = 0
    has_focus: bool
    is_visible: bool = False
    is_native_fullscreen: bool = False
