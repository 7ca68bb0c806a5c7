"""
Pytest configuration and fixtures for yabai scratchpad tests.

Provides an in-memory yabai (FakeYabai), a fake clock for launch waits, and a
real Unix socket server for transport tests.
"""

import json
import socket
import sys
import tempfile
import threading
from pathlib import Path
from typing import Generator, List, Optional

import pytest

# Make the package importable without installation
sys.path.insert(0, str(Path(__file__).parent.parent))

from yabai_scratchpad.environment import Environment
from yabai_scratchpad.models import LaunchOption, Scratchpad


def window_data(
    window_id: int = 101,
    app: str = "Alacritty",
    title: str = "scratchpad-term",
    has_focus: bool = False,
    is_floating: bool = False,
    space: int = 1,
) -> dict:
    """Window record as yabai emits it."""
    return {
        "id": window_id,
        "pid": 4000 + window_id,
        "app": app,
        "title": title,
        "scratchpad": "",
        "frame": {"x": 0.0, "y": 25.0, "w": 800.0, "h": 600.0},
        "role": "AXWindow",
        "subrole": "AXStandardWindow",
        "root-window": True,
        "display": 1,
        "space": space,
        "level": 0,
        "sub-level": 0,
        "layer": "normal",
        "sub-layer": "normal",
        "opacity": 1.0,
        "split-type": "vertical",
        "split-child": "first_child",
        "stack-index": 0,
        "can-move": True,
        "can-resize": True,
        "has-focus": has_focus,
        "has-shadow": True,
        "has-parent-zoom": False,
        "has-fullscreen-zoom": False,
        "has-ax-reference": True,
        "is-native-fullscreen": False,
        "is-visible": True,
        "is-minimized": False,
        "is-hidden": False,
        "is-floating": is_floating,
        "is-sticky": False,
        "is-grabbed": False,
    }


def space_data(index: int, has_focus: bool = False, windows: Optional[List[int]] = None) -> dict:
    """Space record as yabai emits it."""
    windows = windows or []
    return {
        "id": index + 10,
        "uuid": f"UUID-{index}",
        "index": index,
        "label": "",
        "type": "bsp",
        "display": 1,
        "windows": windows,
        "first-window": windows[0] if windows else 0,
        "last-window": windows[-1] if windows else 0,
        "has-focus": has_focus,
        "is-visible": has_focus,
        "is-native-fullscreen": False,
    }


class FakeYabai:
    """In-memory yabai: answers queries from lists, records every other command."""

    def __init__(self):
        self.windows: List[dict] = []
        self.spaces: List[dict] = []
        self.commands: List[List[str]] = []
        self.window_queries = 0
        self._pending: List[tuple] = []

    def add_window_after(self, queries: int, window: dict) -> None:
        """Make a window show up once `queries` window queries have been answered."""
        self._pending.append((queries, window))

    def query(self, command) -> str:
        command = list(command)
        if command == ["query", "--windows"]:
            self.window_queries += 1
            for entry in list(self._pending):
                if self.window_queries > entry[0]:
                    self.windows.append(entry[1])
                    self._pending.remove(entry)
            return json.dumps(self.windows)
        if command == ["query", "--spaces"]:
            return json.dumps(self.spaces)
        self.commands.append(command)
        return ""


class FakeClock:
    """Clock that only advances when sleep is called."""

    def __init__(self, start: float = 1000.0):
        self.now = start
        self.sleeps: List[float] = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


class FakeLauncher:
    """Records launch requests instead of spawning processes."""

    def __init__(self, on_launch=None):
        self.launched: List[LaunchOption] = []
        self.on_launch = on_launch

    def launch(self, option: LaunchOption) -> None:
        self.launched.append(option)
        if self.on_launch:
            self.on_launch(option)


class RecordingServer:
    """
    Unix socket server that reads one frame per connection and replies.

    reply is either fixed bytes or a callable taking the decoded tokens.
    """

    def __init__(self, path: Path, reply=b""):
        self.path = path
        self.reply = reply
        self.frames: List[bytes] = []
        self._stop = threading.Event()
        self._listener = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
        self._listener.bind(str(path))
        self._listener.listen(4)
        self._listener.settimeout(0.1)
        self._thread = threading.Thread(target=self._serve, daemon=True)

    def start(self) -> "RecordingServer":
        self._thread.start()
        return self

    def stop(self) -> None:
        self._stop.set()
        self._thread.join(timeout=5)
        self._listener.close()

    def _serve(self) -> None:
        while not self._stop.is_set():
            try:
                conn, _ = self._listener.accept()
            except socket.timeout:
                continue
            conn.settimeout(5.0)
            with conn:
                header = self._recv_exact(conn, 4)
                body = self._recv_exact(conn, header[0])
                self.frames.append(header + body)
                reply = self.reply
                if callable(reply):
                    tokens = [token.decode("utf-8") for token in body.split(b"\x00")[:-2]]
                    reply = reply(tokens)
                # Send in several pieces to exercise the read loop
                for offset in range(0, len(reply), 700):
                    conn.sendall(reply[offset:offset + 700])

    @staticmethod
    def _recv_exact(conn: socket.socket, size: int) -> bytes:
        data = b""
        while len(data) < size:
            chunk = conn.recv(size - len(data))
            if not chunk:
                break
            data += chunk
        return data


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Short temporary directory (Unix socket paths are length limited)."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def environment(temp_dir) -> Environment:
    """Environment rooted in the temporary directory."""
    return Environment(username="tester", home=temp_dir, tmp_dir=temp_dir)


@pytest.fixture
def fake_yabai() -> FakeYabai:
    return FakeYabai()


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def fake_launcher() -> FakeLauncher:
    return FakeLauncher()


@pytest.fixture
def scratchpad() -> Scratchpad:
    """Title-targeted terminal scratchpad."""
    return Scratchpad(
        name="term",
        target="scratchpad-term",
        position=[200, 100],
        size=[1200, 800],
        launch_command="alacritty --title scratchpad-term",
        launch_timeout=2,
        scratchpad_space=9,
    )


@pytest.fixture
def valid_config_data() -> dict:
    """Valid config.json contents."""
    return {
        "launchTimeout": 5,
        "scratchpadSpace": 9,
        "scratchpads": [
            {
                "name": "term",
                "target": "scratchpad-term",
                "position": [200, 100],
                "size": [1200, 800],
                "launchCommand": "alacritty --title scratchpad-term",
                "launchTimeout": 3,
                "scratchpadSpace": 8
            },
            {
                "name": "music",
                "target": "Music.app",
                "position": [300, 200],
                "size": [1000, 700],
                "launchCommand": "open -a Music"
            }
        ]
    }


@pytest.fixture
def write_config(environment):
    """Write config data (dict or raw text) to the environment's config path."""
    def _write(data) -> Path:
        path = environment.config_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(data if isinstance(data, str) else json.dumps(data))
        return path
    return _write


@pytest.fixture
def yabai_server(environment):
    """Start a RecordingServer on the environment's yabai socket path."""
    servers = []

    def _start(reply=b"") -> RecordingServer:
        server = RecordingServer(environment.socket_path, reply).start()
        servers.append(server)
        return server

    yield _start

    for server in servers:
        server.stop()


@pytest.fixture
def make_window():
    """Factory for yabai window records."""
    return window_data


@pytest.fixture
def make_space():
    """Factory for yabai space records."""
    return space_data
