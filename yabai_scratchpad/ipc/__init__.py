"""
yabai socket IPC.

Modules:
- codec: Request framing
- transport: One-shot Unix socket round trips
- client: Typed queries and window commands
"""

from .codec import encode
from .transport import SocketTransport
from .client import YabaiClient

__all__ = [
    "encode",
    "SocketTransport",
    "YabaiClient",
]
