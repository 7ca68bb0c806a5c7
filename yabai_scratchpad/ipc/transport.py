"""
Unix socket transport for yabai requests.

Each query opens a fresh connection, writes one frame and reads until yabai
closes its side. Nothing is pooled or reused between calls.
"""

import logging
import socket
from typing import Optional, Sequence

from ..environment import Environment
from ..errors import SocketError
from .codec import encode

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024


class SocketTransport:
    """Blocking request/response over the yabai control socket."""

    def __init__(self, environment: Environment, timeout: Optional[float] = None):
        """
        Initialize transport.

        Args:
            environment: Source of the socket path (username, tmp dir)
            timeout: Per-operation socket timeout in seconds (None blocks until yabai closes)
        """
        self.socket_path = environment.socket_path
        self.timeout = timeout

    def query(self, command: Sequence[str]) -> str:
        """
        Send a command and return yabai's reply.

        Args:
            command: Command tokens, e.g. ["query", "--spaces"]

        Returns:
            Reply decoded as UTF-8, or "" if the bytes are not valid UTF-8

        Raises:
            SocketError: If the socket is missing or the connection fails
        """
        if not self.socket_path.exists():
            raise SocketError(
                "Yabai socket doesn't exist! Is Yabai installed and running?",
                socket_path=str(self.socket_path)
            )

        message = encode(command)
        logger.debug(f"yabai request {list(command)} ({len(message)} bytes)")

        sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
        try:
            sock.settimeout(self.timeout)
            try:
                sock.connect(str(self.socket_path))
                sock.sendall(message)
            except OSError as e:
                raise SocketError(
                    f"Failed to communicate with yabai: {e}",
                    socket_path=str(self.socket_path)
                ) from e

            response = self._read_response(sock)
        finally:
            sock.close()

        logger.debug(f"yabai reply: {len(response)} bytes")
        return self._decode(response)

    def _read_response(self, sock: socket.socket) -> bytes:
        """Read until yabai closes the connection or a read fails."""
        chunks = []
        while True:
            try:
                chunk = sock.recv(CHUNK_SIZE)
            except OSError as e:
                logger.debug(f"Stopped reading yabai reply: {e}")
                break
            if not chunk:
                break
            chunks.append(chunk)
        return b"".join(chunks)

    @staticmethod
    def _decode(response: bytes) -> str:
        # Lossy: invalid UTF-8 reads as an empty reply
        try:
            return response.decode("utf-8")
        except UnicodeDecodeError as e:
            logger.debug(f"Discarding undecodable yabai reply: {e}")
            return ""
