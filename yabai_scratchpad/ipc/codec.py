"""
Request framing for the yabai socket.

Frame layout:
    [length][0x00 0x00 0x00] token\x00 token\x00 ... \x00

Only the first header byte carries the length (frame size minus the header),
truncated to 8 bits. Bodies longer than 255 bytes wrap, so commands must stay short.
"""

from typing import Sequence

HEADER_SIZE = 4


def encode(tokens: Sequence[str]) -> bytes:
    """
    Encode command tokens into a request frame.

    Args:
        tokens: Command tokens, e.g. ["query", "--windows"]

    Returns:
        Frame bytes ready to send
    """
    frame = bytearray(HEADER_SIZE)
    for token in tokens:
        frame += token.encode("utf-8")
        frame.append(0)
    frame.append(0)
    frame[0] = (len(frame) - HEADER_SIZE) & 0xFF
    return bytes(frame)
