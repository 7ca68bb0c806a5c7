"""
Request framing tests.

The first header byte is the body length truncated to 8 bits, and every frame
ends with an extra NUL after the last token's terminator.
"""

import pytest

from yabai_scratchpad.ipc.codec import HEADER_SIZE, encode


class TestFrameLayout:
    """Test frame byte layout."""

    def test_query_windows_frame(self):
        """Known frame for the windows query."""
        frame = encode(["query", "--windows"])

        assert frame == bytes([17, 0, 0, 0]) + b"query\x00--windows\x00\x00"

    def test_empty_command(self):
        """No tokens still produces the end-of-message byte."""
        assert encode([]) == bytes([1, 0, 0, 0, 0])

    def test_reserved_header_bytes_are_zero(self):
        frame = encode(["window", "42", "--toggle", "float"])

        assert frame[1:HEADER_SIZE] == b"\x00\x00\x00"

    @pytest.mark.parametrize("tokens", [
        ["query", "--spaces"],
        ["window", "123", "--move", "abs:-40:1200"],
        ["window", "--focus", "7"],
        ["x" * 300],
    ])
    def test_length_byte_matches_body(self, tokens):
        """First byte is (total length - 4) mod 256."""
        frame = encode(tokens)

        assert frame[0] == (len(frame) - HEADER_SIZE) % 256

    def test_long_body_wraps_length_byte(self):
        """Bodies over 255 bytes wrap instead of raising."""
        frame = encode(["a" * 299])

        assert len(frame) - HEADER_SIZE == 301
        assert frame[0] == 301 - 256

    def test_frame_ends_with_extra_terminator(self):
        frame = encode(["window", "5", "--space", "3"])

        assert frame.endswith(b"3\x00\x00")
        assert frame[HEADER_SIZE:].count(b"\x00") == 5

    def test_tokens_are_utf8(self):
        """Non-ASCII tokens are encoded as UTF-8 and counted in bytes."""
        frame = encode(["Untitled — Notes"])
        token = "Untitled — Notes".encode("utf-8")

        assert frame[HEADER_SIZE:] == token + b"\x00\x00"
        assert frame[0] == len(token) + 2
