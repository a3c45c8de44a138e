"""Base64 encoding and decoding with a configurable alphabet and line wrapping.

The two last alphabet characters and the padding character can be chosen,
which covers both the standard and the URL-safe variants. Encoded output
can be broken into lines of a fixed length with a chosen separator. The
decoder skips every byte that is not in the alphabet, such as line breaks.
"""

from __future__ import annotations

import string
from typing import Union

__all__ = ["Base64Codec"]

Data = Union[bytes, bytearray, memoryview, str]
Char = Union[str, bytes, int]

_IGNORE = -1
_PAD = -2
_MAX_SEPARATOR_LEN = 15


def _char_code(ch: Char, what: str) -> int:
    if isinstance(ch, int):
        if not 0 <= ch <= 255:
            raise ValueError(f"{what} must be a byte value, not {ch}")
        return ch
    raw = ch.encode("latin-1") if isinstance(ch, str) else bytes(ch)
    if len(raw) != 1:
        raise ValueError(f"{what} must be a single character, not {ch!r}")
    return raw[0]


def _as_bytes(data: Data) -> bytes:
    if isinstance(data, str):
        return data.encode("latin-1")
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"data must be bytes or str, not {type(data).__name__}")


class Base64Codec:
    """Base64 encoder/decoder with its alphabet and line settings."""

    def __init__(
        self,
        line_length: int = 0,
        plus: Char = "+",
        splash: Char = "/",
        pad: Char = "=",
    ) -> None:
        if line_length < 0:
            raise ValueError(f"line length must not be negative: {line_length}")
        self._line_length = line_length
        self._line_separator = b"\n"

        alphabet = (string.ascii_uppercase + string.ascii_lowercase + string.digits).encode("ascii")
        self._value_to_char = alphabet + bytes(
            [_char_code(plus, "plus"), _char_code(splash, "splash")]
        )
        self.pad_char = _char_code(pad, "pad")

        table = [_IGNORE] * 256
        for value, ch in enumerate(self._value_to_char):
            table[ch] = value
        table[self.pad_char] = _PAD
        self._char_to_value = table

    @property
    def line_length(self) -> int:
        """Maximum characters per line, 0 for no line breaks."""
        return self._line_length

    @line_length.setter
    def line_length(self, length: int) -> None:
        if length < 0:
            raise ValueError(f"line length must not be negative: {length}")
        self._line_length = (length // 4) * 4

    @property
    def line_separator(self) -> bytes:
        """Bytes placed between encoded lines (at most 15 bytes are kept)."""
        return self._line_separator

    @line_separator.setter
    def line_separator(self, separator: Data) -> None:
        self._line_separator = _as_bytes(separator)[:_MAX_SEPARATOR_LEN]

    def encode_length(self, src_len: int) -> int:
        """Length of the padded encoding of ``src_len`` bytes, line separators included."""
        length = ((src_len + 2) // 3) * 4
        if self._line_length != 0:
            lines = (length + self._line_length - 1) // self._line_length - 1
            if lines > 0:
                length += lines * len(self._line_separator)
        return length

    def encode(self, data: Data, pad: bool = True) -> bytes:
        """Encode ``data``; without ``pad`` the trailing pad characters are left off."""
        raw = _as_bytes(data)
        if not raw:
            return b""

        leftover = len(raw) % 3
        padded = raw + bytes((3 - leftover) % 3)
        chars = self._value_to_char
        out = bytearray()
        line_pos = 0
        for start in range(0, len(padded), 3):
            line_pos += 4
            if line_pos > self._line_length:
                if self._line_length != 0:
                    out += self._line_separator
                line_pos = 4
            combined = int.from_bytes(padded[start:start + 3], "big")
            out += bytes(
                (
                    chars[(combined >> 18) & 0x3F],
                    chars[(combined >> 12) & 0x3F],
                    chars[(combined >> 6) & 0x3F],
                    chars[combined & 0x3F],
                )
            )

        if leftover:
            dropped = 3 - leftover
            if pad:
                out[-dropped:] = bytes([self.pad_char]) * dropped
            else:
                del out[-dropped:]
        return bytes(out)

    def decode(self, data: Data) -> bytes:
        """Decode padded base64, skipping characters outside the alphabet.

        Raises ValueError when the data characters are not a multiple of 4.
        """
        out = bytearray()
        dummies = 0
        cycle = 0
        combined = 0
        table = self._char_to_value
        for ch in _as_bytes(data):
            value = table[ch]
            if value == _IGNORE:
                continue
            if value == _PAD:
                value = 0
                dummies += 1
            combined = (combined << 6) | value
            cycle += 1
            if cycle == 4:
                out += combined.to_bytes(3, "big")
                combined = 0
                cycle = 0

        if cycle != 0:
            raise ValueError(
                "input to decode is not an even multiple of 4 characters; "
                f"pad with {chr(self.pad_char)!r}"
            )
        return bytes(out[: max(0, len(out) - dummies)])

    def decode_auto(self, data: Data) -> bytes:
        """Decode base64 that may lack its trailing pad characters."""
        raw = _as_bytes(data)
        remain = len(raw) % 4
        if remain:
            raw += bytes([self.pad_char]) * (4 - remain)
        return self.decode(raw)