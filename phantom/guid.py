"""Globally unique identifiers stored as 16 raw bytes."""

from __future__ import annotations

import uuid
from functools import total_ordering

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_SIZE = 16


def _parse(text: str) -> bytes:
    """Parse hex text with optional dashes; anything malformed yields zeros."""
    digits = [ch for ch in text if ch != "-"]
    if len(digits) != 2 * _SIZE or any(ch not in _HEX_DIGITS for ch in digits):
        return bytes(_SIZE)
    return bytes.fromhex("".join(digits))


@total_ordering
class Guid:
    """A 128-bit identifier; the all-zero value is the empty, invalid guid."""

    __slots__ = ("_bytes",)

    def __init__(self, value: str | bytes | bytearray | None = None) -> None:
        if value is None:
            self._bytes = bytes(_SIZE)
        elif isinstance(value, str):
            self._bytes = _parse(value)
        elif isinstance(value, (bytes, bytearray)):
            if len(value) != _SIZE:
                raise ValueError(f"a guid needs {_SIZE} bytes, got {len(value)}")
            self._bytes = bytes(value)
        else:
            raise TypeError(f"cannot build a guid from {type(value).__name__}")

    def is_valid(self) -> bool:
        """True unless every byte is zero."""
        return any(self._bytes)

    def bytes(self) -> bytes:
        """The 16 underlying bytes."""
        return self._bytes

    def __str__(self) -> str:
        h = self._bytes.hex()
        return f"{h[0:8]}-{h[8:12]}-{h[12:16]}-{h[16:20]}-{h[20:32]}"

    def __repr__(self) -> str:
        return f"Guid('{self}')"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Guid):
            return NotImplemented
        return self._bytes == other._bytes

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Guid):
            return NotImplemented
        return self._bytes < other._bytes

    def __hash__(self) -> int:
        return hash(self._bytes)


def new_guid() -> Guid:
    """Create a fresh random guid."""
    return Guid(uuid.uuid4().bytes)