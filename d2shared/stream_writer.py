"""Little-endian writer that builds a byte string."""

from __future__ import annotations


class StreamWriter:
    """Accumulates integers of various widths as little-endian bytes."""

    def __init__(self) -> None:
        self._data = bytearray()

    def _push(self, value: int, size: int) -> None:
        mask = (1 << (size * 8)) - 1
        self._data += (value & mask).to_bytes(size, "little")

    def push_byte(self, value: int) -> None:
        self._push(value, 1)

    def push_uint16(self, value: int) -> None:
        self._push(value, 2)

    def push_int16(self, value: int) -> None:
        self._push(value, 2)

    def push_uint32(self, value: int) -> None:
        self._push(value, 4)

    def push_uint64(self, value: int) -> None:
        self._push(value, 8)

    def push_int64(self, value: int) -> None:
        self._push(value, 8)

    def to_bytes(self) -> bytes:
        return bytes(self._data)