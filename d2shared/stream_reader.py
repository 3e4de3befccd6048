"""Little-endian reader over an in-memory byte buffer."""

from __future__ import annotations


class StreamReader:
    """Reads integers and byte runs from ``data``; ``position`` may be set freely."""

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self.position = 0

    def size(self) -> int:
        return len(self._data)

    def eof(self) -> bool:
        return self.position >= len(self._data)

    def _take(self, count: int) -> bytes:
        if count < 0:
            raise ValueError("count must not be negative")
        end = self.position + count
        if end > len(self._data):
            raise EOFError(
                f"cannot read {count} bytes at position {self.position} of {len(self._data)}"
            )
        chunk = self._data[self.position:end]
        self.position = end
        return chunk

    def _unpack(self, count: int, signed: bool) -> int:
        return int.from_bytes(self._take(count), "little", signed=signed)

    def get_byte(self) -> int:
        return self._take(1)[0]

    def get_uint16(self) -> int:
        return self._unpack(2, False)

    def get_int16(self) -> int:
        return self._unpack(2, True)

    def get_uint32(self) -> int:
        return self._unpack(4, False)

    def get_int32(self) -> int:
        return self._unpack(4, True)

    def get_uint64(self) -> int:
        return self._unpack(8, False)

    def get_int64(self) -> int:
        return self._unpack(8, True)

    def read_bytes(self, count: int) -> bytes:
        return self._take(count)

    def skip_bytes(self, count: int) -> None:
        self.position += count

    def read(self, size: int = -1) -> bytes:
        """Return up to ``size`` bytes (all remaining if negative); empty at the end."""
        if self.eof():
            return b""
        remaining = len(self._data) - self.position
        if size < 0 or size > remaining:
            size = remaining
        return self._take(size)