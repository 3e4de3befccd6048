"""Bit-level reader that walks a byte buffer least significant bit first."""

from __future__ import annotations

_UINT32_MASK = 0xFFFFFFFF


def _to_int32(value: int) -> int:
    value &= _UINT32_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def make_signed(value: int, bits: int) -> int:
    """Interpret the low ``bits`` bits of ``value`` as a two's complement number."""
    if bits == 0:
        return 0
    # A single set bit stands for -1.
    if bits == 1:
        return _to_int32(-value)
    if value & (1 << (bits - 1)) == 0:
        return _to_int32(value)
    mask = (1 << bits) - 1
    extended = (value & mask) | (~mask & _UINT32_MASK)
    return _to_int32(extended)


class BitMuncher:
    """Reads individual bits and bit groups from ``data`` starting at bit ``offset``."""

    def __init__(self, data: bytes, offset: int = 0) -> None:
        self._data = bytes(data)
        self.offset = offset
        self.bits_read = 0

    def copy(self) -> BitMuncher:
        """Return a new muncher over the same data and offset, with its counter reset."""
        return BitMuncher(self._data, self.offset)

    def get_bit(self) -> int:
        result = (self._data[self.offset // 8] >> (self.offset % 8)) & 0x01
        self.offset += 1
        self.bits_read += 1
        return result

    def skip_bits(self, bits: int) -> None:
        self.offset += bits
        self.bits_read += bits

    def get_byte(self) -> int:
        return self.get_bits(8) & 0xFF

    def get_int32(self) -> int:
        return make_signed(self.get_bits(32), 32)

    def get_uint32(self) -> int:
        return self.get_bits(32)

    def get_bits(self, bits: int) -> int:
        """Read ``bits`` bits, the first one read becoming the least significant."""
        result = 0
        for shift in range(bits):
            result |= self.get_bit() << shift
        return result & _UINT32_MASK

    def get_signed_bits(self, bits: int) -> int:
        return make_signed(self.get_bits(bits), bits)