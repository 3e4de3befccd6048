import pytest

from d2shared.huffman import (
    _PRIME_TABLES,
    _build_list,
    _build_tree,
    _insert_node,
    huffman_decompress,
)


def _code_for(head, symbol):
    stack = [(head, [])]
    while stack:
        node, bits = stack.pop()
        if node.child0 is None:
            if node.value == symbol:
                return bits
            continue
        stack.append((node.child0, bits + [0]))
        stack.append((node.child0.prev, bits + [1]))
    raise LookupError(symbol)


def _literal_bits(value):
    return [(value >> shift) & 1 for shift in range(8)]


def _pack(bits):
    out = bytearray((len(bits) + 7) // 8)
    for position, bit in enumerate(bits):
        if bit:
            out[position // 8] |= 1 << (position % 8)
    return bytes(out)


def _tree(compression_type):
    tail = _build_list(_PRIME_TABLES[compression_type])
    head = _build_tree(tail)
    return tail, head


@pytest.mark.parametrize("compression_type", range(1, 9))
def test_end_marker_alone_gives_empty_output(compression_type):
    _, head = _tree(compression_type)
    payload = _pack(_code_for(head, 256))
    assert huffman_decompress(bytes([compression_type]) + payload) == b""


@pytest.mark.parametrize("message", [b"Hello, world", b"\x00\xff\x10 abc", b"aaaaaaa"])
def test_static_symbols_round_trip(message):
    _, head = _tree(1)
    bits = []
    for symbol in message:
        bits += _code_for(head, symbol)
    bits += _code_for(head, 256)
    assert huffman_decompress(bytes([1]) + _pack(bits)) == message


def test_new_literal_is_emitted_and_added():
    tail, head = _tree(2)
    bits = _code_for(head, 257) + _literal_bits(0)
    _insert_node(tail, 0)
    bits += _code_for(head, 256)
    assert huffman_decompress(bytes([2]) + _pack(bits)) == b"\x00"


def test_codes_are_prefix_free():
    _, head = _tree(4)
    codes = [tuple(_code_for(head, symbol)) for symbol in range(16)]
    codes += [tuple(_code_for(head, 256)), tuple(_code_for(head, 257))]
    assert len(set(codes)) == len(codes)
    for code in codes:
        for other in codes:
            if code is not other and len(code) < len(other):
                assert other[: len(code)] != code


def test_type_zero_is_rejected():
    with pytest.raises(ValueError):
        huffman_decompress(b"\x00\x01\x02")


def test_unknown_type_is_rejected():
    with pytest.raises(ValueError):
        huffman_decompress(bytes([9, 0, 0]))


def test_empty_input_is_rejected():
    with pytest.raises(ValueError):
        huffman_decompress(b"")


def test_missing_bits_raise_eof():
    with pytest.raises(EOFError):
        huffman_decompress(bytes([1]))