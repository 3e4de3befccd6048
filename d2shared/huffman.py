"""Adaptive Huffman decompression as used for archived game data."""

from __future__ import annotations

from d2shared.bitstream import BitStream

_END_OF_STREAM = 256
_NEW_LITERAL = 257


class _Node:
    """A tree node that also sits in a doubly linked list ordered by weight."""

    __slots__ = ("value", "weight", "parent", "child0", "prev", "next")

    def __init__(self, value: int, weight: int) -> None:
        self.value = value
        self.weight = weight
        self.parent: _Node | None = None
        self.child0: _Node | None = None
        self.prev: _Node | None = None
        self.next: _Node | None = None

    @property
    def child1(self) -> _Node | None:
        return self.child0.prev if self.child0 is not None else None

    def _link_after(self, other: _Node) -> None:
        if self.next is not None:
            self.next.prev = other
            other.next = self.next
        self.next = other
        other.prev = self

    def insert(self, other: _Node) -> _Node:
        """Place ``other`` by weight; return it if it became the new tail, else self."""
        if other.weight <= self.weight:
            self._link_after(other)
            return other
        node = self
        while node.prev is not None:
            node = node.prev
            if other.weight <= node.weight:
                node._link_after(other)
                return self
        other.prev = None
        node.prev = other
        other.next = node
        return self


def _zeros(count: int) -> bytes:
    return bytes(count)


_PRIME_TABLES: tuple[bytes, ...] = (
    # Compression type 0
    bytes([0x0A]) + _zeros(254) + bytes([0x02]),
    # Compression type 1
    bytes.fromhex(
        "54 16 16 0D 0C 08 06 05 06 05 06 03 04 04 03 05"
        "0E 0B 14 13 13 09 0B 06 05 04 03 02 03 02 02 02"
        "0D 07 09 06 06 04 03 02 04 03 03 03 03 03 02 02"
        "09 06 04 04 04 04 03 02 03 02 02 02 02 03 02 04"
        "08 03 04 07 09 05 03 03 03 03 02 02 02 03 02 02"
        "03 02 02 02 02 02 02 02 02 01 01 01 02 01 02 02"
        "06 0A 08 08 06 07 04 03 04 04 02 02 04 02 03 03"
        "04 03 07 07 09 06 04 03 03 02 01 02 02 02 02 02"
        "0A 02 02 03 02 02 01 01 02 02 02 06 03 05 02 03"
        "02 01 01 01 01 01 01 01 01 01 01 02 03 01 01 01"
        "02 01 01 01 01 01 01 02 04 04 04 07 09 08 0C 02"
        "01 01 01 01 01 01 01 01 01 01 01 01 02 01 01 03"
        "04 01 02 04 05 01 01 01 01 01 01 01 02 01 01 01"
        "04 01 01 01 01 01 02 01 01 01 01 01 01 01 01 01"
        "02 01 01 01 01 01 01 01 03 01 01 01 01 01 01 01"
        "02 01 01 01 01 01 01 02 02 01 01 02 02 02 06 4B"
    ),
    # Compression type 2
    bytes.fromhex(
        "00 00 00 00 00 00 00 00 00 03 27 00 00 23 00 00"
        "00 00 00 00 00 00 00 00 00 00 00 00 00 00 00 00"
        "FF 01 01 01 01 01 01 01 02 02 01 01 06 0E 10 04"
        "06 08 05 04 04 03 03 02 02 03 03 01 01 02 01 01"
        "01 04 02 04 02 02 02 01 01 04 01 01 02 03 03 02"
        "03 01 03 06 04 01 01 01 01 01 01 02 01 02 01 01"
        "01 29 07 16 12 40 0A 0A 11 25 01 03 17 10 26 2A"
        "10 01 23 23 2F 10 06 07 02 09 01 01 01 01 01"
    ),
    # Compression type 3
    bytes.fromhex(
        "FF 0B 07 05 0B 02 02 02 06 02 02 01 04 02 01 03"
        "09 01 01 01 03 04 01 01 02 01 01 01 02 01 01 01"
        "05 01 01 01 0D 01 01 01 01 01 01 01 01 01 01 01"
        "02 01 01 03 01 01 01 01 01 01 01 02 01 01 01 01"
        "0A 04 02 01 06 03 02 01 01 01 01 01 03 01 01 01"
        "05 02 03 04 03 03 03 02 01 01 01 02 01 02 03 03"
        "01 03 01 01 02 05 01 01 04 03 05 01 03 01 03 03"
        "02 01 04 03 0A 06 01 01 01 01 01 01 01 01 01 01"
        "02 02 01 0A 02 05 01 01 02 07 02 17 01 05 01 01"
        "0E 01 01 01 01 01 01 01 01 01 01 01 01 01 01 01"
        "01 01 01 01 01 01 01 01 01 01 01 01 01 01 01 01"
        "01 01 01 01 01 01 01 01 01 01 01 01 01 01 01 01"
        "06 02 01 04 05 01 01 02 01 01 01 01 02 01 01 01"
        "01 01 01 01 01 01 01 01 01 01 01 01 01 01 01 01"
        "01 01 01 01 01 01 01 01 07 01 01 02 01 01 01 01"
        "02 01 01 01 01 01 01 01 02 01 01 01 01 01 01 11"
    ),
    # Compression type 4
    bytes.fromhex("FF FB 98 9A 84 85 63 64 3E 3E 22 22 13 13 18 17"),
    # Compression type 5
    bytes.fromhex(
        "FF F1 9D 9E 9A 9B 9A 97 93 93 8C 8E 86 88 80 82"
        "7C 7C 72 73 69 6B 5F 60 55 56 4A 4B 40 41 37 37"
        "2F 2F 27 27 21 21 1B 1C 17 17 13 13 10 10 0D 0D"
        "0B 0B 09 09 08 08 07 07 06 05 05 04 04 04 19 18"
    ),
    # Compression type 6
    bytes.fromhex("C3 CB F5 41 FF 7B F7 21")
    + _zeros(56)
    + bytes.fromhex("BF CC F2 40 FD 7C F7 22")
    + _zeros(56)
    + bytes.fromhex("7A 46"),
    # Compression type 7
    bytes.fromhex("C3 D9 EF 3D F9 7C E9 1E FD AB F1 2C FC 5B FE 17")
    + _zeros(48)
    + bytes.fromhex("BD D9 EC 3D F5 7D E8 1D FB AE F0 2C FB 5C FF 18")
    + _zeros(48)
    + bytes.fromhex("70 6C"),
    # Compression type 8
    bytes.fromhex(
        "BA C5 DA 33 E3 6D D8 18 E5 94 DA 23 DF 4A D1 10"
        "EE AF E4 2C EA 5A DE 15 F4 87 E9 21 F6 43 FC 12"
    )
    + _zeros(32)
    + bytes.fromhex(
        "B0 C7 D8 33 E3 6B D6 18 E7 95 D8 23 DB 49 D0 11"
        "E9 B2 E2 2B E8 5C DD 15 F1 87 E7 20 F7 44 FF 13"
    )
    + _zeros(32)
    + bytes.fromhex("5F 9E"),
)


def _read_bit(stream: BitStream) -> int:
    try:
        return stream.read_bits(1)
    except EOFError:
        raise EOFError("unexpected end of file") from None


def _decode(stream: BitStream, head: _Node) -> _Node:
    node = head
    while node.child0 is not None:
        node = node.child0 if _read_bit(stream) == 0 else node.child1
    return node


def _build_list(prime: bytes) -> _Node:
    """Build the weight-ordered list of leaves and return its tail."""
    tail = _Node(_END_OF_STREAM, 1)
    tail = tail.insert(_Node(_NEW_LITERAL, 1))
    for value, weight in enumerate(prime):
        if weight:
            tail = tail.insert(_Node(value, weight))
    return tail


def _build_tree(tail: _Node) -> _Node:
    """Pair nodes from the tail upward into a tree and return its root."""
    current = tail
    while current is not None:
        child0 = current
        child1 = current.prev
        if child1 is None:
            break
        parent = _Node(0, child0.weight + child1.weight)
        parent.child0 = child0
        child0.parent = parent
        child1.parent = parent
        current.insert(parent)
        current = current.prev.prev
    return current


def _insert_node(tail: _Node, value: int) -> _Node:
    """Split ``tail`` to add a leaf for ``value``; return the node before the old tail."""
    parent = tail
    result = tail.prev

    copy = _Node(parent.value, parent.weight)
    copy.parent = parent

    leaf = _Node(value, 0)
    leaf.parent = parent

    parent.child0 = leaf

    tail.next = copy
    copy.prev = tail
    leaf.prev = copy
    copy.next = leaf

    _adjust_tree(leaf)
    _adjust_tree(leaf)
    return result


def _adjust_tree(node: _Node) -> None:
    """Raise the weight of ``node`` and its ancestors, swapping nodes to keep order."""
    current: _Node | None = node
    while current is not None:
        current.weight += 1

        insert_point = current
        while True:
            prev = insert_point.prev
            if prev is None or prev.weight >= current.weight:
                break
            insert_point = prev

        if insert_point is current:
            current = current.parent
            continue

        # Unlink the insertion point and put it right after current.
        if insert_point.prev is not None:
            insert_point.prev.next = insert_point.next
        insert_point.next.prev = insert_point.prev

        insert_point.next = current.next
        insert_point.prev = current
        if current.next is not None:
            current.next.prev = insert_point
        current.next = insert_point

        # Unlink current and put it where the insertion point was.
        current.prev.next = current.next
        current.next.prev = current.prev

        if prev is None:
            raise ValueError("corrupt huffman tree: no node before the insertion point")

        following = prev.next
        current.next = following
        current.prev = prev
        following.prev = current
        prev.next = current

        current_parent = current.parent
        insert_parent = insert_point.parent

        if current_parent.child0 is current:
            current_parent.child0 = insert_point
        if current_parent is not insert_parent and insert_parent.child0 is insert_point:
            insert_parent.child0 = current

        current.parent = insert_parent
        insert_point.parent = current_parent

        current = current.parent


def huffman_decompress(data: bytes) -> bytes:
    """Decompress ``data``, whose first byte selects the prime table."""
    if not data:
        raise ValueError("no data to decompress")
    compression_type = data[0]
    if compression_type == 0:
        raise ValueError("compression type 0 is not supported")
    if compression_type >= len(_PRIME_TABLES):
        raise ValueError(f"unknown compression type {compression_type}")

    tail = _build_list(_PRIME_TABLES[compression_type])
    head = _build_tree(tail)

    output = bytearray()
    stream = BitStream(data[1:])
    while True:
        decoded = _decode(stream, head).value
        if decoded == _END_OF_STREAM:
            break
        if decoded == _NEW_LITERAL:
            literal = stream.read_bits(8)
            output.append(literal & 0xFF)
            tail = _insert_node(tail, literal)
        else:
            output.append(decoded & 0xFF)
    return bytes(output)