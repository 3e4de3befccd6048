"""Localised string tables keyed by name."""

from __future__ import annotations

import logging

from d2shared import resource_paths
from d2shared.interfaces import FileProvider
from d2shared.stream_reader import StreamReader

logger = logging.getLogger(__name__)

_TABLE_ORDER = (
    resource_paths.PATCH_STRING_TABLE,
    resource_paths.EXPANSION_STRING_TABLE,
    resource_paths.STRING_TABLE,
)


class TextDictionary:
    """Maps string keys to translated text; the first table to define a key wins."""

    def __init__(self) -> None:
        self._lookup: dict[str, str] = {}

    def __len__(self) -> int:
        return len(self._lookup)

    def __contains__(self, key: object) -> bool:
        return key in self._lookup

    def load(self, file_provider: FileProvider) -> None:
        """Replace the contents with the patch, expansion and base string tables."""
        self._lookup = {}
        for table in _TABLE_ORDER:
            self.load_table(file_provider.load_file(table))
        logger.info("Loaded %d entries from the string table", len(self._lookup))

    def load_table(self, data: bytes) -> None:
        """Add the entries of one binary string table, keeping keys already present."""
        reader = StreamReader(data)
        reader.read_bytes(2)  # CRC
        element_count = reader.get_uint16()
        hash_table_size = reader.get_uint32()
        reader.get_byte()  # version, always 0
        reader.get_uint32()  # string offset
        reader.get_uint32()  # maximum number of missed hash lookups
        reader.get_uint32()  # file size
        reader.skip_bytes(2 * element_count)  # element index

        entries = []
        for _ in range(hash_table_size):
            active = reader.get_byte() == 1
            reader.get_uint16()  # index
            reader.get_uint32()  # hash value
            index_string = reader.get_uint32()
            name_string = reader.get_uint32()
            name_length = reader.get_uint16()
            entries.append((active, index_string, name_string, name_length))

        for entry_index, (active, index_string, name_string, name_length) in enumerate(entries):
            if not active:
                continue
            reader.position = name_string
            value = reader.read_bytes(name_length - 1).decode("utf-8", errors="replace")
            reader.position = index_string
            key = self._read_terminated(reader)
            if key in ("x", "X"):
                key = f"#{entry_index}"
            self._lookup.setdefault(key, value)

    @staticmethod
    def _read_terminated(reader: StreamReader) -> str:
        chars = bytearray()
        while (byte := reader.get_byte()) != 0:
            chars.append(byte)
        return chars.decode("latin-1")

    def translate(self, key: str) -> str:
        """Return the text for ``key``; raise KeyError when it is unknown."""
        try:
            return self._lookup[key]
        except KeyError:
            raise KeyError(f"Could not find a string for the key {key!r}") from None


_default = TextDictionary()


def load_text_dictionary(file_provider: FileProvider) -> TextDictionary:
    """Load the shared dictionary from ``file_provider`` and return it."""
    _default.load(file_provider)
    return _default


def translate_string(key: str) -> str:
    """Translate ``key`` with the shared dictionary."""
    return _default.translate(key)