import pytest

from d2shared import resource_paths
from d2shared.stream_writer import StreamWriter
from d2shared.text_dictionary import (
    TextDictionary,
    load_text_dictionary,
    translate_string,
)

HEADER_SIZE = 21
ENTRY_SIZE = 17


def build_table(entries):
    """Encode (active, key, value) triples as a binary string table."""
    count = len(entries)
    strings_start = HEADER_SIZE + 2 * count + ENTRY_SIZE * count
    strings = bytearray()
    records = []
    for active, key, value in entries:
        key_bytes = key.encode("latin-1") + b"\0"
        value_bytes = value.encode("utf-8") + b"\0"
        key_offset = strings_start + len(strings)
        strings += key_bytes
        value_offset = strings_start + len(strings)
        strings += value_bytes
        records.append((active, key_offset, value_offset, len(value_bytes)))

    writer = StreamWriter()
    writer.push_uint16(0)
    writer.push_uint16(count)
    writer.push_uint32(count)
    writer.push_byte(0)
    writer.push_uint32(strings_start)
    writer.push_uint32(count)
    writer.push_uint32(strings_start + len(strings))
    for index in range(count):
        writer.push_uint16(index)
    for index, (active, key_offset, value_offset, length) in enumerate(records):
        writer.push_byte(1 if active else 0)
        writer.push_uint16(index)
        writer.push_uint32(0)
        writer.push_uint32(key_offset)
        writer.push_uint32(value_offset)
        writer.push_uint16(length)
    return writer.to_bytes() + bytes(strings)


class RecordingProvider:
    def __init__(self, files):
        self.files = files
        self.requested = []

    def load_file(self, file_name):
        self.requested.append(file_name)
        return self.files[file_name]


def make_provider(patch=(), expansion=(), base=()):
    return RecordingProvider(
        {
            resource_paths.PATCH_STRING_TABLE: build_table(list(patch)),
            resource_paths.EXPANSION_STRING_TABLE: build_table(list(expansion)),
            resource_paths.STRING_TABLE: build_table(list(base)),
        }
    )


def test_load_table_reads_keys_and_values():
    dictionary = TextDictionary()
    dictionary.load_table(build_table([(True, "strOk", "Ok"), (True, "strCancel", "Cancel")]))
    assert dictionary.translate("strOk") == "Ok"
    assert dictionary.translate("strCancel") == "Cancel"
    assert len(dictionary) == 2


def test_inactive_entries_are_skipped():
    dictionary = TextDictionary()
    dictionary.load_table(build_table([(False, "hidden", "Gone"), (True, "shown", "Here")]))
    assert "hidden" not in dictionary
    assert dictionary.translate("shown") == "Here"


def test_placeholder_keys_use_entry_index():
    dictionary = TextDictionary()
    dictionary.load_table(build_table([(True, "a", "first"), (True, "x", "second"), (True, "X", "third")]))
    assert dictionary.translate("#1") == "second"
    assert dictionary.translate("#2") == "third"
    assert "x" not in dictionary


def test_first_definition_wins():
    dictionary = TextDictionary()
    dictionary.load_table(build_table([(True, "key", "early")]))
    dictionary.load_table(build_table([(True, "key", "late")]))
    assert dictionary.translate("key") == "early"


def test_unicode_values_round_trip():
    dictionary = TextDictionary()
    dictionary.load_table(build_table([(True, "greet", "Grüße")]))
    assert dictionary.translate("greet") == "Grüße"


def test_missing_key_raises_key_error():
    dictionary = TextDictionary()
    with pytest.raises(KeyError):
        dictionary.translate("absent")


def test_load_reads_tables_in_priority_order():
    provider = make_provider(
        patch=[(True, "shared", "patch")],
        expansion=[(True, "shared", "expansion"), (True, "exp", "E")],
        base=[(True, "shared", "base"), (True, "base", "B")],
    )
    dictionary = TextDictionary()
    dictionary.load(provider)
    assert provider.requested == [
        resource_paths.PATCH_STRING_TABLE,
        resource_paths.EXPANSION_STRING_TABLE,
        resource_paths.STRING_TABLE,
    ]
    assert dictionary.translate("shared") == "patch"
    assert dictionary.translate("exp") == "E"
    assert dictionary.translate("base") == "B"


def test_load_replaces_earlier_contents():
    dictionary = TextDictionary()
    dictionary.load_table(build_table([(True, "stale", "old")]))
    dictionary.load(make_provider(base=[(True, "fresh", "new")]))
    assert "stale" not in dictionary
    assert dictionary.translate("fresh") == "new"


def test_truncated_table_raises():
    dictionary = TextDictionary()
    with pytest.raises(EOFError):
        dictionary.load_table(b"\x00\x00\x01")


def test_module_level_dictionary():
    loaded = load_text_dictionary(make_provider(expansion=[(True, "hello", "Hello")]))
    assert translate_string("hello") == "Hello"
    assert loaded.translate("hello") == translate_string("hello")
    with pytest.raises(KeyError):
        translate_string("missing")