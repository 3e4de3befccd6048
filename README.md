# d2shared

Building blocks for reading Diablo II game data: little-endian byte streams,
bit readers, tab-separated data tables, `.tbl` string tables, COF animation
layouts, the animation data table, game enumerations, well-known resource
paths, and the Huffman and ADPCM wave decompressors used for archived data.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `d2shared.stream_reader`: `StreamReader`, reading little-endian integers
  (`get_byte`, `get_uint16`, `get_int16`, `get_uint32`, `get_int32`,
  `get_uint64`, `get_int64`) and byte runs (`read_bytes`, `read`) from a
  buffer. `position` can be set directly; `size()` and `eof()` report on the
  buffer. Reading past the end raises `EOFError`.
- `d2shared.stream_writer`: `StreamWriter`, building a little-endian byte
  string with `push_byte`, `push_uint16`, `push_int16`, `push_uint32`,
  `push_uint64` and `push_int64`; `to_bytes()` returns the result.
- `d2shared.bitstream`: `BitStream`, reading groups of up to 16 bits, least
  significant bit first. `read_bits` and `peek_byte` raise `EOFError` when the
  data runs out, and `read_bits` raises `ValueError` for more than 16 bits.
- `d2shared.bitmuncher`: `BitMuncher`, reading bits and bit fields from any bit
  offset (`get_bit`, `get_bits`, `get_signed_bits`, `get_byte`, `get_int32`,
  `get_uint32`, `skip_bits`, `copy`), and `make_signed` for two's complement
  sign extension of an n-bit value.
- `d2shared.common_types`: `Rectangle` (with `bottom()`, `right()` and
  `contains(x, y)`, right and bottom edges exclusive), `Path`, and
  `CalcString`, a `str` subclass marking data-file expressions.
- `d2shared.build_info`: `BuildInfo`, `set_build_info(branch, commit)` and
  `get_build_info()`.
- `d2shared.data_dictionary`: `DataDictionary.from_text` for tab-separated,
  CRLF-terminated tables with a header row; `get_string` and `get_number`
  look values up by field name and row index. Blank rows and rows with the
  wrong number of columns are kept as `None` so row indices stay aligned.
- `d2shared.text_dictionary`: `TextDictionary` reads binary `.tbl` string
  tables (`load_table`, or `load` for the patch, expansion and base tables in
  that order; the first table to define a key wins) and translates keys with
  `translate`, which raises `KeyError` for unknown keys.
  `load_text_dictionary` and `translate_string` work on a shared instance.
- `d2shared.enums`: `AnimationFrame`, `AnimationMode`, `CompositeType`,
  `DrawEffect`, `Hero`, `HeroStance`, `InventoryItemType`, `LayerStreamType`,
  `PaletteType`, `RegionId`, `RegionLayerType`, `TileType` and `WeaponClass`.
  `Hero.from_string`, `Hero.token`, `WeaponClass.from_string`,
  `TileType.is_lower_wall` and `TileType.is_upper_wall` give the lookups the
  data files need.
- `d2shared.resource_paths`: constants for the well-known paths inside the
  game archives. `{LANG}` and `{LANG_FONT}` in a path stand for the language
  of the installed data.
- `d2shared.interfaces`: `FileProvider`, a runtime-checkable protocol for any
  object with `load_file(file_name) -> bytes`, and `InventoryItem`, an
  abstract base class for items placed in an inventory grid.
- `d2shared.huffman`: `huffman_decompress(data)`; the first byte of `data`
  selects the prime table.
- `d2shared.wav`: `wav_decompress(data, channel_count)`, decoding ADPCM data
  for one or two channels into signed 16-bit little-endian PCM.
- `d2shared.cof`: `COF.from_bytes`, `load_cof` and `CofLayer` for component
  object files.
- `d2shared.animation_data`: `parse_animation_data`, `load_animation_data`
  and `AnimationDataRecord`; records are grouped by lower-cased COF name.

## Examples

```python
from d2shared.stream_reader import StreamReader
from d2shared.stream_writer import StreamWriter

writer = StreamWriter()
writer.push_uint32(0x12345678)
reader = StreamReader(writer.to_bytes())
assert reader.get_uint32() == 0x12345678
assert reader.eof()
```

```python
from d2shared.bitstream import BitStream

bits = BitStream(b"\xAA")
assert [bits.read_bits(1) for _ in range(8)] == [0, 1, 0, 1, 0, 1, 0, 1]
```

```python
from d2shared.data_dictionary import DataDictionary

table = DataDictionary.from_text("Name\tLevel\r\nAndariel\t12")
assert table.get_string("Name", 0) == "Andariel"
assert table.get_number("Level", 0) == 12
```

```python
from d2shared.enums import Hero, WeaponClass

assert Hero.from_string("Paladin") is Hero.PALADIN
assert Hero.PALADIN.token() == "PA"
assert WeaponClass.from_string("bow") is WeaponClass.BOW
```

## What it does not do

- It does not open game archives. The loaders (`TextDictionary.load`,
  `load_text_dictionary`, `load_cof`, `load_animation_data`) take a
  `file_provider` supplied by the caller; no implementation of one is
  included.
- `huffman_decompress` does not support compression type 0.
- `CalcString` only marks a string as an expression; it is not parsed or
  evaluated.
- There is no command-line program.