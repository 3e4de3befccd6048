"""Byte and bit readers, data tables, string tables, game enums, COF and
animation data parsers, and Huffman and ADPCM decompressors for Diablo II data."""

__version__ = "0.1.0"