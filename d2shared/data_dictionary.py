"""Tab-separated data tables with a header row of field names."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass
class DataDictionary:
    """A table whose rows are addressed by index and columns by field name.

    Rows that are blank or have the wrong number of columns are kept as ``None``
    so that row indices match the line numbers of the source text.
    """

    field_name_lookup: dict[str, int] = field(default_factory=dict)
    data: list[list[str] | None] = field(default_factory=list)

    @classmethod
    def from_text(cls, text: str) -> DataDictionary:
        header, *lines = text.split("\r\n")
        lookup = {name: index for index, name in enumerate(header.split("\t"))}
        rows: list[list[str] | None] = []
        for line in lines:
            values = line.split("\t")
            if not line.strip() or len(values) != len(lookup):
                rows.append(None)
            else:
                rows.append(values)
        return cls(field_name_lookup=lookup, data=rows)

    def get_string(self, field_name: str, index: int) -> str:
        column = self.field_name_lookup[field_name]
        row = self.data[index]
        if row is None:
            raise IndexError(f"row {index} holds no data")
        return row[column]

    def get_number(self, field_name: str, index: int) -> int:
        text = self.get_string(field_name, index)
        if not _INTEGER.fullmatch(text):
            raise ValueError(f"invalid integer {text!r} in field {field_name!r}")
        return int(text)