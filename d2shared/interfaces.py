"""Interfaces implemented by file sources and inventory items."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Protocol, runtime_checkable

from d2shared.enums import InventoryItemType


@runtime_checkable
class FileProvider(Protocol):
    """Anything that can hand out the contents of a named game file."""

    def load_file(self, file_name: str) -> bytes:
        """Return the raw contents of ``file_name``."""
        ...


class InventoryItem(ABC):
    """An item that can be placed in an inventory grid."""

    @abstractmethod
    def inventory_item_name(self) -> str:
        """Return the name of this inventory item."""

    @abstractmethod
    def inventory_item_type(self) -> InventoryItemType:
        """Return the kind of item this is."""

    @abstractmethod
    def inventory_grid_size(self) -> tuple[int, int]:
        """Return the width and height the item takes up in the grid."""

    @abstractmethod
    def item_code(self) -> str:
        """Return the item code."""

    @abstractmethod
    def serialize(self) -> bytes:
        """Serialize the item for transport."""