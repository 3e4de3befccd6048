import pytest

from d2shared.animation_data import load_animation_data
from d2shared.enums import InventoryItemType
from d2shared.interfaces import FileProvider, InventoryItem


class DictProvider:
    def __init__(self, files):
        self.files = files
        self.requested = []

    def load_file(self, file_name):
        self.requested.append(file_name)
        return self.files[file_name]


class Sword(InventoryItem):
    def inventory_item_name(self):
        return "Short Sword"

    def inventory_item_type(self):
        return InventoryItemType.WEAPON

    def inventory_grid_size(self):
        return (1, 3)

    def item_code(self):
        return "ssd"

    def serialize(self):
        return self.item_code().encode()


class Incomplete(InventoryItem):
    def inventory_item_name(self):
        return "Nothing"


def test_object_with_load_file_serves_package_loaders():
    provider = DictProvider({"/data/global/animdata.d2": b""})
    assert isinstance(provider, FileProvider)
    assert not isinstance(object(), FileProvider)
    load_animation_data(provider)
    assert provider.requested == ["/data/global/animdata.d2"]


def test_complete_item_answers_every_query():
    item = Sword()
    assert isinstance(item, InventoryItem)
    assert item.inventory_item_name() == "Short Sword"
    assert item.inventory_item_type() is InventoryItemType(1)
    assert item.inventory_grid_size() == (1, 3)
    assert item.serialize() == b"ssd"


def test_only_complete_items_can_be_created():
    with pytest.raises(TypeError):
        InventoryItem()
    with pytest.raises(TypeError):
        Incomplete()
    assert Sword().item_code() == "ssd"


def test_interface_itself_cannot_be_created():
    with pytest.raises(TypeError):
        InventoryItem()