import pytest

from d2shared.enums import (
    AnimationFrame,
    AnimationMode,
    CompositeType,
    DrawEffect,
    Hero,
    PaletteType,
    RegionId,
    TileType,
    WeaponClass,
)

LOWER_WALL_VALUES = {16, 17, 18, 19}
UPPER_WALL_VALUES = {1, 2, 3, 4, 5, 6, 7, 8, 9, 12, 14}


@pytest.mark.parametrize(
    "hero, token",
    [
        (Hero.BARBARIAN, "BA"),
        (Hero.NECROMANCER, "NE"),
        (Hero.PALADIN, "PA"),
        (Hero.ASSASSIN, "AI"),
        (Hero.SORCERESS, "SO"),
        (Hero.AMAZON, "AM"),
        (Hero.DRUID, "DZ"),
    ],
)
def test_hero_token(hero, token):
    assert hero.token() == token


def test_hero_none_has_no_token():
    with pytest.raises(ValueError):
        Hero.NONE.token()


@pytest.mark.parametrize(
    "name, hero",
    [
        ("Barbarian", Hero.BARBARIAN),
        ("Necromancer", Hero.NECROMANCER),
        ("Paladin", Hero.PALADIN),
        ("Assassin", Hero.ASSASSIN),
        ("Sorceress", Hero.SORCERESS),
        ("Amazon", Hero.AMAZON),
        ("Druid", Hero.DRUID),
    ],
)
def test_hero_from_string(name, hero):
    assert Hero.from_string(name) is hero


def test_hero_from_empty_string_is_none():
    assert Hero.from_string("") is Hero.NONE


def test_hero_from_string_round_trip():
    for hero in Hero:
        assert Hero.from_string(hero.display_name) is hero


def test_hero_from_unknown_string_raises():
    with pytest.raises(ValueError):
        Hero.from_string("barbarian")


@pytest.mark.parametrize(
    "code, weapon_class",
    [
        ("hth", WeaponClass.HAND_TO_HAND),
        ("bow", WeaponClass.BOW),
        ("1hs", WeaponClass.ONE_HAND_SWING),
        ("stf", WeaponClass.STAFF),
        ("xbw", WeaponClass.CROSSBOW),
        ("1st", WeaponClass.LEFT_SWING_RIGHT_THRUST),
        ("ht2", WeaponClass.TWO_HAND_TO_HAND),
    ],
)
def test_weapon_class_from_string(code, weapon_class):
    assert WeaponClass.from_string(code) is weapon_class


def test_weapon_class_round_trip():
    for weapon_class in WeaponClass:
        assert WeaponClass.from_string(weapon_class.code) is weapon_class


def test_weapon_class_empty_is_none():
    assert WeaponClass.from_string("") is WeaponClass.NONE


def test_weapon_class_unknown_raises():
    with pytest.raises(ValueError):
        WeaponClass.from_string("HTH")


@pytest.mark.parametrize("value", range(20))
def test_lower_wall(value):
    assert TileType(value).is_lower_wall() == (value in LOWER_WALL_VALUES)


@pytest.mark.parametrize("value", range(20))
def test_upper_wall(value):
    assert TileType(value).is_upper_wall() == (value in UPPER_WALL_VALUES)


@pytest.mark.parametrize("value", range(20))
def test_upper_and_lower_walls_disjoint(value):
    tile = TileType(value)
    assert not (tile.is_upper_wall() and tile.is_lower_wall())


def test_named_lower_walls():
    assert TileType(16) is TileType.LOWER_WALLS_EQUIVALENT_TO_LEFT_WALL
    assert TileType(19) is TileType.LOWER_WALLS_EQUIVALENT_TO_SOUTH_CORNER_WALL
    assert TileType.TREE.is_upper_wall()


def test_floor_and_roof_are_not_walls():
    for tile in (TileType.FLOOR, TileType.ROOF, TileType.SHADOW):
        assert not tile.is_upper_wall()
        assert not tile.is_lower_wall()


def test_palette_values():
    assert PaletteType("act1") is PaletteType.ACT1
    assert PaletteType.END_GAME2.value == "endgame2"
    assert PaletteType.UNITS == "units"


def test_integer_enums_match_source_values():
    assert AnimationFrame(4) is AnimationFrame.SKILL
    assert AnimationMode(43) is AnimationMode.OBJECT_SPECIAL5
    assert CompositeType(16) is CompositeType.MAX
    assert DrawEffect(7) is DrawEffect.MOD_2X
    assert RegionId(35) is RegionId.ACT5_LAVA
    assert RegionId(29) is RegionId.ACT5_TOWN


@pytest.mark.parametrize("value", range(17))
def test_composite_type_values_are_contiguous(value):
    assert CompositeType(value) is list(CompositeType)[value]