"""Enumerations for animations, heroes, tiles, palettes and the like."""

from __future__ import annotations

from enum import Enum, IntEnum


class AnimationFrame(IntEnum):
    """Keyframe event triggered on an animation frame."""

    NO_EVENT = 0
    ATTACK = 1
    MISSILE = 2
    SOUND = 3
    SKILL = 4


class AnimationMode(IntEnum):
    """Animation modes for players, monsters and objects."""

    PLAYER_DEATH = 0
    PLAYER_NEUTRAL = 1
    PLAYER_WALK = 2
    PLAYER_RUN = 3
    PLAYER_GET_HIT = 4
    PLAYER_TOWN_NEUTRAL = 5
    PLAYER_TOWN_WALK = 6
    PLAYER_ATTACK1 = 7
    PLAYER_ATTACK2 = 8
    PLAYER_BLOCK = 9
    PLAYER_CAST = 10
    PLAYER_THROW = 11
    PLAYER_KICK = 12
    PLAYER_SKILL1 = 13
    PLAYER_SKILL2 = 14
    PLAYER_SKILL3 = 15
    PLAYER_SKILL4 = 16
    PLAYER_DEAD = 17
    PLAYER_SEQUENCE = 18
    PLAYER_KNOCK_BACK = 19
    MONSTER_DEATH = 20
    MONSTER_NEUTRAL = 21
    MONSTER_WALK = 22
    MONSTER_GET_HIT = 23
    MONSTER_ATTACK1 = 24
    MONSTER_ATTACK2 = 25
    MONSTER_BLOCK = 26
    MONSTER_CAST = 27
    MONSTER_SKILL1 = 28
    MONSTER_SKILL2 = 29
    MONSTER_SKILL3 = 30
    MONSTER_SKILL4 = 31
    MONSTER_DEAD = 32
    MONSTER_KNOCKBACK = 33
    MONSTER_SEQUENCE = 34
    MONSTER_RUN = 35
    OBJECT_NEUTRAL = 36
    OBJECT_OPERATING = 37
    OBJECT_OPENED = 38
    OBJECT_SPECIAL1 = 39
    OBJECT_SPECIAL2 = 40
    OBJECT_SPECIAL3 = 41
    OBJECT_SPECIAL4 = 42
    OBJECT_SPECIAL5 = 43


class CompositeType(IntEnum):
    """Layer slots of a composite sprite."""

    HEAD = 0
    TORSO = 1
    LEGS = 2
    RIGHT_ARM = 3
    LEFT_ARM = 4
    RIGHT_HAND = 5
    LEFT_HAND = 6
    SHIELD = 7
    SPECIAL1 = 8
    SPECIAL2 = 9
    SPECIAL3 = 10
    SPECIAL4 = 11
    SPECIAL5 = 12
    SPECIAL6 = 13
    SPECIAL7 = 14
    SPECIAL8 = 15
    MAX = 16


class DrawEffect(IntEnum):
    """Blending mode used when drawing a layer."""

    PCT_TRANSPARENCY_25 = 0
    PCT_TRANSPARENCY_50 = 1
    PCT_TRANSPARENCY_75 = 2
    MODULATE = 3
    BURN = 4
    NORMAL = 5
    MOD_2X_TRANS = 6
    MOD_2X = 7


_HERO_TOKENS = {
    1: "BA",
    2: "NE",
    3: "PA",
    4: "AI",
    5: "SO",
    6: "AM",
    7: "DZ",
}

_HERO_NAMES = {
    0: "",
    1: "Barbarian",
    2: "Necromancer",
    3: "Paladin",
    4: "Assassin",
    5: "Sorceress",
    6: "Amazon",
    7: "Druid",
}


class Hero(IntEnum):
    """Playable character classes."""

    NONE = 0
    BARBARIAN = 1
    NECROMANCER = 2
    PALADIN = 3
    ASSASSIN = 4
    SORCERESS = 5
    AMAZON = 6
    DRUID = 7

    @property
    def display_name(self) -> str:
        return _HERO_NAMES[self.value]

    def token(self) -> str:
        """Return the two-letter token used in asset paths."""
        try:
            return _HERO_TOKENS[self.value]
        except KeyError:
            raise ValueError(f"Unknown hero token: {self.value}") from None

    @classmethod
    def from_string(cls, name: str) -> Hero:
        """Look a hero up by its display name; the empty string gives NONE."""
        if not name:
            return cls.NONE
        for hero in cls:
            if hero.display_name == name:
                return hero
        raise ValueError(f"unable to locate Hero enum corresponding to {name!r}")


class HeroStance(IntEnum):
    """Stance of a hero on the character selection screen."""

    IDLE = 0
    IDLE_SELECTED = 1
    APPROACHING = 2
    SELECTED = 3
    RETREATING = 4


class InventoryItemType(IntEnum):
    """Broad category of an inventory item."""

    ITEM = 0
    WEAPON = 1
    ARMOR = 2


class LayerStreamType(IntEnum):
    """Kinds of layer stream in a map file."""

    WALL1 = 0
    WALL2 = 1
    WALL3 = 2
    WALL4 = 3
    ORIENTATION1 = 4
    ORIENTATION2 = 5
    ORIENTATION3 = 6
    ORIENTATION4 = 7
    FLOOR1 = 8
    FLOOR2 = 9
    SHADOW = 10
    SUBSTITUTE = 11


class PaletteType(str, Enum):
    """Named palettes."""

    ACT1 = "act1"
    ACT2 = "act2"
    ACT3 = "act3"
    ACT4 = "act4"
    ACT5 = "act5"
    END_GAME = "endgame"
    END_GAME2 = "endgame2"
    FECHAR = "fechar"
    LOADING = "loading"
    MENU0 = "menu0"
    MENU1 = "menu1"
    MENU2 = "menu2"
    MENU3 = "menu3"
    MENU4 = "menu4"
    SKY = "sky"
    STATIC = "static"
    TRADEMARK = "trademark"
    UNITS = "units"


class RegionId(IntEnum):
    """Identifiers of map regions."""

    ACT1_TOWN = 1
    ACT1_WILDERNESS = 2
    ACT1_CAVE = 3
    ACT1_CRYPT = 4
    ACT1_MONESTARY = 5
    ACT1_COURTYARD = 6
    ACT1_BARRACKS = 7
    ACT1_JAIL = 8
    ACT1_CATHEDRAL = 9
    ACT1_CATACOMBS = 10
    ACT1_TRISTRAM = 11
    ACT2_TOWN = 12
    ACT2_SEWER = 13
    ACT2_HAREM = 14
    ACT2_BASEMENT = 15
    ACT2_DESERT = 16
    ACT2_TOMB = 17
    ACT2_LAIR = 18
    ACT2_ARCANE = 19
    ACT3_TOWN = 20
    ACT3_JUNGLE = 21
    ACT3_KURAST = 22
    ACT3_SPIDER = 23
    ACT3_DUNGEON = 24
    ACT3_SEWER = 25
    ACT4_TOWN = 26
    ACT4_MESA = 27
    ACT4_LAVA = 28
    ACT5_TOWN = 29
    ACT5_SIEGE = 30
    ACT5_BARRICADE = 31
    ACT5_TEMPLE = 32
    ACT5_ICE_CAVES = 33
    ACT5_BAAL = 34
    ACT5_LAVA = 35


class RegionLayerType(IntEnum):
    """Drawing layers of a region."""

    FLOORS = 0
    WALLS = 1
    SHADOWS = 2


_LOWER_WALLS = frozenset({16, 17, 18, 19})
_UPPER_WALLS = frozenset({1, 2, 3, 4, 5, 6, 7, 8, 9, 12, 14})


class TileType(IntEnum):
    """Orientation and kind of a map tile."""

    FLOOR = 0
    LEFT_WALL = 1
    RIGHT_WALL = 2
    RIGHT_PART_OF_NORTH_CORNER_WALL = 3
    LEFT_PART_OF_NORTH_CORNER_WALL = 4
    LEFT_END_WALL = 5
    RIGHT_END_WALL = 6
    SOUTH_CORNER_WALL = 7
    LEFT_WALL_WITH_DOOR = 8
    RIGHT_WALL_WITH_DOOR = 9
    SPECIAL_TILE1 = 10
    SPECIAL_TILE2 = 11
    PILLARS_COLUMNS_AND_STANDALONE_OBJECTS = 12
    SHADOW = 13
    TREE = 14
    ROOF = 15
    LOWER_WALLS_EQUIVALENT_TO_LEFT_WALL = 16
    LOWER_WALLS_EQUIVALENT_TO_RIGHT_WALL = 17
    LOWER_WALLS_EQUIVALENT_TO_RIGHT_LEFT_NORTH_CORNER_WALL = 18
    LOWER_WALLS_EQUIVALENT_TO_SOUTH_CORNER_WALL = 19

    def is_lower_wall(self) -> bool:
        return self.value in _LOWER_WALLS

    def is_upper_wall(self) -> bool:
        return self.value in _UPPER_WALLS


_WEAPON_CLASS_NAMES = {
    0: "",
    1: "hth",
    2: "bow",
    3: "1hs",
    4: "1ht",
    5: "stf",
    6: "2hs",
    7: "2ht",
    8: "xbw",
    9: "1js",
    10: "1jt",
    11: "1ss",
    12: "1st",
    13: "ht1",
    14: "ht2",
}


class WeaponClass(IntEnum):
    """Weapon classes, each with a three-letter code used in asset files."""

    NONE = 0
    HAND_TO_HAND = 1
    BOW = 2
    ONE_HAND_SWING = 3
    ONE_HAND_THRUST = 4
    STAFF = 5
    TWO_HAND_SWING = 6
    TWO_HAND_THRUST = 7
    CROSSBOW = 8
    LEFT_JAB_RIGHT_SWING = 9
    LEFT_JAB_RIGHT_THRUST = 10
    LEFT_SWING_RIGHT_SWING = 11
    LEFT_SWING_RIGHT_THRUST = 12
    ONE_HAND_TO_HAND = 13
    TWO_HAND_TO_HAND = 14

    @property
    def code(self) -> str:
        return _WEAPON_CLASS_NAMES[self.value]

    @classmethod
    def from_string(cls, name: str) -> WeaponClass:
        """Look a weapon class up by its code; the empty string gives NONE."""
        if not name:
            return cls.NONE
        for weapon_class in cls:
            if weapon_class.code == name:
                return weapon_class
        raise ValueError(
            f"unable to locate WeaponClass enum corresponding to {name!r}"
        )