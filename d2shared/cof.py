"""Component object files: how a composite sprite's layers are put together."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import TypeVar

from d2shared.enums import AnimationFrame, CompositeType, DrawEffect, WeaponClass
from d2shared.interfaces import FileProvider
from d2shared.stream_reader import StreamReader

_HEADER_PADDING = 25
_WEAPON_CLASS_WIDTH = 4

_E = TypeVar("_E", bound=IntEnum)


def _as_enum(enum_cls: type[_E], value: int) -> _E | int:
    """Return the member of ``enum_cls`` for ``value``, or the raw value if it has none."""
    try:
        return enum_cls(value)
    except ValueError:
        return value


@dataclass
class CofLayer:
    """One layer of a composite sprite."""

    type: CompositeType | int
    shadow: int
    transparent: bool
    draw_effect: DrawEffect | int
    weapon_class: WeaponClass


@dataclass
class COF:
    """Layer setup, keyframe events and per-frame draw order of an animation."""

    number_of_directions: int = 0
    frames_per_direction: int = 0
    number_of_layers: int = 0
    cof_layers: list[CofLayer] = field(default_factory=list)
    composite_layers: dict[CompositeType | int, int] = field(default_factory=dict)
    animation_frames: list[AnimationFrame | int] = field(default_factory=list)
    priority: list[list[list[CompositeType | int]]] = field(default_factory=list)

    @classmethod
    def from_bytes(cls, data: bytes) -> COF:
        """Parse a COF file; empty data gives an empty COF."""
        if not data:
            return cls()

        reader = StreamReader(data)
        number_of_layers = reader.get_byte()
        frames_per_direction = reader.get_byte()
        number_of_directions = reader.get_byte()
        reader.skip_bytes(_HEADER_PADDING)

        layers: list[CofLayer] = []
        composite_layers: dict[CompositeType | int, int] = {}
        for index in range(number_of_layers):
            layer_type = _as_enum(CompositeType, reader.get_byte())
            shadow = reader.get_byte()
            reader.skip_bytes(1)
            transparent = reader.get_byte() != 0
            draw_effect = _as_enum(DrawEffect, reader.get_byte())
            raw_class = reader.read_bytes(_WEAPON_CLASS_WIDTH)
            class_code = raw_class.replace(b"\x00", b"").decode("latin-1").strip()
            layers.append(
                CofLayer(
                    type=layer_type,
                    shadow=shadow,
                    transparent=transparent,
                    draw_effect=draw_effect,
                    weapon_class=WeaponClass.from_string(class_code),
                )
            )
            composite_layers[layer_type] = index

        animation_frames = [
            _as_enum(AnimationFrame, value)
            for value in reader.read_bytes(frames_per_direction)
        ]

        priority_bytes = iter(
            reader.read_bytes(frames_per_direction * number_of_directions * number_of_layers)
        )
        priority = [
            [
                [_as_enum(CompositeType, next(priority_bytes)) for _ in range(number_of_layers)]
                for _ in range(frames_per_direction)
            ]
            for _ in range(number_of_directions)
        ]

        return cls(
            number_of_directions=number_of_directions,
            frames_per_direction=frames_per_direction,
            number_of_layers=number_of_layers,
            cof_layers=layers,
            composite_layers=composite_layers,
            animation_frames=animation_frames,
            priority=priority,
        )


def load_cof(file_name: str, file_provider: FileProvider) -> COF:
    """Load and parse the COF file ``file_name`` from ``file_provider``."""
    return COF.from_bytes(file_provider.load_file(file_name))