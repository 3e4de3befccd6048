import pytest

from d2shared.cof import COF, CofLayer, load_cof
from d2shared.enums import AnimationFrame, CompositeType, DrawEffect, WeaponClass


def _layer(layer_type, shadow, transparent, draw_effect, weapon):
    return bytes([layer_type, shadow, 0, transparent, draw_effect]) + weapon


def _sample():
    header = bytes([2, 2, 1]) + bytes(25)
    layers = _layer(0, 1, 0, 5, b"hth\x00") + _layer(1, 0, 1, 3, b"1hs ")
    frames = bytes([0, 1])
    priority = bytes([0, 1, 1, 0])
    return header + layers + frames + priority


class _Provider:
    def __init__(self, files):
        self.files = files

    def load_file(self, file_name):
        return self.files[file_name]


def test_header_counts():
    cof = COF.from_bytes(_sample())
    assert cof.number_of_layers == 2
    assert cof.frames_per_direction == 2
    assert cof.number_of_directions == 1


def test_layers_parsed():
    cof = COF.from_bytes(_sample())
    assert cof.cof_layers == [
        CofLayer(
            type=CompositeType.HEAD,
            shadow=1,
            transparent=False,
            draw_effect=DrawEffect.NORMAL,
            weapon_class=WeaponClass.HAND_TO_HAND,
        ),
        CofLayer(
            type=CompositeType.TORSO,
            shadow=0,
            transparent=True,
            draw_effect=DrawEffect.MODULATE,
            weapon_class=WeaponClass.ONE_HAND_SWING,
        ),
    ]


def test_composite_layers_map_type_to_index():
    cof = COF.from_bytes(_sample())
    assert cof.composite_layers == {CompositeType.HEAD: 0, CompositeType.TORSO: 1}


def test_animation_frames():
    cof = COF.from_bytes(_sample())
    assert cof.animation_frames == [AnimationFrame.NO_EVENT, AnimationFrame.ATTACK]


def test_priority_shape_and_values():
    cof = COF.from_bytes(_sample())
    assert cof.priority == [
        [
            [CompositeType.HEAD, CompositeType.TORSO],
            [CompositeType.TORSO, CompositeType.HEAD],
        ]
    ]


def test_empty_data_gives_empty_cof():
    cof = COF.from_bytes(b"")
    assert cof == COF()
    assert cof.number_of_layers == 0
    assert cof.priority == []


def test_truncated_data_raises():
    with pytest.raises(EOFError):
        COF.from_bytes(_sample()[:-1])


def test_unknown_weapon_class_raises():
    data = bytes([1, 0, 0]) + bytes(25) + _layer(0, 0, 0, 0, b"zzz\x00")
    with pytest.raises(ValueError):
        COF.from_bytes(data)


def test_load_cof_uses_provider():
    provider = _Provider({"/data/test.cof": _sample()})
    cof = load_cof("/data/test.cof", provider)
    assert cof == COF.from_bytes(_sample())
    assert cof.cof_layers[1].weapon_class is WeaponClass.ONE_HAND_SWING


def test_load_cof_empty_file():
    provider = _Provider({"empty.cof": b""})
    assert load_cof("empty.cof", provider).cof_layers == []