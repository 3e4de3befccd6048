"""The animation data table: frame counts, speeds and keyframe flags per COF."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from d2shared import resource_paths
from d2shared.interfaces import FileProvider
from d2shared.stream_reader import StreamReader

logger = logging.getLogger(__name__)

_COF_NAME_WIDTH = 8
_FLAG_COUNT = 144


@dataclass
class AnimationDataRecord:
    """One entry of the animation data table.

    ``animation_speed`` is X where the rate is X/255 of 25 frames per second;
    ``flags`` are the keyframe triggers.
    """

    cof_name: str
    frames_per_direction: int
    animation_speed: int
    flags: bytes


def parse_animation_data(data: bytes) -> dict[str, list[AnimationDataRecord]]:
    """Parse the table, grouping records by lower-cased COF name."""
    records: dict[str, list[AnimationDataRecord]] = {}
    reader = StreamReader(data)
    while not reader.eof():
        count = reader.get_int32()
        for _ in range(count):
            name = reader.read_bytes(_COF_NAME_WIDTH).replace(b"\x00", b"").decode("latin-1")
            record = AnimationDataRecord(
                cof_name=name,
                frames_per_direction=reader.get_int32(),
                animation_speed=reader.get_int32(),
                flags=reader.read_bytes(_FLAG_COUNT),
            )
            records.setdefault(name.lower(), []).append(record)
    return records


def load_animation_data(file_provider: FileProvider) -> dict[str, list[AnimationDataRecord]]:
    """Load and parse the animation data table from ``file_provider``."""
    records = parse_animation_data(file_provider.load_file(resource_paths.ANIMATION_DATA))
    logger.info("Loaded %d animation data records", len(records))
    return records