"""ADPCM decompression of archived wave data."""

from __future__ import annotations

import struct

from d2shared.stream_reader import StreamReader

# Standard IMA ADPCM step sizes.
_STEP_SIZES = (
    7, 8, 9, 10, 11, 12, 13, 14, 16, 17, 19, 21, 23, 25, 28, 31,
    34, 37, 41, 45, 50, 55, 60, 66, 73, 80, 88, 97, 107, 118, 130, 143,
    157, 173, 190, 209, 230, 253, 279, 307, 337, 371, 408, 449, 494, 544,
    598, 658, 724, 796, 876, 963, 1060, 1166, 1282, 1411, 1552, 1707,
    1878, 2066, 2272, 2499, 2749, 3024, 3327, 3660, 4026, 4428, 4871,
    5358, 5894, 6484, 7132, 7845, 8630, 9493, 10442, 11487, 12635, 13899,
    15289, 16818, 18500, 20350, 22385, 24623, 27086, 29794, 32767,
)

# Step-index change by the low five bits of a sample byte: every even
# code steps down by one, odd codes step up by these amounts.
_ODD_ADJUSTMENTS = (0, 4, 2, 6, 1, 5, 3, 7, 1, 5, 3, 7, 2, 4, 6, 8)
_INDEX_ADJUST = tuple(
    adjustment for odd in _ODD_ADJUSTMENTS for adjustment in (-1, odd)
)

_INITIAL_STEP_INDEX = 44
_MAX_STEP_INDEX = len(_STEP_SIZES) - 1
_SAMPLE_MIN = -32768
_SAMPLE_MAX = 32767


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


def _sample_delta(step: int, code: int, shift: int) -> int:
    """Sum the step fractions selected by the low six bits of ``code``."""
    return (step >> shift) + sum(step >> bit for bit in range(6) if code >> bit & 1)


def wav_decompress(data: bytes, channel_count: int) -> bytes:
    """Decode ADPCM ``data`` into little-endian signed 16-bit PCM samples."""
    if channel_count not in (1, 2):
        raise ValueError(f"unsupported channel count {channel_count}")

    reader = StreamReader(data)
    reader.get_byte()
    shift = reader.get_byte()

    step_index = [_INITIAL_STEP_INDEX] * 2
    predicted = [reader.get_int16() for _ in range(channel_count)]
    samples = list(predicted)

    stereo = channel_count == 2
    channel = channel_count - 1

    def switch_channel() -> None:
        nonlocal channel
        if stereo:
            channel = 1 - channel

    while not reader.eof():
        code = reader.get_byte()
        switch_channel()

        if code & 0x80:
            command = code & 0x7F
            if command == 0:
                step_index[channel] = max(step_index[channel] - 1, 0)
                samples.append(predicted[channel])
            elif command == 1:
                step_index[channel] = min(step_index[channel] + 8, _MAX_STEP_INDEX)
                switch_channel()
            elif command > 2:
                step_index[channel] = max(step_index[channel] - 8, 0)
                switch_channel()
            continue

        delta = _sample_delta(_STEP_SIZES[step_index[channel]], code, shift)
        if code & 0x40:
            delta = -delta
        sample = _clamp(predicted[channel] + delta, _SAMPLE_MIN, _SAMPLE_MAX)
        predicted[channel] = sample
        samples.append(sample)

        step_index[channel] = _clamp(
            step_index[channel] + _INDEX_ADJUST[code & 0x1F], 0, _MAX_STEP_INDEX
        )

    return struct.pack(f"<{len(samples)}h", *samples)