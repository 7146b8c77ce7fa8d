from __future__ import annotations

import pytest

from wavesynth.models import PCMFormat


def test_derived_fields_follow_rate_and_depth() -> None:
    fmt = PCMFormat()
    assert fmt.sample_rate_hz == 44100
    assert fmt.bit_depth == 16
    assert fmt.num_channels == 1
    assert fmt.block_align == 2
    assert fmt.byte_rate == 88200

    fmt32 = PCMFormat(sample_rate_hz=8000, bit_depth=32)
    assert fmt32.bytes_per_sample == 4
    assert fmt32.byte_rate == 32000


@pytest.mark.parametrize(
    "kwargs",
    [
        {"bit_depth": 8},
        {"bit_depth": 12},
        {"sample_rate_hz": 0},
        {"num_channels": 2},
    ],
)
def test_invalid_formats_are_rejected(kwargs: dict) -> None:
    with pytest.raises(ValueError):
        PCMFormat(**kwargs)
