from __future__ import annotations

import math


def max_amplitude(bit_depth: int) -> int:
    return 2 ** (bit_depth - 1) - 1


def wrap_to_bit_depth(value: int, bit_depth: int) -> int:
    """Fold ``value`` into the signed ``bit_depth`` range two's-complement style."""
    span = 1 << bit_depth
    half = span >> 1
    return ((value + half) % span) - half


def quantize(sample: float, bit_depth: int) -> int:
    """Scale ``sample`` to a signed ``bit_depth`` integer.

    Truncates toward zero; out-of-range values wrap instead of saturating.
    NaN raises ``ValueError`` and infinities raise ``OverflowError``.
    """
    scaled = math.trunc(sample * max_amplitude(bit_depth))
    return wrap_to_bit_depth(scaled, bit_depth)


def pack_sample(value: int, bit_depth: int) -> bytes:
    return value.to_bytes(bit_depth // 8, "little", signed=True)
