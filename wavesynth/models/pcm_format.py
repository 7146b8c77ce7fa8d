from __future__ import annotations

from dataclasses import dataclass


SUPPORTED_BIT_DEPTHS = (16, 24, 32)


@dataclass(frozen=True)
class PCMFormat:
    """Uncompressed mono PCM layout written into the ``fmt `` chunk.

    ``byte_rate`` and ``block_align`` are derived on access so they always
    agree with the sample rate and bit depth.
    """

    sample_rate_hz: int = 44100
    bit_depth: int = 16
    num_channels: int = 1

    def __post_init__(self) -> None:
        if self.sample_rate_hz <= 0:
            raise ValueError("sample_rate_hz must be positive")
        if self.bit_depth not in SUPPORTED_BIT_DEPTHS:
            raise ValueError(
                f"Unsupported bit depth {self.bit_depth}; "
                f"expected one of {SUPPORTED_BIT_DEPTHS}"
            )
        if self.num_channels != 1:
            raise ValueError("Only mono (num_channels=1) output is supported")

    @property
    def bytes_per_sample(self) -> int:
        return self.bit_depth // 8

    @property
    def block_align(self) -> int:
        return self.bytes_per_sample * self.num_channels

    @property
    def byte_rate(self) -> int:
        return self.sample_rate_hz * self.block_align
