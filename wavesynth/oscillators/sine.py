from __future__ import annotations

import math

from .base import BaseOscillator, validate_oscillator_args


class SineOscillator(BaseOscillator):
    """Sine wave driven by an angle accumulator in radians.

    The phase is never wrapped back into ``[0, 2π)``. ``math.sin`` stays
    well defined for any realistic run, though precision slowly degrades as
    the accumulator grows.
    """

    def __init__(self, frequency: float, amplitude: float, sample_rate_hz: int) -> None:
        validate_oscillator_args(frequency, sample_rate_hz)
        self.amplitude = amplitude
        self.phase = 0.0
        self.increment = (2.0 * math.pi * frequency) / sample_rate_hz
        self.samples_emitted = 0

    def sample(self) -> float:
        value = self.amplitude * math.sin(self.phase)

        self.phase += self.increment
        self.samples_emitted += 1

        return value

    def __repr__(self) -> str:
        return (
            f"SineOscillator(amplitude={self.amplitude!r}, phase={self.phase!r}, "
            f"increment={self.increment!r}, samples_emitted={self.samples_emitted})"
        )
