from __future__ import annotations

from .base import BaseOscillator, validate_oscillator_args


class SawtoothOscillator(BaseOscillator):
    """Rising ramp from ``-amplitude`` towards ``+amplitude``.

    The phase grows by ``frequency / sample_rate`` per sample. Once the ramp
    would pass ``+amplitude`` the oscillator emits exactly ``-amplitude`` for
    that tick and restarts the phase at one increment, not zero.
    """

    def __init__(self, frequency: float, amplitude: float, sample_rate_hz: int) -> None:
        validate_oscillator_args(frequency, sample_rate_hz)
        self.amplitude = amplitude
        self.phase = 0.0
        self.increment = frequency / sample_rate_hz
        self.samples_emitted = 0

    def sample(self) -> float:
        value = -self.amplitude + self.phase

        if value > self.amplitude:
            value = -self.amplitude
            self.phase = self.increment
        else:
            self.phase += self.increment

        self.samples_emitted += 1

        return value

    def __repr__(self) -> str:
        return (
            f"SawtoothOscillator(amplitude={self.amplitude!r}, phase={self.phase!r}, "
            f"increment={self.increment!r}, samples_emitted={self.samples_emitted})"
        )
