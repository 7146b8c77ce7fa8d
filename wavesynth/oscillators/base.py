from __future__ import annotations

from typing import Iterator, Protocol


class BaseOscillator(Protocol):
    """Interface for stateful periodic samplers.

    Each call to ``sample()`` returns the next amplitude value and advances
    the phase. The sequence is infinite and cannot be rewound; build a new
    oscillator to start over. Concrete oscillators subclass this protocol
    to inherit the iterator methods.
    """

    amplitude: float
    phase: float
    increment: float
    samples_emitted: int

    def sample(self) -> float:
        """Return the next sample in ``[-amplitude, amplitude]``."""
        ...

    def __iter__(self) -> Iterator[float]:
        return self

    def __next__(self) -> float:
        return self.sample()


def validate_oscillator_args(frequency: float, sample_rate_hz: int) -> None:
    if frequency <= 0:
        raise ValueError("frequency must be positive")
    if sample_rate_hz <= 0:
        raise ValueError("sample_rate_hz must be positive")
