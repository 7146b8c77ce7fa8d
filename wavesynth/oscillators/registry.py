from __future__ import annotations

from typing import Callable, Dict, Iterable

from wavesynth.models import Waveform
from .base import BaseOscillator
from .sawtooth import SawtoothOscillator
from .sine import SineOscillator


OscillatorFactory = Callable[[float, float, int], BaseOscillator]


class OscillatorRegistry:
    """Maps each supported waveform to the oscillator class that renders it."""

    def __init__(self) -> None:
        self._factories: Dict[Waveform, OscillatorFactory] = {
            Waveform.SINE: SineOscillator,
            Waveform.SAWTOOTH: SawtoothOscillator,
        }

    def create(
        self,
        waveform: Waveform | str,
        *,
        frequency: float,
        amplitude: float,
        sample_rate_hz: int,
    ) -> BaseOscillator:
        try:
            factory = self._factories[Waveform(waveform)]
        except (KeyError, ValueError):
            raise ValueError(f"Unknown waveform '{waveform}'")
        return factory(frequency, amplitude, sample_rate_hz)

    def list_waveforms(self) -> Iterable[Waveform]:
        return self._factories.keys()
