from .base import BaseOscillator
from .sawtooth import SawtoothOscillator
from .sine import SineOscillator
from .registry import OscillatorRegistry

__all__ = [
    "BaseOscillator",
    "SawtoothOscillator",
    "SineOscillator",
    "OscillatorRegistry",
]
