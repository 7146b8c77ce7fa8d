"""Periodic waveform synthesis into uncompressed PCM WAV files."""

from .models import EncodeResult, PCMFormat, Waveform
from .oscillators import SawtoothOscillator, SineOscillator
from .quantize import quantize
from .services import ContainerWriter, EncoderService, sample_count

__all__ = [
    "ContainerWriter",
    "EncodeResult",
    "EncoderService",
    "PCMFormat",
    "SawtoothOscillator",
    "SineOscillator",
    "Waveform",
    "quantize",
    "sample_count",
]
