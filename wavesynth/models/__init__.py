from .domain import EncodeResult
from .pcm_format import PCMFormat, SUPPORTED_BIT_DEPTHS
from .waveform import Waveform

__all__ = [
    "EncodeResult",
    "PCMFormat",
    "SUPPORTED_BIT_DEPTHS",
    "Waveform",
]
