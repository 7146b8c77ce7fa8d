from __future__ import annotations

from functools import lru_cache

from wavesynth.oscillators import OscillatorRegistry
from wavesynth.services import EncoderService
from wavesynth.services.encoder_service import default_pcm_format


@lru_cache(maxsize=1)
def get_oscillator_registry() -> OscillatorRegistry:
    return OscillatorRegistry()


@lru_cache(maxsize=1)
def get_encoder_service() -> EncoderService:
    """Return the process-wide EncoderService.

    Sample rate and bit depth come from AppConfig so they can be tuned via
    environment variables.
    """
    return EncoderService(
        oscillator_registry=get_oscillator_registry(),
        pcm_format=default_pcm_format(),
    )
