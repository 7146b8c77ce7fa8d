from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass
class AppConfig:
    """Synthesis configuration loaded from environment.

    The format constants (sample rate, bit depth) live here so that every
    encode in the process agrees on them. The remaining knobs are the
    defaults used by the CLI when an argument is omitted.
    """

    sample_rate_hz: int = int(os.getenv("WAVESYNTH_SAMPLE_RATE_HZ", "44100"))
    bit_depth: int = int(os.getenv("WAVESYNTH_BIT_DEPTH", "16"))

    default_waveform: str = os.getenv("WAVESYNTH_DEFAULT_WAVEFORM", "sawtooth")
    default_frequency_hz: float = float(
        os.getenv("WAVESYNTH_DEFAULT_FREQUENCY_HZ", "880.0")
    )
    default_amplitude: float = float(os.getenv("WAVESYNTH_DEFAULT_AMPLITUDE", "0.5"))
    default_duration_seconds: float = float(
        os.getenv("WAVESYNTH_DEFAULT_DURATION_SECONDS", "2.0")
    )
    output_path: str = os.getenv("WAVESYNTH_OUTPUT_PATH", "waveform.wav")

    log_level: str = os.getenv("WAVESYNTH_LOG_LEVEL", "INFO")


settings = AppConfig()
