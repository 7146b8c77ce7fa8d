from __future__ import annotations

from enum import Enum


class Waveform(str, Enum):
    SINE = "sine"
    SAWTOOTH = "sawtooth"
