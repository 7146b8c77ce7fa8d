from __future__ import annotations

import math
from itertools import islice

import pytest

from wavesynth.models import Waveform
from wavesynth.oscillators import OscillatorRegistry, SawtoothOscillator, SineOscillator


SAMPLE_RATE = 44100


def test_sine_increment_matches_frequency() -> None:
    osc = SineOscillator(440.0, 0.5, SAMPLE_RATE)
    assert osc.increment == (2.0 * math.pi * 440.0) / SAMPLE_RATE
    assert osc.phase == 0.0
    assert osc.amplitude == 0.5


def test_sine_first_sample_is_zero_and_phase_advances() -> None:
    osc = SineOscillator(440.0, 0.5, SAMPLE_RATE)

    assert osc.sample() == 0.0
    assert osc.phase == osc.increment

    second = osc.sample()
    assert second == pytest.approx(0.5 * math.sin(osc.increment))
    assert osc.samples_emitted == 2


def test_sine_is_deterministic() -> None:
    a = SineOscillator(440.0, 0.5, SAMPLE_RATE)
    b = SineOscillator(440.0, 0.5, SAMPLE_RATE)

    assert [a.sample() for _ in range(1000)] == [b.sample() for _ in range(1000)]


def test_sine_stays_within_amplitude() -> None:
    osc = SineOscillator(1000.0, 0.8, SAMPLE_RATE)
    values = list(islice(osc, 5000))

    assert all(-0.8 <= v <= 0.8 for v in values)
    # Peaks of a 1 kHz tone should get close to the amplitude.
    assert max(values) == pytest.approx(0.8, abs=1e-3)


def test_sawtooth_increment_and_ramp() -> None:
    osc = SawtoothOscillator(880.0, 0.5, SAMPLE_RATE)
    inc = 880.0 / SAMPLE_RATE
    assert osc.increment == inc

    assert osc.sample() == -0.5
    assert osc.sample() == pytest.approx(-0.5 + inc)
    assert osc.sample() == pytest.approx(-0.5 + 2 * inc)


def test_sawtooth_values_in_range_and_wrap_emits_negative_amplitude() -> None:
    amplitude = 0.5
    osc = SawtoothOscillator(880.0, amplitude, SAMPLE_RATE)

    values = []
    wrap_ticks = []
    for i in range(20000):
        before = -amplitude + osc.phase
        values.append(osc.sample())
        if before > amplitude:
            wrap_ticks.append(i)

    assert wrap_ticks, "expected the ramp to wrap at least once"
    assert all(-amplitude <= v <= amplitude for v in values)
    for i in wrap_ticks:
        assert values[i] == -amplitude


def test_sawtooth_wrap_keeps_one_increment_of_phase() -> None:
    osc = SawtoothOscillator(11025.0, 0.5, SAMPLE_RATE)
    # increment = 0.25: phases 0, .25, .5, .75, 1.0, 1.25 -> wrap on the sixth call
    emitted = [osc.sample() for _ in range(6)]

    assert emitted == [-0.5, -0.25, 0.0, 0.25, 0.5, -0.5]
    assert osc.phase == 0.25
    assert osc.sample() == -0.25


def test_oscillators_iterate_lazily() -> None:
    osc = SawtoothOscillator(440.0, 0.5, SAMPLE_RATE)
    assert iter(osc) is osc

    first = list(islice(osc, 10))
    assert len(first) == 10
    assert osc.samples_emitted == 10
    assert next(osc) == pytest.approx(-0.5 + 10 * osc.increment)


@pytest.mark.parametrize("cls", [SineOscillator, SawtoothOscillator])
def test_oscillators_reject_non_positive_frequency(cls: type) -> None:
    with pytest.raises(ValueError):
        cls(0.0, 0.5, SAMPLE_RATE)
    with pytest.raises(ValueError):
        cls(-440.0, 0.5, SAMPLE_RATE)
    with pytest.raises(ValueError):
        cls(440.0, 0.5, 0)


def test_registry_creates_each_waveform() -> None:
    registry = OscillatorRegistry()

    sine = registry.create(Waveform.SINE, frequency=440.0, amplitude=0.5, sample_rate_hz=SAMPLE_RATE)
    saw = registry.create("sawtooth", frequency=880.0, amplitude=0.5, sample_rate_hz=SAMPLE_RATE)

    assert isinstance(sine, SineOscillator)
    assert isinstance(saw, SawtoothOscillator)
    assert set(registry.list_waveforms()) == {Waveform.SINE, Waveform.SAWTOOTH}


def test_registry_rejects_unknown_waveform() -> None:
    registry = OscillatorRegistry()

    with pytest.raises(ValueError) as exc_info:
        registry.create("square", frequency=440.0, amplitude=0.5, sample_rate_hz=SAMPLE_RATE)

    assert "Unknown waveform" in str(exc_info.value)
