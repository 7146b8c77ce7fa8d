from __future__ import annotations

from prometheus_client import Counter


WAVESYNTH_ENCODES_TOTAL = Counter(
    "wavesynth_encodes_total",
    "Total waveform encodes by waveform and status.",
    ["waveform", "status"],
)

WAVESYNTH_SAMPLES_WRITTEN_TOTAL = Counter(
    "wavesynth_samples_written_total",
    "Total number of PCM samples written to containers.",
    ["waveform"],
)

WAVESYNTH_BYTES_WRITTEN_TOTAL = Counter(
    "wavesynth_bytes_written_total",
    "Total number of container bytes written, header included.",
    ["waveform"],
)


def record_encode_started(waveform: str) -> None:
    WAVESYNTH_ENCODES_TOTAL.labels(waveform=waveform, status="started").inc()


def record_encode_completed(waveform: str, *, num_samples: int, num_bytes: int) -> None:
    WAVESYNTH_ENCODES_TOTAL.labels(waveform=waveform, status="completed").inc()
    WAVESYNTH_SAMPLES_WRITTEN_TOTAL.labels(waveform=waveform).inc(num_samples)
    WAVESYNTH_BYTES_WRITTEN_TOTAL.labels(waveform=waveform).inc(num_bytes)


def record_encode_failed(waveform: str) -> None:
    WAVESYNTH_ENCODES_TOTAL.labels(waveform=waveform, status="failed").inc()
