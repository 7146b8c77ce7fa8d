from __future__ import annotations

from pathlib import Path
from typing import BinaryIO, Optional

from wavesynth import metrics as app_metrics
from wavesynth.config import settings
from wavesynth.exceptions import ContainerIOError
from wavesynth.logging_utils import get_logger
from wavesynth.models import EncodeResult, PCMFormat, Waveform
from wavesynth.oscillators import BaseOscillator, OscillatorRegistry
from wavesynth.quantize import quantize
from .container_writer import HEADER_SIZE, MAX_CHUNK_SIZE, ContainerWriter


logger = get_logger(__name__)


def sample_count(sample_rate_hz: int, duration_seconds: float) -> int:
    """Number of samples rendered for ``duration_seconds`` of audio.

    The render loop walks the half-open range ``[1, floor(sr * d) + 1)``,
    which yields ``floor(sr * d)`` samples. Kept as-is so output lengths
    match earlier files byte for byte.
    """
    return len(range(1, int(sample_rate_hz * duration_seconds) + 1))


def check_duration(duration_seconds: float, pcm_format: PCMFormat) -> int:
    """Validate ``duration_seconds`` and return the sample count it yields.

    The RIFF size field is 32 bits wide, so durations whose container would
    not fit are rejected before anything is written.
    """
    if duration_seconds <= 0:
        raise ValueError("duration_seconds must be positive")

    num_samples = sample_count(pcm_format.sample_rate_hz, duration_seconds)
    riff_size = num_samples * pcm_format.block_align + HEADER_SIZE - 8
    if riff_size > MAX_CHUNK_SIZE:
        raise ValueError(
            f"duration {duration_seconds}s needs {riff_size} bytes; "
            f"a WAV file holds at most {MAX_CHUNK_SIZE}"
        )
    return num_samples


def default_pcm_format() -> PCMFormat:
    return PCMFormat(sample_rate_hz=settings.sample_rate_hz, bit_depth=settings.bit_depth)


def _waveform_label(oscillator: BaseOscillator) -> str:
    name = type(oscillator).__name__.lower()
    return name[: -len("oscillator")] if name.endswith("oscillator") else name


class EncoderService:
    """Renders oscillator output into a PCM container."""

    def __init__(
        self,
        *,
        oscillator_registry: OscillatorRegistry,
        pcm_format: Optional[PCMFormat] = None,
    ) -> None:
        self._oscillators = oscillator_registry
        self._format = pcm_format or default_pcm_format()

    def encode(
        self,
        oscillator: BaseOscillator,
        duration_seconds: float,
        sink: BinaryIO,
        pcm_format: Optional[PCMFormat] = None,
    ) -> EncodeResult:
        """Write a complete container for ``duration_seconds`` of ``oscillator``.

        Samples are drawn strictly in order, one per frame. Any I/O failure
        surfaces as ``ContainerIOError`` and leaves ``sink`` partially
        written.
        """
        fmt = pcm_format or self._format
        num_samples = check_duration(duration_seconds, fmt)
        label = _waveform_label(oscillator)

        logger.info(
            "[START] encode %s duration=%.3fs samples=%d sr=%dHz bits=%d",
            label,
            duration_seconds,
            num_samples,
            fmt.sample_rate_hz,
            fmt.bit_depth,
        )
        app_metrics.record_encode_started(label)

        writer = ContainerWriter(sink, fmt)
        try:
            writer.write_header()
            for _ in range(num_samples):
                writer.write_sample(quantize(oscillator.sample(), fmt.bit_depth))
            writer.finalize()
        except Exception:
            app_metrics.record_encode_failed(label)
            raise

        result = EncodeResult(
            num_samples=writer.num_samples,
            data_size=writer.data_size,
            riff_size=writer.riff_size,
        )
        app_metrics.record_encode_completed(
            label, num_samples=result.num_samples, num_bytes=result.file_size
        )
        logger.info(
            "[DONE] encode %s data_size=%d riff_size=%d",
            label,
            result.data_size,
            result.riff_size,
        )
        return result

    def encode_to_path(
        self,
        path: str | Path,
        *,
        waveform: Waveform | str,
        frequency: float,
        amplitude: float,
        duration_seconds: float,
        pcm_format: Optional[PCMFormat] = None,
    ) -> EncodeResult:
        """Build an oscillator and encode it into a new file at ``path``.

        The file handle is closed on every exit path. On failure the file
        is left on disk as-is; callers wanting atomic output should encode
        to a temporary path and rename.
        """
        fmt = pcm_format or self._format
        # Reject bad input before open() truncates an existing file.
        check_duration(duration_seconds, fmt)
        oscillator = self._oscillators.create(
            waveform,
            frequency=frequency,
            amplitude=amplitude,
            sample_rate_hz=fmt.sample_rate_hz,
        )

        out_path = Path(path)
        try:
            with open(out_path, "wb") as sink:
                result = self.encode(oscillator, duration_seconds, sink, fmt)
        except ContainerIOError:
            raise
        except OSError as exc:
            # open()/close() failures, outside the writer's own handling.
            app_metrics.record_encode_failed(_waveform_label(oscillator))
            raise ContainerIOError(f"could not write {out_path}: {exc}") from exc

        result.path = out_path
        return result
