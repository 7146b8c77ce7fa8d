from __future__ import annotations

import argparse

from .config import settings
from .container import get_encoder_service, get_oscillator_registry
from .exceptions import WavesynthError
from .logging_utils import get_logger
from .models import PCMFormat, SUPPORTED_BIT_DEPTHS


logger = get_logger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Render a periodic waveform to a WAV file")
    parser.add_argument(
        "--waveform",
        default=settings.default_waveform,
        choices=[w.value for w in get_oscillator_registry().list_waveforms()],
        help="Oscillator shape",
    )
    parser.add_argument(
        "--frequency", type=float, default=settings.default_frequency_hz, help="Frequency in Hz"
    )
    parser.add_argument(
        "--amplitude", type=float, default=settings.default_amplitude, help="Peak amplitude (0, 1]"
    )
    parser.add_argument(
        "--duration", type=float, default=settings.default_duration_seconds, help="Duration in seconds"
    )
    parser.add_argument("--out", default=settings.output_path, help="Output audio file path (.wav)")
    parser.add_argument(
        "--sample-rate", type=int, default=settings.sample_rate_hz, help="Sample rate in Hz"
    )
    parser.add_argument(
        "--bit-depth",
        type=int,
        default=settings.bit_depth,
        choices=list(SUPPORTED_BIT_DEPTHS),
        help="Bits per sample",
    )

    args = parser.parse_args(argv)

    try:
        pcm_format = PCMFormat(sample_rate_hz=args.sample_rate, bit_depth=args.bit_depth)
        result = get_encoder_service().encode_to_path(
            args.out,
            waveform=args.waveform,
            frequency=args.frequency,
            amplitude=args.amplitude,
            duration_seconds=args.duration,
            pcm_format=pcm_format,
        )
    except (ValueError, WavesynthError) as exc:
        logger.error("Encoding failed: %s", exc)
        return 1

    logger.info(
        "Wrote %s (%d bytes, %d samples, %s @ %.1fHz)",
        result.path,
        result.file_size,
        result.num_samples,
        args.waveform,
        args.frequency,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
