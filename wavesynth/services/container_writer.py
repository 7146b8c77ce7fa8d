from __future__ import annotations

import struct
from contextlib import contextmanager
from typing import BinaryIO, Iterator, Optional

from wavesynth.exceptions import ContainerIOError, ContainerStateError
from wavesynth.logging_utils import get_logger
from wavesynth.models import PCMFormat
from wavesynth.quantize import pack_sample


logger = get_logger(__name__)


PLACEHOLDER = b"----"
FMT_CHUNK_SIZE = 16  # base PCM fields only
PCM_COMPRESSION_CODE = 1
HEADER_SIZE = 44
MAX_CHUNK_SIZE = 0xFFFFFFFF  # size fields are unsigned 32-bit


@contextmanager
def _io_errors(action: str) -> Iterator[None]:
    try:
        yield
    except OSError as exc:
        raise ContainerIOError(f"container {action} failed: {exc}") from exc


class ContainerWriter:
    """Writes a mono PCM RIFF/WAVE container into a seekable binary sink.

    The two size fields are unknown until every sample has been written, so
    the header goes out with ``----`` placeholders. ``finalize()`` seeks back
    and overwrites them:

    * offset 4: RIFF size, everything after the first 8 bytes
    * offset 40: data chunk size, ``data_end - data_start``

    Offsets are relative to the sink position when ``write_header()`` is
    called. The sink is not closed here; its owner is responsible for that.
    """

    def __init__(self, sink: BinaryIO, pcm_format: PCMFormat) -> None:
        self._sink = sink
        self._format = pcm_format
        self._header_start: Optional[int] = None
        self.data_start: Optional[int] = None
        self.data_end: Optional[int] = None
        self.num_samples = 0

    @property
    def finalized(self) -> bool:
        return self.data_end is not None

    def write_header(self) -> None:
        if self._header_start is not None:
            raise ContainerStateError("header already written")

        fmt = self._format
        with _io_errors("header write"):
            self._header_start = self._sink.tell()

            # RIFF chunk
            self._sink.write(b"RIFF")
            self._sink.write(PLACEHOLDER)
            self._sink.write(b"WAVE")

            # Format chunk
            self._sink.write(b"fmt ")
            self._sink.write(
                struct.pack(
                    "<IHHIIHH",
                    FMT_CHUNK_SIZE,
                    PCM_COMPRESSION_CODE,
                    fmt.num_channels,
                    fmt.sample_rate_hz,
                    fmt.byte_rate,
                    fmt.block_align,
                    fmt.bit_depth,
                )
            )

            # Data chunk
            self._sink.write(b"data")
            self._sink.write(PLACEHOLDER)

            self.data_start = self._sink.tell()

        logger.debug(
            "header written sr=%dHz bits=%d ch=%d data_start=%d",
            fmt.sample_rate_hz,
            fmt.bit_depth,
            fmt.num_channels,
            self.data_start,
        )

    def write_sample(self, value: int) -> None:
        """Append one quantized sample to the data chunk."""
        if self.data_start is None:
            raise ContainerStateError("write_header() must be called first")
        if self.finalized:
            raise ContainerStateError("container already finalized")

        data = pack_sample(value, self._format.bit_depth)
        with _io_errors("sample write"):
            self._sink.write(data)
        self.num_samples += 1

    def finalize(self) -> int:
        """Backpatch both size fields and return the data chunk size."""
        if self.data_start is None or self._header_start is None:
            raise ContainerStateError("write_header() must be called first")
        if self.finalized:
            raise ContainerStateError("container already finalized")

        with _io_errors("finalize"):
            data_end = self._sink.tell()
        data_size = data_end - self.data_start
        riff_size = data_end - self._header_start - 8
        if riff_size > MAX_CHUNK_SIZE:
            raise ContainerStateError(
                f"RIFF size {riff_size} exceeds the 32-bit limit {MAX_CHUNK_SIZE}"
            )

        with _io_errors("finalize"):
            self._sink.seek(self.data_start - 4)
            self._sink.write(struct.pack("<I", data_size))

            self._sink.seek(self._header_start + 4)
            self._sink.write(struct.pack("<I", riff_size))

            self._sink.seek(data_end)
            self._sink.flush()

        self.data_end = data_end
        logger.debug("container finalized data_size=%d riff_size=%d", data_size, riff_size)
        return data_size

    @property
    def data_size(self) -> int:
        if self.data_start is None or self.data_end is None:
            raise ContainerStateError("container not finalized")
        return self.data_end - self.data_start

    @property
    def riff_size(self) -> int:
        if self._header_start is None or self.data_end is None:
            raise ContainerStateError("container not finalized")
        return self.data_end - self._header_start - 8
