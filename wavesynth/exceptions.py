"""Exceptions raised by the waveform encoder."""


class WavesynthError(Exception):
    """Base exception for wavesynth."""


class ContainerIOError(WavesynthError):
    """Writing, seeking or flushing the output sink failed.

    The underlying ``OSError`` is available as ``__cause__``. The output
    file may be left truncated on disk.
    """


class ContainerStateError(WavesynthError):
    """A container writer operation was called out of order."""
