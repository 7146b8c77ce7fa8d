from .container_writer import ContainerWriter
from .encoder_service import EncoderService, sample_count

__all__ = [
    "ContainerWriter",
    "EncoderService",
    "sample_count",
]
