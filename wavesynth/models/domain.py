from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class EncodeResult:
    """Summary of a finished encode."""

    num_samples: int
    data_size: int
    riff_size: int
    path: Optional[Path] = None

    @property
    def file_size(self) -> int:
        # RIFF size excludes the leading tag and size field.
        return self.riff_size + 8
