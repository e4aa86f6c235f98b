from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .checked_math import word_max


@dataclass
class SizeargConfig:
    project_root: Path
    env_file: Path | None
    default_grammar: str = "modern"
    word_bits: int = 64
    log_level: str = "WARNING"
    working_dir: Path | None = None

    @property
    def max_value(self) -> int:
        return word_max(self.word_bits)
