from __future__ import annotations

import logging
import os
from pathlib import Path

from .checked_math import SUPPORTED_WORD_BITS
from .paths import actual_path
from .sizearg_config import SizeargConfig
from .suffix import GRAMMARS

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigLoader:
    def __init__(self, project_root: Path) -> None:
        self._project_root = project_root

    @property
    def default_env_file(self) -> Path:
        return self._project_root / "config" / "sizearg.env"

    def load(self, env_path: str | None = None) -> SizeargConfig:
        if env_path:
            env_file = Path(env_path).expanduser()
            if not env_file.is_file():
                raise SystemExit(f"Missing env file: {env_file}")
        elif self.default_env_file.is_file():
            env_file = self.default_env_file
        else:
            logger.debug("No env file at %s, using defaults", self.default_env_file)
            return SizeargConfig(project_root=self._project_root, env_file=None)

        env_values = self._parse_env_file(env_file)

        working_dir = None
        if env_values.get("WORKING_DIR"):
            working_dir = self._resolve_path(env_values["WORKING_DIR"], env_file)

        return SizeargConfig(
            project_root=self._project_root,
            env_file=env_file,
            default_grammar=self._grammar(env_values.get("DEFAULT_GRAMMAR", "modern")),
            word_bits=self._word_bits(env_values.get("WORD_BITS", "64")),
            log_level=self._log_level(env_values.get("LOG_LEVEL", "WARNING")),
            working_dir=working_dir,
        )

    def _parse_env_file(self, env_file: Path) -> dict[str, str]:
        values: dict[str, str] = {}
        for raw_line in env_file.read_text(encoding="utf-8").splitlines():
            line = raw_line.strip()
            if not line or line.startswith("#"):
                continue
            if "=" not in line:
                continue
            key, value = line.split("=", 1)
            cleaned = value.strip().strip('"').strip("'")
            values[key.strip()] = os.path.expandvars(cleaned)
        return values

    def _grammar(self, value: str) -> str:
        name = value.strip().lower()
        if name not in GRAMMARS:
            choices = ", ".join(sorted(GRAMMARS))
            raise SystemExit(f"Invalid DEFAULT_GRAMMAR: {value} (expected one of: {choices})")
        return name

    def _word_bits(self, value: str) -> int:
        try:
            bits = int(value)
        except ValueError:
            bits = -1
        if bits not in SUPPORTED_WORD_BITS:
            choices = ", ".join(str(item) for item in SUPPORTED_WORD_BITS)
            raise SystemExit(f"Invalid WORD_BITS: {value} (expected one of: {choices})")
        return bits

    def _log_level(self, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise SystemExit(f"Invalid LOG_LEVEL: {value}")
        return level

    def _resolve_path(self, value: str, env_file: Path) -> Path:
        return actual_path(env_file.parent, Path(value).expanduser())
