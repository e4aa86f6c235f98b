from __future__ import annotations

from pathlib import Path

import pytest

from sizearg.core.sizearg_config import SizeargConfig
from sizearg.core.suffix import MODERN, Decomposition, SuffixGrammar


class StubParser:
    def __init__(
        self,
        results: dict[str, int | None],
        grammar: SuffixGrammar = MODERN,
    ) -> None:
        self._results = results
        self._grammar = grammar
        self.parse_calls: list[str] = []

    @property
    def grammar(self) -> SuffixGrammar:
        return self._grammar

    def decompose(self, value: str) -> Decomposition:
        return Decomposition(value.rstrip("KMB"), 1024, 1)

    def parse(self, value: str) -> int | None:
        self.parse_calls.append(value)
        return self._results.get(value)


@pytest.fixture
def stub_parser() -> StubParser:
    return StubParser({"4K": 4096, "1b": 512, "bogus": None})


@pytest.fixture
def sample_config(tmp_path: Path) -> SizeargConfig:
    working_dir = tmp_path / "work"
    working_dir.mkdir(parents=True, exist_ok=True)
    return SizeargConfig(
        project_root=tmp_path / "project",
        env_file=tmp_path / "sizearg.env",
        default_grammar="modern",
        word_bits=64,
        log_level="WARNING",
        working_dir=working_dir,
    )
