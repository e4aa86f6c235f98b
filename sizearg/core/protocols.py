from __future__ import annotations

from typing import Protocol

from .suffix import Decomposition, SuffixGrammar


class SizeParserProtocol(Protocol):
    @property
    def grammar(self) -> SuffixGrammar:
        ...

    def decompose(self, value: str) -> Decomposition:
        ...

    def parse(self, value: str) -> int | None:
        ...
