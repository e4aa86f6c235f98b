from __future__ import annotations

from ..core.protocols import SizeParserProtocol
from .base import EXIT_FAILURE, EXIT_SUCCESS, Command


class ExplainCommand(Command):
    def __init__(self, parser: SizeParserProtocol, values: list[str]) -> None:
        self._parser = parser
        self._values = values

    def run(self) -> int:
        exit_code = EXIT_SUCCESS
        print(f"Grammar: {self._parser.grammar.name}")
        for value in self._values:
            prefix, base, power = self._parser.decompose(value)
            result = self._parser.parse(value)
            if result is None:
                exit_code = EXIT_FAILURE
            shown = "invalid" if result is None else str(result)
            print(f"{value}: prefix={prefix!r} base={base} power={power} bytes={shown}")
        return exit_code
