from __future__ import annotations

import sys

from ..core.protocols import SizeParserProtocol
from .base import EXIT_FAILURE, EXIT_SUCCESS, Command


class ParseCommand(Command):
    def __init__(self, parser: SizeParserProtocol, values: list[str]) -> None:
        self._parser = parser
        self._values = values

    def run(self) -> int:
        exit_code = EXIT_SUCCESS
        for value in self._values:
            result = self._parser.parse(value)
            if result is None:
                print(f"Invalid size format: {value}", file=sys.stderr)
                exit_code = EXIT_FAILURE
                continue
            print(result)
        return exit_code
