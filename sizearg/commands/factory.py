from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path

from ..core.config_loader import ConfigLoader
from ..core.paths import actual_path
from ..core.protocols import SizeParserProtocol
from ..core.size_parser import SizeParser, grammar_by_name
from ..core.sizearg_config import SizeargConfig
from ..core.suffix import SuffixGrammar
from ..core.value_reader import ValueReader
from .base import Command
from .explain_command import ExplainCommand
from .parse_command import ParseCommand


class CommandFactory:
    def __init__(
        self,
        project_root: Path,
        *,
        config_loader: ConfigLoader | None = None,
        value_reader: ValueReader | None = None,
        parser_factory: Callable[[SuffixGrammar, int], SizeParserProtocol] | None = None,
    ) -> None:
        self._config_loader = config_loader or ConfigLoader(project_root)
        self._value_reader = value_reader or ValueReader()
        self._parser_factory = parser_factory or SizeParser

    def load_config(self, env_file: str | None) -> SizeargConfig:
        return self._config_loader.load(env_file)

    def create(
        self,
        action: str,
        config: SizeargConfig,
        *,
        values: Sequence[str] = (),
        value_files: Sequence[str] = (),
        grammar: str | None = None,
    ) -> Command:
        size_grammar = grammar_by_name(grammar or config.default_grammar)
        parser = self._parser_factory(size_grammar, config.max_value)

        collected = list(values)
        for value_file in value_files:
            collected.extend(self._value_reader.read(actual_path(config.working_dir, value_file)))
        if not collected:
            raise SystemExit("No size values given")

        if action == "parse":
            return ParseCommand(parser, collected)
        if action == "explain":
            return ExplainCommand(parser, collected)
        raise SystemExit(f"Unsupported action: {action}")
