#!/usr/bin/env python3

from __future__ import annotations

import argparse
import dataclasses
import logging
from pathlib import Path

from .commands.factory import CommandFactory
from .core.checked_math import SUPPORTED_WORD_BITS
from .core.suffix import GRAMMARS

logger = logging.getLogger(__name__)


class CliApplication:
    def __init__(self, project_root: Path) -> None:
        self._factory = CommandFactory(project_root)

    def build_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog="sizearg",
            description="Convert size arguments such as 4K, 10MB or 1b into byte counts",
        )
        parser.add_argument(
            "action",
            choices=["parse", "explain"],
        )
        parser.add_argument(
            "values",
            nargs="*",
            help="Size strings to convert",
        )
        parser.add_argument(
            "--env-file",
            default=None,
            help="Optional path to env file (default: config/sizearg.env)",
        )
        parser.add_argument(
            "--grammar",
            choices=sorted(GRAMMARS),
            default=None,
            help="Suffix grammar (default: DEFAULT_GRAMMAR from the env file, else modern)",
        )
        parser.add_argument(
            "--word-bits",
            type=int,
            choices=SUPPORTED_WORD_BITS,
            default=None,
            help="Width of the unsigned result in bits (default: WORD_BITS, else 64)",
        )
        parser.add_argument(
            "--from-file",
            dest="value_files",
            action="append",
            default=[],
            metavar="PATH",
            help="Read additional size strings from a file, one per line",
        )
        parser.add_argument(
            "-v",
            "--verbose",
            action="store_true",
            help="Log parse diagnostics",
        )
        return parser

    def run(self, argv: list[str] | None = None) -> int:
        args = self.build_parser().parse_args(argv)
        config = self._factory.load_config(args.env_file)
        if args.word_bits is not None:
            config = dataclasses.replace(config, word_bits=args.word_bits)
        configure_logging("DEBUG" if args.verbose else config.log_level)
        logger.debug(
            "Config from %s (project root %s)",
            config.env_file or "defaults",
            config.project_root,
        )

        command = self._factory.create(
            args.action,
            config,
            values=args.values,
            value_files=args.value_files,
            grammar=args.grammar,
        )
        return command.run()


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )


def main() -> int:
    project_root = Path(__file__).resolve().parent.parent
    app = CliApplication(project_root)
    return app.run()


if __name__ == "__main__":
    raise SystemExit(main())
