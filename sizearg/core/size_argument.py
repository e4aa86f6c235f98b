from __future__ import annotations

import argparse
from collections.abc import Callable

from .checked_math import USIZE_MAX
from .size_parser import SizeParser
from .suffix import MODERN, SuffixGrammar


def size_type(
    grammar: SuffixGrammar = MODERN,
    max_value: int = USIZE_MAX,
) -> Callable[[str], int]:
    """Build an argparse ``type=`` callable that converts size strings to bytes."""
    parser = SizeParser(grammar, max_value)

    def convert(value: str) -> int:
        result = parser.parse(value)
        if result is None:
            raise argparse.ArgumentTypeError(f"invalid size: {value!r}")
        return result

    convert.__name__ = f"{grammar.name}_size"
    return convert
