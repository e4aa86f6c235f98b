from __future__ import annotations

import logging
import re

from .checked_math import USIZE_MAX, checked_mul, checked_pow
from .suffix import GRAMMARS, LEGACY, MODERN, Decomposition, SuffixGrammar, decompose

logger = logging.getLogger(__name__)


def grammar_by_name(name: str) -> SuffixGrammar:
    try:
        return GRAMMARS[name.strip().lower()]
    except KeyError:
        choices = ", ".join(sorted(GRAMMARS))
        raise SystemExit(f"Unknown size grammar: {name} (expected one of: {choices})") from None


class SizeParser:
    _digits = re.compile(r"[0-9]+")

    def __init__(self, grammar: SuffixGrammar = MODERN, max_value: int = USIZE_MAX) -> None:
        self._grammar = grammar
        self._max_value = max_value

    @property
    def grammar(self) -> SuffixGrammar:
        return self._grammar

    @property
    def max_value(self) -> int:
        return self._max_value

    def decompose(self, value: str) -> Decomposition:
        return decompose(value, self._grammar)

    def parse(self, value: str) -> int | None:
        prefix, base, power = self.decompose(value)

        if not self._digits.fullmatch(prefix):
            logger.debug("Rejecting %r: numeric prefix %r is not a plain integer", value, prefix)
            return None
        # int() refuses very long digit strings, so bound the length first.
        digits = prefix.lstrip("0") or "0"
        if len(digits) > len(str(self._max_value)):
            logger.debug("Rejecting %r: %s exceeds %s", value, prefix, self._max_value)
            return None
        number = int(digits)
        if number > self._max_value:
            logger.debug("Rejecting %r: %s exceeds %s", value, prefix, self._max_value)
            return None

        multiplier = checked_pow(base, power, self._max_value)
        if multiplier is None:
            logger.debug("Rejecting %r: multiplier %s**%s overflows", value, base, power)
            return None

        result = checked_mul(number, multiplier, self._max_value)
        if result is None:
            logger.debug("Rejecting %r: %s * %s overflows", value, number, multiplier)
        return result

    def parse_bytes(self, value: str) -> int:
        result = self.parse(value)
        if result is None:
            raise SystemExit(f"Invalid size format: {value}")
        return result


def parse_num_with_suffix(value: str, *, max_value: int = USIZE_MAX) -> int | None:
    """Parse an integer with a suffix like "4K", "10MB" or "1b"."""
    return SizeParser(MODERN, max_value).parse(value)


def parse_obsolete_num(value: str, *, max_value: int = USIZE_MAX) -> int | None:
    """Parse an integer with one of the obsolete option suffixes (e.g. "1k" or "4m")."""
    return SizeParser(LEGACY, max_value).parse(value)
