from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import NamedTuple

BLOCK_MARKER = "b"
SI_MARKER = "B"

BLOCK_BASE = 512
DECIMAL_BASE = 1000
BINARY_BASE = 1024


@dataclass(frozen=True)
class SuffixGrammar:
    name: str
    magnitudes: tuple[str, ...]
    legacy: bool

    def power_of(self, char: str) -> int | None:
        try:
            return self.magnitudes.index(char) + 1
        except ValueError:
            return None


MODERN = SuffixGrammar("modern", ("K", "M", "G", "T", "P", "E", "Z", "Y"), legacy=False)
# Obsolete option syntax such as -1k or -4m.
LEGACY = SuffixGrammar("legacy", ("k", "m"), legacy=True)

GRAMMARS = {grammar.name: grammar for grammar in (MODERN, LEGACY)}


class Decomposition(NamedTuple):
    prefix: str
    base: int
    power: int


class _ScanState(enum.Enum):
    SEEKING_MARKER = enum.auto()
    SEEKING_MAGNITUDE = enum.auto()
    DONE = enum.auto()


def decompose(value: str, grammar: SuffixGrammar = MODERN) -> Decomposition:
    """Split a size string into its numeric prefix and (base, power) multiplier.

    The scan works from the right and consumes at most two characters:

    * ``b`` while seeking a marker sets base 512. In the modern grammar the
      block marker is terminal. In the legacy grammar scanning continues and
      a following magnitude letter uses base 1000, so ``"1kb"`` is 1000.
    * ``B`` while seeking a marker (modern only) switches the magnitude that
      may follow it to base 1000.
    * A magnitude letter ends the scan with base 1000 or 1024 and power i+1.

    Anything else ends the scan without consuming. The prefix is returned
    as-is; validating it is left to the caller.
    """
    end = len(value)
    base = 1
    power = 1
    decimal = False
    state = _ScanState.SEEKING_MARKER

    while state is not _ScanState.DONE and end > 0:
        char = value[end - 1]

        if state is _ScanState.SEEKING_MARKER and char == BLOCK_MARKER:
            base = BLOCK_BASE
            end -= 1
            if grammar.legacy:
                decimal = True
                state = _ScanState.SEEKING_MAGNITUDE
            else:
                state = _ScanState.DONE
            continue

        if state is _ScanState.SEEKING_MARKER and char == SI_MARKER and not grammar.legacy:
            decimal = True
            end -= 1
            state = _ScanState.SEEKING_MAGNITUDE
            continue

        magnitude = grammar.power_of(char)
        if magnitude is not None:
            base = DECIMAL_BASE if decimal else BINARY_BASE
            power = magnitude
            end -= 1
        state = _ScanState.DONE

    return Decomposition(value[:end], base, power)
