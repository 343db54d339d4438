from __future__ import annotations

"""Keystroke and buffer-character classification.

`classify()` turns a raw keystroke symbol into a `Keystroke` once, so the
transition function can match on `Keystroke.kind` instead of re-testing
table membership at every branch.
"""

from dataclasses import dataclass

from hangul_ime.domain.enums import JamoKind
from hangul_ime.domain.jamo_data import (
    DOUBLE_CONSONANTS,
    FINAL_INDEX,
    INITIAL_INDEX,
    MEDIAL_INDEX,
    NO_FINAL,
    SYLLABLE_BASE,
    SYLLABLE_LAST,
)


@dataclass(frozen=True)
class Keystroke:
    kind: JamoKind
    symbol: str


def is_initial(symbol: str) -> bool:
    return symbol in INITIAL_INDEX


def is_medial(symbol: str) -> bool:
    return symbol in MEDIAL_INDEX


def is_final(symbol: str) -> bool:
    return symbol != NO_FINAL and symbol in FINAL_INDEX


def can_stand_as_final(consonant: str) -> bool:
    """True if `consonant` may close a syllable as typed.

    ㄲ and ㅆ are in the final table, but a typed geminate always opens a new
    block instead.
    """
    return is_final(consonant) and consonant not in DOUBLE_CONSONANTS


def is_precomposed_syllable(char: str) -> bool:
    if not char or len(char) != 1:
        return False
    return SYLLABLE_BASE <= ord(char) <= SYLLABLE_LAST


def classify(symbol: str) -> Keystroke:
    """Return the tagged keystroke for a raw input symbol."""
    if is_medial(symbol):
        return Keystroke(JamoKind.MEDIAL, symbol)
    if is_initial(symbol):
        return Keystroke(JamoKind.INITIAL, symbol)
    return Keystroke(JamoKind.OTHER, symbol)
