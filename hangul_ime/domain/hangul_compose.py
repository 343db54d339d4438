from __future__ import annotations

"""Hangul composition helpers (domain layer).

This module contains *no* Qt/UI dependencies.

Primary API:
- compose(initial, medial, final="")
- decompose(char)
"""

from typing import NamedTuple, Optional

from hangul_ime.domain.jamo_data import (
    CHOSEONG,
    FINAL_COUNT,
    FINAL_INDEX,
    INITIAL_INDEX,
    JONGSEONG,
    JUNGSEONG,
    MEDIAL_COUNT,
    MEDIAL_INDEX,
    NO_FINAL,
    SYLLABLE_BASE,
)
from hangul_ime.domain.classifier import is_precomposed_syllable

class SyllableParts(NamedTuple):
    initial: str
    medial: str
    final: str = NO_FINAL

def compose(initial: str, medial: str, final: str = NO_FINAL) -> str:
    """Compose a Hangul syllable from compatibility jamo.

    Args:
        initial: choseong (e.g., "ㄱ")
        medial: jungseong (e.g., "ㅏ")
        final: jongseong (e.g., "ㄴ") or "" for no final

    Returns:
        A composed Hangul syllable (e.g., "간") or "" if inputs are invalid.

    Notes:
        This uses the Unicode Hangul Syllables algorithm:
        SBase + (LIndex * VCount + VIndex) * TCount + TIndex
    """
    if not initial or not medial:
        return ""

    li = INITIAL_INDEX.get(initial)
    vi = MEDIAL_INDEX.get(medial)
    ti = FINAL_INDEX.get(final or NO_FINAL)

    if li is None or vi is None or ti is None:
        return ""

    return chr(SYLLABLE_BASE + (li * MEDIAL_COUNT + vi) * FINAL_COUNT + ti)

def decompose(char: str) -> Optional[SyllableParts]:
    """Split a precomposed syllable into its jamo, or None for anything else."""
    if not is_precomposed_syllable(char):
        return None
    offset = ord(char) - SYLLABLE_BASE
    li, rest = divmod(offset, MEDIAL_COUNT * FINAL_COUNT)
    vi, ti = divmod(rest, FINAL_COUNT)
    return SyllableParts(CHOSEONG[li], JUNGSEONG[vi], JONGSEONG[ti])
