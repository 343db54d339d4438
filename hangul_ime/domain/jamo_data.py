from __future__ import annotations

"""Hangul jamo tables (domain layer).

This module contains *no* Qt/UI dependencies.

The ordering of the three tables is the Unicode Hangul Syllables ordering;
the composer's arithmetic depends on it, so these are not pedagogical lists.
All jamo are compatibility jamo (U+3131..U+3163), which is what a keyboard
emits and what a text field displays for a lone consonant or vowel.
"""

from typing import Final


# -----------------------------------------------------------------------------
# Unicode constants
# -----------------------------------------------------------------------------

SYLLABLE_BASE: Final[int] = 0xAC00
SYLLABLE_LAST: Final[int] = 0xD7A3


# -----------------------------------------------------------------------------
# Ordered alphabets
# -----------------------------------------------------------------------------

# Leading consonants (Choseong)
CHOSEONG: Final[tuple[str, ...]] = (
    "ㄱ", "ㄲ", "ㄴ", "ㄷ", "ㄸ", "ㄹ", "ㅁ", "ㅂ", "ㅃ",
    "ㅅ", "ㅆ", "ㅇ", "ㅈ", "ㅉ", "ㅊ", "ㅋ", "ㅌ", "ㅍ", "ㅎ",
)

# Vowels (Jungseong)
JUNGSEONG: Final[tuple[str, ...]] = (
    "ㅏ", "ㅐ", "ㅑ", "ㅒ", "ㅓ", "ㅔ", "ㅕ", "ㅖ",
    "ㅗ", "ㅘ", "ㅙ", "ㅚ", "ㅛ",
    "ㅜ", "ㅝ", "ㅞ", "ㅟ", "ㅠ",
    "ㅡ", "ㅢ", "ㅣ",
)

# Trailing consonants (Jongseong)
# Index 0 is "no final"
JONGSEONG: Final[tuple[str, ...]] = (
    "",
    "ㄱ", "ㄲ", "ㄳ",
    "ㄴ", "ㄵ", "ㄶ",
    "ㄷ",
    "ㄹ", "ㄺ", "ㄻ", "ㄼ", "ㄽ", "ㄾ", "ㄿ", "ㅀ",
    "ㅁ",
    "ㅂ", "ㅄ",
    "ㅅ", "ㅆ",
    "ㅇ",
    "ㅈ", "ㅊ",
    "ㅋ",
    "ㅌ",
    "ㅍ",
    "ㅎ",
)

NO_FINAL: Final[str] = ""

INITIAL_COUNT: Final[int] = len(CHOSEONG)
MEDIAL_COUNT: Final[int] = len(JUNGSEONG)
FINAL_COUNT: Final[int] = len(JONGSEONG)

# Geminate consonants: valid initials, never a bare final
DOUBLE_CONSONANTS: Final[frozenset[str]] = frozenset({"ㄲ", "ㄸ", "ㅃ", "ㅆ", "ㅉ"})


# -----------------------------------------------------------------------------
# Lookup maps
# -----------------------------------------------------------------------------

INITIAL_INDEX: Final[dict[str, int]] = {j: i for i, j in enumerate(CHOSEONG)}
MEDIAL_INDEX: Final[dict[str, int]] = {j: i for i, j in enumerate(JUNGSEONG)}
FINAL_INDEX: Final[dict[str, int]] = {j: i for i, j in enumerate(JONGSEONG)}
