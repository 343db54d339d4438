from __future__ import annotations

"""Keyboard layout data (domain layer).

- DUBEOLSIK: the standard 2-set QWERTY -> jamo mapping used to translate
  physical key presses.
- ON_SCREEN_ROWS / ON_SCREEN_DOUBLES: the on-screen keyboard arrangement,
  consonants on the left and vowels on the right of each row.
"""

from typing import Final, Optional


# Lower-case keys; shifted letters fall back to these unless overridden below.
_DUBEOLSIK_BASE: Final[dict[str, str]] = {
    "q": "ㅂ", "w": "ㅈ", "e": "ㄷ", "r": "ㄱ", "t": "ㅅ",
    "y": "ㅛ", "u": "ㅕ", "i": "ㅑ", "o": "ㅐ", "p": "ㅔ",
    "a": "ㅁ", "s": "ㄴ", "d": "ㅇ", "f": "ㄹ", "g": "ㅎ",
    "h": "ㅗ", "j": "ㅓ", "k": "ㅏ", "l": "ㅣ",
    "z": "ㅋ", "x": "ㅌ", "c": "ㅊ", "v": "ㅍ",
    "b": "ㅠ", "n": "ㅜ", "m": "ㅡ",
}

# Shift produces geminates and the ㅒ/ㅖ vowels
_DUBEOLSIK_SHIFT: Final[dict[str, str]] = {
    "Q": "ㅃ", "W": "ㅉ", "E": "ㄸ", "R": "ㄲ", "T": "ㅆ",
    "O": "ㅒ", "P": "ㅖ",
}

DUBEOLSIK: Final[dict[str, str]] = {
    **_DUBEOLSIK_BASE,
    **{k.upper(): v for k, v in _DUBEOLSIK_BASE.items()},
    **_DUBEOLSIK_SHIFT,
}


ON_SCREEN_ROWS: Final[tuple[tuple[tuple[str, ...], tuple[str, ...]], ...]] = (
    (("ㅂ", "ㅈ", "ㄷ", "ㄱ", "ㅅ"), ("ㅛ", "ㅕ", "ㅑ", "ㅐ", "ㅔ")),
    (("ㅁ", "ㄴ", "ㅇ", "ㄹ", "ㅎ"), ("ㅗ", "ㅓ", "ㅏ", "ㅣ", "ㅡ")),
    (("ㅋ", "ㅌ", "ㅊ", "ㅍ"), ("ㅠ", "ㅜ", "ㅒ", "ㅖ")),
)

ON_SCREEN_DOUBLES: Final[tuple[str, ...]] = ("ㅃ", "ㅉ", "ㄸ", "ㄲ", "ㅆ")


def jamo_for_key(text: str) -> Optional[str]:
    """Return the jamo a 2-set keyboard produces for `text`, if any."""
    if not text or len(text) != 1:
        return None
    return DUBEOLSIK.get(text)
