from __future__ import annotations

"""Vowel and final-consonant combination tables.

VOWEL_COMBINATIONS and FINAL_COMBINATIONS are the source tables; the split
tables are derived from them so the two directions can never drift apart.
Everything here is built once at import time and exposed read-only.
"""

from types import MappingProxyType
from typing import Final, Mapping, Optional


def _freeze(table: dict[str, dict[str, str]]) -> Mapping[str, Mapping[str, str]]:
    return MappingProxyType({base: MappingProxyType(dict(adds)) for base, adds in table.items()})


# base medial -> (added medial -> combined medial)
VOWEL_COMBINATIONS: Final[Mapping[str, Mapping[str, str]]] = _freeze({
    "ㅗ": {"ㅏ": "ㅘ", "ㅐ": "ㅙ", "ㅣ": "ㅚ"},
    "ㅜ": {"ㅓ": "ㅝ", "ㅔ": "ㅞ", "ㅣ": "ㅟ"},
    "ㅡ": {"ㅣ": "ㅢ"},
})

# base final -> (added consonant -> cluster final)
FINAL_COMBINATIONS: Final[Mapping[str, Mapping[str, str]]] = _freeze({
    "ㄱ": {"ㅅ": "ㄳ"},
    "ㄴ": {"ㅈ": "ㄵ", "ㅎ": "ㄶ"},
    "ㄹ": {"ㄱ": "ㄺ", "ㅁ": "ㄻ", "ㅂ": "ㄼ", "ㅅ": "ㄽ", "ㅌ": "ㄾ", "ㅍ": "ㄿ", "ㅎ": "ㅀ"},
    "ㅂ": {"ㅅ": "ㅄ"},
})

# combined medial -> base medial it was built from
VOWEL_SPLIT: Final[Mapping[str, str]] = MappingProxyType({
    combined: base
    for base, adds in VOWEL_COMBINATIONS.items()
    for combined in adds.values()
})

# cluster final -> (kept component, moved component)
SPLIT_FINAL: Final[Mapping[str, tuple[str, str]]] = MappingProxyType({
    cluster: (kept, moved)
    for kept, adds in FINAL_COMBINATIONS.items()
    for moved, cluster in adds.items()
})


def combine_vowels(base: str, added: str) -> Optional[str]:
    """Return the diphthong for base+added, or None if they do not merge."""
    return VOWEL_COMBINATIONS.get(base, {}).get(added)


def combine_finals(base: str, added: str) -> Optional[str]:
    """Return the cluster final for base+added, or None if they do not merge."""
    return FINAL_COMBINATIONS.get(base, {}).get(added)


def split_final(final: str) -> Optional[tuple[str, str]]:
    return SPLIT_FINAL.get(final)


def base_vowel(medial: str) -> Optional[str]:
    return VOWEL_SPLIT.get(medial)
