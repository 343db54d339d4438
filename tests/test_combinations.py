import pytest

from hangul_ime.domain.combinations import (
    FINAL_COMBINATIONS,
    SPLIT_FINAL,
    VOWEL_COMBINATIONS,
    VOWEL_SPLIT,
    base_vowel,
    combine_finals,
    combine_vowels,
    split_final,
)
from hangul_ime.domain.classifier import can_stand_as_final, is_initial, is_medial


def test_diphthongs():
    assert combine_vowels("ㅗ", "ㅏ") == "ㅘ"
    assert combine_vowels("ㅜ", "ㅔ") == "ㅞ"
    assert combine_vowels("ㅡ", "ㅣ") == "ㅢ"
    assert combine_vowels("ㅏ", "ㅏ") is None
    assert combine_vowels("ㅗ", "ㅓ") is None


def test_cluster_finals():
    assert combine_finals("ㄱ", "ㅅ") == "ㄳ"
    assert combine_finals("ㄹ", "ㅎ") == "ㅀ"
    assert combine_finals("ㄴ", "ㄱ") is None
    assert combine_finals("ㄳ", "ㅅ") is None


def test_split_final_inverts_final_combinations():
    assert len(SPLIT_FINAL) == 11
    for base, adds in FINAL_COMBINATIONS.items():
        for added, cluster in adds.items():
            assert split_final(cluster) == (base, added)
            assert can_stand_as_final(cluster)
            assert is_initial(added)
    assert split_final("ㄱ") is None


def test_vowel_split_inverts_vowel_combinations():
    assert len(VOWEL_SPLIT) == 7
    for base, adds in VOWEL_COMBINATIONS.items():
        for added, combined in adds.items():
            assert base_vowel(combined) == base
            assert is_medial(combined)
    assert base_vowel("ㅏ") is None


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        VOWEL_COMBINATIONS["ㅏ"] = {}  # type: ignore[index]
    with pytest.raises(TypeError):
        SPLIT_FINAL["ㄳ"] = ("ㄱ", "ㄱ")  # type: ignore[index]
