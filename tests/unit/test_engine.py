"""Unit tests for the longest-match substitution engine."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from kana_width.engine import Normalizer
from kana_width.models import SubstitutionPair


def _normalizer(*pairs: tuple[str, str]) -> Normalizer:
    return Normalizer(pairs=tuple(SubstitutionPair(source, target) for source, target in pairs))


def test_longest_source_wins_regardless_of_registration_order() -> None:
    """A longer source should beat a shorter prefix even when registered later."""

    normalizer = _normalizer(("ｶ", "カ"), ("ｶﾞ", "ガ"))

    assert normalizer.apply("ｶﾞｶ") == "ガカ"


def test_first_definition_wins_for_duplicate_sources() -> None:
    normalizer = _normalizer((".", "。"), (".", "．"))

    assert normalizer.apply("hoge.") == "hoge。"
    assert normalizer.replacements == {".": "。"}
    assert len(normalizer) == 1


def test_empty_target_deletes_matched_text() -> None:
    normalizer = _normalizer(("ﾜﾞ", ""), ("ｱ", "あ"))

    assert normalizer.apply("ｱﾜﾞｱ") == "ああ"


def test_unmatched_characters_pass_through() -> None:
    normalizer = _normalizer(("1", "１"))

    assert normalizer.apply("漢字1a") == "漢字１a"


def test_scan_does_not_rescan_replaced_text() -> None:
    """Replacement output is never matched again within the same pass."""

    normalizer = _normalizer(("a", "b"), ("b", "c"))

    assert normalizer.apply("ab") == "bc"


def test_regex_metacharacters_are_matched_literally() -> None:
    normalizer = _normalizer((".", "．"), ("*", "＊"), ("\\", "＼"), ("(", "（"))

    assert normalizer.apply("a.b*c\\(d") == "a．b＊c＼（d"


@pytest.mark.parametrize("text", ["", "plain text", "ｶﾞ"])
def test_empty_substitution_set_is_identity(text: str) -> None:
    assert Normalizer(pairs=()).apply(text) == text


def test_normalizer_is_callable_and_immutable() -> None:
    normalizer = _normalizer(("a", "ａ"))

    assert normalizer("abc") == "ａbc"
    with pytest.raises(AttributeError):
        normalizer.pairs = ()  # type: ignore[misc]
    with pytest.raises(TypeError):
        normalizer.replacements["b"] = "ｂ"  # type: ignore[index]


def test_normalizers_with_equal_pairs_compare_equal() -> None:
    assert _normalizer(("a", "b")) == _normalizer(("a", "b"))
    assert _normalizer(("a", "b")) != _normalizer(("a", "c"))


def test_shared_normalizer_is_safe_across_threads() -> None:
    normalizer = _normalizer(("ｶﾞ", "ガ"), ("ｶ", "カ"))
    inputs = ["ｶﾞｶ" * n for n in range(1, 200)]

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(normalizer.apply, inputs))

    assert results == ["ガカ" * n for n in range(1, 200)]
