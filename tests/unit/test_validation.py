"""Unit tests for builder argument validation."""

from __future__ import annotations

import pytest

from kana_width.options import Directive, Modifier
from kana_width.validation import validate_directives, validate_modifiers


def test_validate_directives_accepts_directives() -> None:
    validate_directives([Directive.KANA_TO_HIRAGANA, Directive.HANKAKU_SPACE_TO_ZENKAKU])
    validate_directives([])


def test_validate_directives_rejects_directive_names() -> None:
    with pytest.raises(ValueError, match="expected Directive, got str 'kana_to_hiragana'"):
        validate_directives(["kana_to_hiragana"])  # type: ignore[list-item]


def test_validate_directives_rejects_bare_string_or_directive() -> None:
    with pytest.raises(ValueError, match="Expected a sequence of Directive"):
        validate_directives("kana_to_hiragana")  # type: ignore[arg-type]
    with pytest.raises(ValueError, match="Expected a sequence of Directive"):
        validate_directives(Directive.KANA_TO_HIRAGANA)  # type: ignore[arg-type]


def test_validate_directives_points_modifiers_to_their_argument() -> None:
    with pytest.raises(ValueError, match="Item 2: Modifier.REMOVE_DAKUTEN is a modifier"):
        validate_directives([Directive.KANA_TO_HIRAGANA, Modifier.REMOVE_DAKUTEN])  # type: ignore[list-item]


def test_validate_modifiers_points_directives_to_their_argument() -> None:
    with pytest.raises(ValueError, match="Item 1: Directive.KANA_TO_HIRAGANA is a directive"):
        validate_modifiers([Directive.KANA_TO_HIRAGANA])  # type: ignore[list-item]


def test_validation_errors_are_aggregated_with_preview_limit() -> None:
    """Every bad item is counted but only the first 25 are listed."""

    with pytest.raises(ValueError) as excinfo:
        validate_modifiers(list(range(30)))  # type: ignore[arg-type]

    message = str(excinfo.value)
    assert message.startswith("Modifier validation failed with 30 errors:")
    assert "- Item 25: expected Modifier, got int 24" in message
    assert "- Item 26:" not in message
    assert message.endswith("- ... and 5 more")
