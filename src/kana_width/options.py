"""Conversion directives and modifier flags accepted by the builder.

Terminology follows common Japanese usage: *hankaku* is halfwidth, *zenkaku* is
fullwidth, *kana* covers both katakana and hiragana.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable


class Directive(Enum):
    """A requested conversion from one or more source forms to one target form."""

    HANKAKU_NUMBER_TO_ZENKAKU = "hankaku_number_to_zenkaku"
    ZENKAKU_NUMBER_TO_HANKAKU = "zenkaku_number_to_hankaku"

    HANKAKU_KATAKANA_TO_ZENKAKU = "hankaku_katakana_to_zenkaku"
    ZENKAKU_KATAKANA_TO_HANKAKU = "zenkaku_katakana_to_hankaku"
    # Halfwidth and fullwidth katakana only; hiragana input is left alone.
    KATAKANA_TO_HIRAGANA = "katakana_to_hiragana"
    HIRAGANA_TO_ZENKAKU_KATAKANA = "hiragana_to_zenkaku_katakana"
    HIRAGANA_TO_HANKAKU_KATAKANA = "hiragana_to_hankaku_katakana"
    KANA_TO_HIRAGANA = "kana_to_hiragana"
    KANA_TO_ZENKAKU_KATAKANA = "kana_to_zenkaku_katakana"
    KANA_TO_HANKAKU_KATAKANA = "kana_to_hankaku_katakana"

    ALPHABET_TO_UPPER_ZENKAKU = "alphabet_to_upper_zenkaku"
    ALPHABET_TO_UPPER_HANKAKU = "alphabet_to_upper_hankaku"
    ALPHABET_TO_LOWER_ZENKAKU = "alphabet_to_lower_zenkaku"
    ALPHABET_TO_LOWER_HANKAKU = "alphabet_to_lower_hankaku"
    # Case-preserving width conversions.
    ALPHABET_TO_ZENKAKU = "alphabet_to_zenkaku"
    ALPHABET_TO_HANKAKU = "alphabet_to_hankaku"

    HANKAKU_SIGN_TO_ZENKAKU = "hankaku_sign_to_zenkaku"
    ZENKAKU_SIGN_TO_HANKAKU = "zenkaku_sign_to_hankaku"

    HANKAKU_SPACE_TO_ZENKAKU = "hankaku_space_to_zenkaku"
    ZENKAKU_SPACE_TO_HANKAKU = "zenkaku_space_to_hankaku"


class Modifier(Enum):
    """Build-wide flags that change how every directive is projected."""

    # Convert to the dakuten-stripped form of kana targets.
    REMOVE_DAKUTEN = "remove_dakuten"
    # Delete characters whose target form does not exist instead of keeping them.
    REMOVE_NO_MAPPING = "remove_no_mapping"


@dataclass(frozen=True)
class BuildOptions:
    """Resolved modifier settings for one builder call.

    Attributes:
        remove_dakuten: Shift kana target columns to their no-dakuten forms.
        remove_no_mapping: Drop source text whose target column is empty.
    """

    remove_dakuten: bool = False
    remove_no_mapping: bool = False

    @classmethod
    def from_modifiers(cls, modifiers: Iterable[Modifier]) -> BuildOptions:
        """Collapse a modifier collection into a ``BuildOptions`` record.

        Args:
            modifiers: Modifier flags; order and repetition are irrelevant.

        Returns:
            Options with each flag set when present in ``modifiers``.
        """

        flags = frozenset(modifiers)
        return cls(
            remove_dakuten=Modifier.REMOVE_DAKUTEN in flags,
            remove_no_mapping=Modifier.REMOVE_NO_MAPPING in flags,
        )
