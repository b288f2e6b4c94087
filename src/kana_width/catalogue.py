"""Directive catalogue: which table and column pairs each directive projects."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

from kana_width.options import Directive
from kana_width.tables.base import EquivalenceTable
from kana_width.tables.digits import DIGITS
from kana_width.tables.kana import KANA
from kana_width.tables.letters import LETTERS
from kana_width.tables.signs import SIGNS
from kana_width.tables.spaces import SPACES


@dataclass(frozen=True)
class Projection:
    """Column pairs a directive projects from a single table.

    Pairs are projected in order; each pair's rows are appended in full before
    the next pair is projected.
    """

    table: EquivalenceTable
    column_pairs: tuple[tuple[str, str], ...]


def _to(table: EquivalenceTable, target: str, *sources: str) -> Projection:
    return Projection(table=table, column_pairs=tuple((source, target) for source in sources))


CATALOGUE: MappingProxyType[Directive, Projection] = MappingProxyType(
    {
        Directive.HANKAKU_NUMBER_TO_ZENKAKU: _to(DIGITS, "zenkaku", "hankaku"),
        Directive.ZENKAKU_NUMBER_TO_HANKAKU: _to(DIGITS, "hankaku", "zenkaku"),
        Directive.HANKAKU_KATAKANA_TO_ZENKAKU: _to(KANA, "zenkaku_katakana", "hankaku_katakana"),
        Directive.ZENKAKU_KATAKANA_TO_HANKAKU: _to(KANA, "hankaku_katakana", "zenkaku_katakana"),
        Directive.KATAKANA_TO_HIRAGANA: _to(
            KANA, "hiragana", "hankaku_katakana", "zenkaku_katakana"
        ),
        Directive.HIRAGANA_TO_ZENKAKU_KATAKANA: _to(KANA, "zenkaku_katakana", "hiragana"),
        Directive.HIRAGANA_TO_HANKAKU_KATAKANA: _to(KANA, "hankaku_katakana", "hiragana"),
        Directive.KANA_TO_HIRAGANA: _to(
            KANA, "hiragana", "hankaku_katakana", "zenkaku_katakana", "hiragana"
        ),
        Directive.KANA_TO_ZENKAKU_KATAKANA: _to(
            KANA, "zenkaku_katakana", "hankaku_katakana", "zenkaku_katakana", "hiragana"
        ),
        Directive.KANA_TO_HANKAKU_KATAKANA: _to(
            KANA, "hankaku_katakana", "hankaku_katakana", "zenkaku_katakana", "hiragana"
        ),
        Directive.ALPHABET_TO_UPPER_ZENKAKU: _to(
            LETTERS, "zenkaku_upper", "hankaku_lower", "hankaku_upper", "zenkaku_lower"
        ),
        Directive.ALPHABET_TO_UPPER_HANKAKU: _to(
            LETTERS, "hankaku_upper", "hankaku_lower", "zenkaku_lower", "zenkaku_upper"
        ),
        Directive.ALPHABET_TO_LOWER_ZENKAKU: _to(
            LETTERS, "zenkaku_lower", "hankaku_lower", "hankaku_upper", "zenkaku_upper"
        ),
        Directive.ALPHABET_TO_LOWER_HANKAKU: _to(
            LETTERS, "hankaku_lower", "hankaku_upper", "zenkaku_lower", "zenkaku_upper"
        ),
        Directive.ALPHABET_TO_ZENKAKU: Projection(
            table=LETTERS,
            column_pairs=(
                ("hankaku_lower", "zenkaku_lower"),
                ("hankaku_upper", "zenkaku_upper"),
            ),
        ),
        Directive.ALPHABET_TO_HANKAKU: Projection(
            table=LETTERS,
            column_pairs=(
                ("zenkaku_lower", "hankaku_lower"),
                ("zenkaku_upper", "hankaku_upper"),
            ),
        ),
        Directive.HANKAKU_SIGN_TO_ZENKAKU: _to(SIGNS, "zenkaku", "hankaku"),
        Directive.ZENKAKU_SIGN_TO_HANKAKU: _to(SIGNS, "hankaku", "zenkaku"),
        Directive.HANKAKU_SPACE_TO_ZENKAKU: _to(SPACES, "zenkaku", "hankaku"),
        Directive.ZENKAKU_SPACE_TO_HANKAKU: _to(SPACES, "hankaku", "zenkaku"),
    }
)

ALL_TABLES: tuple[EquivalenceTable, ...] = (DIGITS, KANA, LETTERS, SIGNS, SPACES)
