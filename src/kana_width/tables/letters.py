"""Latin letter table covering both cases in both widths."""

from __future__ import annotations

import string

from kana_width.models import LetterRow
from kana_width.tables.base import EquivalenceTable
from kana_width.tables.digits import FULLWIDTH_OFFSET

LETTERS = EquivalenceTable(
    name="letters",
    row_type=LetterRow,
    rows=tuple(
        LetterRow(
            hankaku_lower=lower,
            hankaku_upper=lower.upper(),
            zenkaku_lower=chr(ord(lower) + FULLWIDTH_OFFSET),
            zenkaku_upper=chr(ord(lower.upper()) + FULLWIDTH_OFFSET),
        )
        for lower in string.ascii_lowercase
    ),
)
