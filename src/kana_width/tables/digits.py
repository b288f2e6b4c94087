"""Halfwidth/fullwidth decimal digit table."""

from __future__ import annotations

from kana_width.models import DigitRow
from kana_width.tables.base import EquivalenceTable

# Fullwidth forms sit at a fixed offset from ASCII in the Halfwidth and
# Fullwidth Forms block (U+FF10 is FULLWIDTH DIGIT ZERO).
FULLWIDTH_OFFSET = 0xFEE0

DIGITS = EquivalenceTable(
    name="digits",
    row_type=DigitRow,
    rows=tuple(DigitRow(hankaku=d, zenkaku=chr(ord(d) + FULLWIDTH_OFFSET)) for d in "0123456789"),
)
