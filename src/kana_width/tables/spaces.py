"""Halfwidth/fullwidth space table."""

from __future__ import annotations

from kana_width.models import SpaceRow
from kana_width.tables.base import EquivalenceTable

SPACES = EquivalenceTable(
    name="spaces",
    row_type=SpaceRow,
    rows=(SpaceRow(hankaku=" ", zenkaku="　"),),
)
