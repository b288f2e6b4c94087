"""Halfwidth/fullwidth punctuation and symbol table.

Several halfwidth signs have more than one conventional fullwidth rendering
(``'`` is written as both ``’`` and ``‘``, ``,`` as both ``，`` and ``、``).
Each rendering gets its own row; the first row is the preferred halfwidth to
fullwidth target, and every row still normalizes back to halfwidth. The
ideographic full stop ``。`` is treated as a halfwidth-side variant of ``.`` so
that it converts to ``．``.
"""

from __future__ import annotations

from kana_width.models import SignRow
from kana_width.tables.base import EquivalenceTable

SIGNS = EquivalenceTable(
    name="signs",
    row_type=SignRow,
    rows=(
        SignRow("!", "！"),
        SignRow('"', "”"),
        SignRow("#", "＃"),
        SignRow("$", "＄"),
        SignRow("%", "％"),
        SignRow("&", "＆"),
        SignRow("'", "’"),
        SignRow("'", "‘"),
        SignRow("(", "（"),
        SignRow(")", "）"),
        SignRow("*", "＊"),
        SignRow("+", "＋"),
        SignRow(",", "，"),
        SignRow(",", "、"),
        SignRow("-", "－"),
        SignRow("-", "ー"),
        SignRow(".", "．"),
        SignRow("。", "．"),
        SignRow("/", "／"),
        SignRow("/", "・"),
        SignRow(":", "："),
        SignRow(";", "；"),
        SignRow("<", "＜"),
        SignRow("=", "＝"),
        SignRow(">", "＞"),
        SignRow("?", "？"),
        SignRow("@", "＠"),
        SignRow("[", "［"),
        SignRow("\\", "＼"),
        SignRow("\\", "￥"),
        SignRow("]", "］"),
        SignRow("^", "＾"),
        SignRow("_", "＿"),
        SignRow("`", "｀"),
        SignRow("{", "｛"),
        SignRow("|", "｜"),
        SignRow("}", "｝"),
        SignRow("~", "～"),
        SignRow("~", "￣"),
    ),
)
