"""Record types shared by the equivalence tables and the substitution engine.

Each table row is an immutable named-field record so columns are addressed by
name rather than by position. An empty string in a column means the row has no
form in that column.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DigitRow:
    """One decimal digit in its halfwidth and fullwidth forms."""

    hankaku: str
    zenkaku: str


@dataclass(frozen=True)
class KanaRow:
    """One kana syllable across its script, width and dakuten variants.

    The first three columns hold the syllable as written. The ``*_no_dakuten``
    columns hold the same syllable with any dakuten/handakuten stripped, so for
    unvoiced syllables both column groups are identical. Halfwidth voiced
    syllables are two-codepoint strings such as ``ｶﾞ``.
    """

    hankaku_katakana: str
    zenkaku_katakana: str
    hiragana: str
    hankaku_katakana_no_dakuten: str
    zenkaku_katakana_no_dakuten: str
    hiragana_no_dakuten: str


@dataclass(frozen=True)
class LetterRow:
    """One Latin letter in both cases and both widths."""

    hankaku_lower: str
    hankaku_upper: str
    zenkaku_lower: str
    zenkaku_upper: str


@dataclass(frozen=True)
class SignRow:
    """One halfwidth/fullwidth punctuation pairing.

    Several rows may share a value on either side; the earliest row wins when
    projections collide.
    """

    hankaku: str
    zenkaku: str


@dataclass(frozen=True)
class SpaceRow:
    """The halfwidth/fullwidth space pairing."""

    hankaku: str
    zenkaku: str


@dataclass(frozen=True)
class SubstitutionPair:
    """A single ``source -> target`` replacement derived from a table row.

    ``target`` may be empty, in which case the matched ``source`` text is
    removed from the output.
    """

    source: str
    target: str
