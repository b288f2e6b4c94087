"""Single-pass substitution engine built from an ordered substitution set."""

from __future__ import annotations

from dataclasses import dataclass, field
import re
from types import MappingProxyType
from typing import Mapping

from kana_width.models import SubstitutionPair


def _first_definitions(pairs: tuple[SubstitutionPair, ...]) -> dict[str, str]:
    """Collapse pairs to one target per source, keeping the first definition.

    Args:
        pairs: Ordered substitution set.

    Returns:
        Insertion-ordered ``source -> target`` mapping.
    """

    mapping: dict[str, str] = {}
    for pair in pairs:
        mapping.setdefault(pair.source, pair.target)
    return mapping


def _build_pattern(sources: list[str]) -> re.Pattern[str] | None:
    """Compile an alternation that prefers the longest source at each position.

    ``sorted`` is stable, so sources of equal length keep their first-occurrence
    order.

    Args:
        sources: Distinct source strings in first-occurrence order.

    Returns:
        Compiled pattern, or ``None`` when there is nothing to match.
    """

    if not sources:
        return None
    ordered = sorted(sources, key=len, reverse=True)
    return re.compile("|".join(re.escape(source) for source in ordered))


@dataclass(frozen=True)
class Normalizer:
    """Immutable text transformer applying a substitution set in one scan.

    At each input position the longest matching source string is replaced by
    its target and the scan resumes after the consumed text; characters that
    match nothing are copied through unchanged. When a source string occurs
    more than once in ``pairs`` only its first definition is used.

    Instances hold no mutable state and can be shared between threads.

    Attributes:
        pairs: Ordered substitution set the normalizer was built from.
    """

    pairs: tuple[SubstitutionPair, ...]
    _replacements: Mapping[str, str] = field(init=False, repr=False, compare=False)
    _pattern: re.Pattern[str] | None = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        replacements = _first_definitions(self.pairs)
        object.__setattr__(self, "_replacements", MappingProxyType(replacements))
        object.__setattr__(self, "_pattern", _build_pattern(list(replacements)))

    @property
    def replacements(self) -> Mapping[str, str]:
        """Return the resolved first-definition ``source -> target`` view."""

        return self._replacements

    def __len__(self) -> int:
        return len(self._replacements)

    def apply(self, text: str) -> str:
        """Normalize ``text``.

        Args:
            text: Input text.

        Returns:
            The normalized text. Input is returned as-is when the substitution
            set is empty.
        """

        if self._pattern is None or not text:
            return text
        replacements = self._replacements
        return self._pattern.sub(lambda match: replacements[match.group(0)], text)

    def __call__(self, text: str) -> str:
        return self.apply(text)
