"""Generic equivalence table and the row projection rule."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import Any, Mapping

from kana_width.models import SubstitutionPair


@dataclass(frozen=True)
class EquivalenceTable:
    """Read-only table of character variants for one character class.

    Rows are instances of a frozen row dataclass; the table's columns are that
    dataclass's field names in declaration order. Row order only matters for
    tie-breaking: when two rows project the same source string, the earlier
    row wins at apply time.

    Attributes:
        name: Short table label used in error messages.
        row_type: Row dataclass shared by every row.
        rows: Ordered table rows.
        no_dakuten_columns: Voiced column -> dakuten-stripped column mapping.
            Empty for tables without dakuten variants.
    """

    name: str
    row_type: type
    rows: tuple[Any, ...]
    no_dakuten_columns: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def columns(self) -> tuple[str, ...]:
        """Return column names in declaration order."""

        return tuple(item.name for item in fields(self.row_type))

    def column_for(self, target: str, remove_dakuten: bool = False) -> str:
        """Resolve the concrete target column for a projection.

        Args:
            target: Requested target column.
            remove_dakuten: Whether to prefer the dakuten-stripped counterpart.

        Returns:
            The no-dakuten counterpart of ``target`` when requested and defined
            by this table, otherwise ``target`` itself.
        """

        if remove_dakuten:
            return self.no_dakuten_columns.get(target, target)
        return target

    def project(
        self,
        source: str,
        target: str,
        drop_missing: bool = False,
    ) -> tuple[SubstitutionPair, ...]:
        """Project rows onto ``source -> target`` substitution pairs.

        Rows with an empty ``source`` column are skipped. When a row has no
        ``target`` form, the pair either maps the source onto itself or, with
        ``drop_missing``, onto the empty string.

        Args:
            source: Column providing the text to match.
            target: Column providing the replacement text.
            drop_missing: Delete sources whose target form is missing.

        Returns:
            Pairs in row order.

        Raises:
            ValueError: If either column is not defined by this table.
        """

        columns = self.columns
        unknown = [column for column in (source, target) if column not in columns]
        if unknown:
            raise ValueError(
                f"Unknown column(s) {', '.join(repr(c) for c in unknown)} for table "
                f"'{self.name}' (expected one of: {', '.join(columns)})."
            )

        pairs: list[SubstitutionPair] = []
        for row in self.rows:
            source_value = getattr(row, source)
            if not source_value:
                continue
            target_value = getattr(row, target)
            if not target_value and not drop_missing:
                target_value = source_value
            pairs.append(SubstitutionPair(source=source_value, target=target_value))
        return tuple(pairs)
