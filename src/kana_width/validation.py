"""Validation helpers for builder arguments and equivalence table integrity."""

from __future__ import annotations

from dataclasses import fields, is_dataclass
from typing import Iterable, Sequence

from kana_width.options import Directive, Modifier
from kana_width.tables.base import EquivalenceTable

PREVIEW_LIMIT = 25


def _raise_if_errors(label: str, errors: Sequence[str]) -> None:
    """Raise one ``ValueError`` summarizing collected validation errors.

    Args:
        label: Subject of the failed validation, used as the message prefix.
        errors: Collected error lines.

    Raises:
        ValueError: If ``errors`` is non-empty.
    """

    if not errors:
        return
    preview = "\n".join(f"- {item}" for item in errors[:PREVIEW_LIMIT])
    rest = len(errors) - min(PREVIEW_LIMIT, len(errors))
    more = f"\n- ... and {rest} more" if rest > 0 else ""
    raise ValueError(f"{label} validation failed with {len(errors)} errors:\n{preview}{more}")


def validate_directives(directives: Sequence[Directive]) -> None:
    """Validate that every directive list item is a ``Directive``.

    Modifiers belong in the separate ``modifiers`` argument; finding one here
    is reported explicitly.

    Args:
        directives: Directive list passed to the builder.

    Raises:
        ValueError: If ``directives`` is not a sequence or any item is not a
            ``Directive``.
    """

    if isinstance(directives, (str, Directive, Modifier)):
        raise ValueError(f"Expected a sequence of Directive, got {directives!r}")

    errors: list[str] = []
    for idx, item in enumerate(directives, start=1):
        if isinstance(item, Directive):
            continue
        if isinstance(item, Modifier):
            errors.append(f"Item {idx}: {item} is a modifier; pass it via 'modifiers'")
        else:
            errors.append(f"Item {idx}: expected Directive, got {type(item).__name__} {item!r}")
    _raise_if_errors("Directive", errors)


def validate_modifiers(modifiers: Iterable[Modifier]) -> None:
    """Validate that every modifier is a ``Modifier``.

    Args:
        modifiers: Modifier collection passed to the builder.

    Raises:
        ValueError: If any item is not a ``Modifier``.
    """

    errors: list[str] = []
    for idx, item in enumerate(modifiers, start=1):
        if isinstance(item, Modifier):
            continue
        if isinstance(item, Directive):
            errors.append(f"Item {idx}: {item} is a directive; pass it via 'directives'")
        else:
            errors.append(f"Item {idx}: expected Modifier, got {type(item).__name__} {item!r}")
    _raise_if_errors("Modifier", errors)


def validate_table(table: EquivalenceTable) -> None:
    """Check the structural integrity of an equivalence table.

    Every row must be an instance of the table's row type and hold only string
    values, at least one of which is non-empty. Every column named in
    ``no_dakuten_columns`` must exist in the table.

    Args:
        table: Table to check.

    Raises:
        ValueError: If the table violates any of the rules above.
    """

    errors: list[str] = []
    if not is_dataclass(table.row_type):
        errors.append(f"row type {table.row_type!r} is not a dataclass")
        _raise_if_errors(f"Table '{table.name}'", errors)

    columns = table.columns
    for voiced, stripped in table.no_dakuten_columns.items():
        for column in (voiced, stripped):
            if column not in columns:
                errors.append(f"no-dakuten mapping references unknown column '{column}'")

    if not table.rows:
        errors.append("table has no rows")

    for idx, row in enumerate(table.rows, start=1):
        if not isinstance(row, table.row_type):
            errors.append(f"Row {idx}: expected {table.row_type.__name__}, got {type(row).__name__}")
            continue
        values = [getattr(row, item.name) for item in fields(row)]
        bad = [value for value in values if not isinstance(value, str)]
        if bad:
            errors.append(f"Row {idx}: non-string column value(s) {bad!r}")
            continue
        if not any(values):
            errors.append(f"Row {idx}: every column is empty")

    _raise_if_errors(f"Table '{table.name}'", errors)
