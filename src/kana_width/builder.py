"""Build normalizers from an ordered directive list and modifier flags."""

from __future__ import annotations

import functools
import logging
from typing import Iterable, Sequence

from kana_width.catalogue import CATALOGUE
from kana_width.engine import Normalizer
from kana_width.models import SubstitutionPair
from kana_width.options import BuildOptions, Directive, Modifier
from kana_width.validation import validate_directives, validate_modifiers

logger = logging.getLogger(__name__)


def _checked_arguments(
    directives: Sequence[Directive],
    modifiers: Iterable[Modifier],
) -> tuple[tuple[Directive, ...], tuple[Modifier, ...]]:
    """Materialize and validate builder arguments.

    Raises:
        ValueError: If any directive or modifier has the wrong type.
    """

    if not isinstance(directives, (str, Directive, Modifier)):
        directives = tuple(directives)
    validate_directives(directives)
    modifiers = tuple(modifiers)
    validate_modifiers(modifiers)
    return directives, modifiers


def project_directive(directive: Directive, options: BuildOptions) -> list[SubstitutionPair]:
    """Project one directive into its substitution pairs.

    Args:
        directive: Conversion to project.
        options: Resolved modifier settings for the current build.

    Returns:
        Pairs for every column pair of the directive, in catalogue order.
    """

    projection = CATALOGUE[directive]
    table = projection.table
    pairs: list[SubstitutionPair] = []
    for source, target in projection.column_pairs:
        pairs.extend(
            table.project(
                source,
                table.column_for(target, remove_dakuten=options.remove_dakuten),
                drop_missing=options.remove_no_mapping,
            )
        )
    return pairs


def build_normalizer(
    directives: Sequence[Directive],
    modifiers: Iterable[Modifier] = (),
) -> Normalizer:
    """Build a single-pass normalizer for the requested conversions.

    Directives are projected in the given order and concatenated into one
    substitution set. When several directives produce the same source string
    the earliest one wins, so directive order is the conflict-resolution order.

    Args:
        directives: Ordered conversions to apply.
        modifiers: Flags applied to every directive of this build.

    Returns:
        An immutable ``Normalizer``.

    Raises:
        ValueError: If any directive or modifier has the wrong type.

    Examples:
        >>> build_normalizer([Directive.HANKAKU_NUMBER_TO_ZENKAKU]).apply("123")
        '１２３'
        >>> build_normalizer(
        ...     [Directive.HANKAKU_KATAKANA_TO_ZENKAKU], [Modifier.REMOVE_DAKUTEN]
        ... ).apply("ｶﾞｶ")
        'カカ'
    """

    directives, modifiers = _checked_arguments(directives, modifiers)
    options = BuildOptions.from_modifiers(modifiers)

    pairs: list[SubstitutionPair] = []
    for directive in directives:
        pairs.extend(project_directive(directive, options))

    normalizer = Normalizer(pairs=tuple(pairs))
    logger.debug(
        "Built normalizer for %s (%s): %d pairs, %d distinct sources",
        [directive.name for directive in directives],
        options,
        len(pairs),
        len(normalizer),
    )
    return normalizer


@functools.lru_cache(maxsize=64)
def _cached_normalizer(
    directives: tuple[Directive, ...],
    modifiers: frozenset[Modifier],
) -> Normalizer:
    return build_normalizer(directives, modifiers)


def get_normalizer(
    directives: Sequence[Directive],
    modifiers: Iterable[Modifier] = (),
) -> Normalizer:
    """Return a shared normalizer for the directive/modifier combination.

    Normalizers are immutable, so identical requests reuse one instance.

    Args:
        directives: Ordered conversions to apply.
        modifiers: Flags applied to every directive.

    Returns:
        A cached ``Normalizer``.

    Raises:
        ValueError: If any directive or modifier has the wrong type.
    """

    directives, modifiers = _checked_arguments(directives, modifiers)
    return _cached_normalizer(directives, frozenset(modifiers))


def normalize_text(
    text: str,
    directives: Sequence[Directive],
    modifiers: Iterable[Modifier] = (),
) -> str:
    """Normalize ``text`` in one call using a cached normalizer.

    Args:
        text: Input text.
        directives: Ordered conversions to apply.
        modifiers: Flags applied to every directive.

    Returns:
        Normalized text.
    """

    return get_normalizer(directives, modifiers).apply(text)
