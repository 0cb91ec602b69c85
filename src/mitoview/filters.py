"""Variant filter predicates.

ARCHITECTURE:
    FilterConfig + Variant → range / substring / set predicates → match

Each predicate takes ``(filter, value)`` and returns a bool. A filter that
imposes no constraint always matches.

Key Design:
- Compact range expressions: "N", "N-", "-N", "A-B" (inclusive, decimals ok)
- Substring matching is directional: the value must contain the filter
- Missing values fail a range filter but pass a substring filter
"""

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from mitoview.models.search import FilterConfig
from mitoview.models.variant import Variant

logger = logging.getLogger(__name__)


def _parse_number(text: str) -> float | None:
    try:
        return float(text)
    except ValueError:
        logger.debug(f"Ignoring unparsable range bound: {text!r}")
        return None


def range_text_filter(expression: str | None, value: float | None) -> bool:
    """Match a numeric value against a compact range expression.

    Args:
        expression: "" or "-" (anything), "N" (exactly N), "N-" (at least N),
            "-N" (at most N) or "A-B" (between A and B, inclusive)
        value: Value to test

    Returns:
        True if the value satisfies the expression. No expression always
        matches; a missing value never matches an expression.

    A missing value fails even the match-anything forms, so
    ``range_text_filter("-", None)`` is False.
    """
    if expression is None:
        return True
    if value is None:
        return False

    expression = expression.strip()
    if expression in ("", "-"):
        return True

    low_text, dash, high_text = expression.partition("-")
    low_text = low_text.strip()
    high_text = high_text.strip()

    if not dash:
        exact = _parse_number(low_text)
        return exact is not None and value == exact

    if low_text:
        low = _parse_number(low_text)
        if low is None or value < low:
            return False
    if high_text:
        high = _parse_number(high_text)
        if high is None or value > high:
            return False
    return True


def i_contains_filter(expression: str | None, value: Any) -> bool:
    """Case-insensitive check that ``value`` contains ``expression``.

    An empty expression or an empty value matches.
    """
    if not expression or not value:
        return True
    return str(expression).casefold() in _as_text(value).casefold()


def in_set_filter(selected: Sequence[Any] | None, value: Any) -> bool:
    """Check that ``value`` is one of the selected values. No selection matches."""
    if not selected:
        return True
    return value in selected


def in_range(bounds: Sequence[float | None] | None, value: float | None) -> bool:
    """Inclusive ``[low, high]`` check. A None bound is open."""
    if not bounds:
        return True
    low, high = (list(bounds) + [None, None])[:2]
    if low is None and high is None:
        return True
    if value is None:
        return False
    if low is not None and value < low:
        return False
    if high is not None and value > high:
        return False
    return True


def _as_text(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return ", ".join(str(item) for item in value)
    return str(value)


def variant_matches(variant: Variant, config: FilterConfig) -> bool:
    """Check a variant against every criterion of a filter configuration."""
    return (
        in_range(config.pos_range, variant.position)
        and in_range(config.vaf_range, variant.vaf)
        and in_range(config.depth_range, variant.read_depth)
        and i_contains_filter(config.allele, variant.ref_alt)
        and in_set_filter(config.selected_types, variant.variant_type)
        and in_set_filter(config.selected_genes, variant.gene)
        and in_set_filter(config.selected_consequences, variant.consequence_name)
        and i_contains_filter(config.disease, variant.disease)
        and i_contains_filter(config.mito_map, variant.mito_map)
        and i_contains_filter(config.curated_refs, variant.curated_refs)
        and i_contains_filter(config.hgvsp, variant.hgvsp)
        and i_contains_filter(config.hgvsc, variant.hgvsc)
        and i_contains_filter(config.hgvs, variant.hgvs)
    )


def filter_variants(variants: Iterable[Variant], config: FilterConfig) -> list[Variant]:
    """Return the variants matching ``config``, in their original order."""
    return [variant for variant in variants if variant_matches(variant, config)]


# Columns compared numerically; every other column is a substring match
RANGE_COLUMNS = frozenset({"position", "vaf", "DP"})


def column_filters_match(variant: Variant, column_filters: Mapping[str, str | None]) -> bool:
    """Check a variant against per-column filter expressions.

    Args:
        variant: Variant to test
        column_filters: Column name (wire name, e.g. "DP", "hgvsp") to expression.
            Numeric columns take range expressions, the rest substrings.
    """
    record = variant.model_dump(by_alias=True)
    for column, expression in column_filters.items():
        if column == "consequence":
            value = variant.consequence_name
        else:
            value = record.get(column)

        if column in RANGE_COLUMNS:
            matched = range_text_filter(expression, value)
        else:
            matched = i_contains_filter(expression, value)
        if not matched:
            return False
    return True
