"""Variant normalization utilities for display-ready variant records.

This module turns raw variant calls into ``Variant`` models:
- Consequence ids resolved to display names (falling back to the id)
- Derived ``ref_alt`` allele notation (A/G)
- Corpus-wide maximum read depth

"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from mitoview.constants import CONSEQUENCE_NAMES
from mitoview.models.variant import Variant

logger = logging.getLogger(__name__)


class VariantNormalizer:
    """Normalizes raw variant records to ``Variant`` models."""

    # Reference centralized constants
    CONSEQUENCE_NAMES = CONSEQUENCE_NAMES

    @staticmethod
    def resolve_consequence_name(consequence_id: str) -> str:
        """Look up the display name for a consequence id.

        Args:
            consequence_id: Consequence identifier (e.g., missense_variant)

        Returns:
            The display name from the lookup table, or the id itself when the
            id is not listed.
        """
        for entry in VariantNormalizer.CONSEQUENCE_NAMES:
            if entry["id"] == consequence_id:
                return entry["name"] or consequence_id
        return consequence_id

    @staticmethod
    def normalize(raw: Mapping[str, Any]) -> Variant:
        """Normalize a single raw variant record.

        Every field is copied as-is except ``consequence``, which gains a
        resolved ``name`` when the record has one. ``ref_alt`` is derived by
        the model.

        e.g.
        {'ref': 'A', 'alt': 'G', 'consequence': {'id': 'missense_variant'}, ...} ->
        Variant(ref='A', alt='G', ref_alt='A/G', consequence=Consequence(id='missense_variant', name='missense_variant'), ...)
        """
        record = dict(raw)
        if record.get("consequence") is not None:
            consequence = dict(record["consequence"])
            consequence["name"] = VariantNormalizer.resolve_consequence_name(consequence.get("id"))
            record["consequence"] = consequence
        return Variant.model_validate(record)

    @staticmethod
    def max_read_depth(variants: Iterable[Variant]) -> int | float:
        """Largest read depth, ignoring variants without one. 0 when none."""
        return max(
            (variant.read_depth for variant in variants if variant.read_depth is not None),
            default=0,
        )


def resolve_consequence_name(consequence_id: str) -> str:
    """Convenience wrapper for ``VariantNormalizer.resolve_consequence_name``."""
    return VariantNormalizer.resolve_consequence_name(consequence_id)


def normalize_variant(raw: Mapping[str, Any]) -> Variant:
    """Convenience wrapper for ``VariantNormalizer.normalize``."""
    return VariantNormalizer.normalize(raw)


def normalize_variants(raw_variants: Iterable[Mapping[str, Any]]) -> list[Variant]:
    """Normalize a whole collection of raw variant records."""
    variants = [VariantNormalizer.normalize(raw) for raw in raw_variants]
    logger.debug(f"Normalized {len(variants)} variants")
    return variants


def max_read_depth(variants: Iterable[Variant]) -> int | float:
    """Convenience wrapper for ``VariantNormalizer.max_read_depth``."""
    return VariantNormalizer.max_read_depth(variants)
