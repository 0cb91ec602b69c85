"""Utility functions."""

from mitoview.utils.variant_normalization import (
    VariantNormalizer,
    max_read_depth,
    normalize_variant,
    normalize_variants,
    resolve_consequence_name,
)

__all__ = [
    'VariantNormalizer',
    'max_read_depth',
    'normalize_variant',
    'normalize_variants',
    'resolve_consequence_name',
]
