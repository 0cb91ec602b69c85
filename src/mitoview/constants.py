"""Centralized constants and defaults for MitoView.

This module consolidates the fixed values used across the codebase:
- Genome bounds and slider limits for the mitochondrial genome
- Consequence display names
- Notification (snackbar) defaults
- The built-in default variant search

Centralizing these keeps the UI defaults and the filter engine consistent.
"""

# =============================================================================
# GENOME BOUNDS
# =============================================================================
# Position and depth limits used by the default filter configuration

MAX_POS: int = 16300

MAX_READ_DEPTH: int = 10000


# =============================================================================
# SENTINELS AND FILE NAMES
# =============================================================================

NO_SAMPLE: str = "No Sample"

SETTINGS_EXPORT_FILENAME: str = "mitoSettings.json"


# =============================================================================
# NOTIFICATION DEFAULTS
# =============================================================================
# Timeout is in milliseconds

DEFAULT_SNACKBAR_OPTS: dict[str, object] = {
    "active": False,
    "color": "green",
    "message": None,
    "timeout": 3000,
}

ERROR_COLOR: str = "red"


# =============================================================================
# CONSEQUENCE NAMES
# =============================================================================
# Ordered lookup of consequence ids to display names.
# Ids missing from this table are displayed as-is.

CONSEQUENCE_NAMES: list[dict[str, str]] = [
    {"id": "frameshift_variant", "name": "frameshift_variant"},
    {"id": "inframe_deletion", "name": "inframe_deletion"},
    {"id": "missense_variant", "name": "missense_variant"},
    {"id": "stop_gained", "name": "stop_gained"},
    {"id": "synonymous_variant", "name": "synonymous_variant"},
    {"id": "upstream_gene_variant", "name": "upstream_gene_variant"},
]


# =============================================================================
# DEFAULT VARIANT SEARCH
# =============================================================================
# Built-in search shown for every sample. Never custom, never deletable.

DEFAULT_FILTER_CONFIG: dict[str, object] = {
    "posRange": [0, MAX_POS],
    "allele": "",
    "selectedTypes": [],
    "selectedGenes": [],
    "selectedConsequences": [],
    "vafRange": [0, 1],
    "depthRange": [0, MAX_READ_DEPTH],
    "disease": "",
    "mitoMap": "",
    "curatedRefs": "",
    "hgvsp": "",
    "hgvsc": "",
    "hgvs": "",
}

DEFAULT_VARIANT_SEARCH: dict[str, object] = {
    "name": "None",
    "description": "No filters applied",
    "custom": False,
    "filterConfig": DEFAULT_FILTER_CONFIG,
}
