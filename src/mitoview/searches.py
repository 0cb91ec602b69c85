"""Saved variant searches for a sample.

Searches are identified by name. Only custom (user-created) searches can be
updated or deleted by name; the built-in default search is left alone.
"""

import logging
from collections.abc import Mapping
from typing import Any

from mitoview.constants import DEFAULT_VARIANT_SEARCH
from mitoview.models.search import VariantSearch

logger = logging.getLogger(__name__)


def default_variant_search() -> VariantSearch:
    """A fresh copy of the built-in default search."""
    return VariantSearch.model_validate(DEFAULT_VARIANT_SEARCH)


def _coerce_search(candidate: VariantSearch | Mapping[str, Any] | None) -> VariantSearch | None:
    """Return a VariantSearch, or None when the candidate has no name or filter config."""
    if candidate is None:
        return None
    if isinstance(candidate, VariantSearch):
        return candidate if candidate.name else None

    data = dict(candidate)
    filter_config = data.get("filterConfig", data.get("filter_config"))
    if not data.get("name") or filter_config is None:
        return None
    return VariantSearch.model_validate(data)


def find_search(searches: list[VariantSearch], name: str) -> VariantSearch | None:
    """First search with the given name, custom or not."""
    return next((search for search in searches if search.name == name), None)


def upsert_search(
    searches: list[VariantSearch],
    candidate: VariantSearch | Mapping[str, Any] | None,
) -> bool:
    """Create or update a custom search by name, in place.

    An existing custom search with the same name keeps its identity and
    ``custom`` flag; only its description and filter config are replaced.
    Otherwise the candidate is appended.

    Args:
        searches: The sample's saved searches
        candidate: Search to save. Ignored when it has no name or filter config.

    Returns:
        True if the list changed
    """
    search = _coerce_search(candidate)
    if search is None:
        logger.warning("Ignoring saved search without a name or filter config")
        return False

    existing = next(
        (vs for vs in searches if vs.custom and vs.name == search.name),
        None,
    )
    if existing is None:
        searches.append(search.model_copy(deep=True))
        logger.debug(f"Added saved search '{search.name}'")
    else:
        existing.description = search.description
        existing.filter_config = search.filter_config.model_copy(deep=True)
        logger.debug(f"Updated saved search '{search.name}'")
    return True


def delete_search(
    searches: list[VariantSearch],
    candidate: VariantSearch | Mapping[str, Any],
) -> int:
    """Remove every search named like a custom candidate, in place.

    Non-custom candidates are ignored so the built-in default survives.

    Returns:
        Number of searches removed
    """
    if isinstance(candidate, VariantSearch):
        name, custom = candidate.name, candidate.custom
    else:
        name, custom = candidate.get("name"), bool(candidate.get("custom"))

    if not custom:
        return 0

    remaining = [vs for vs in searches if vs.name != name]
    removed = len(searches) - len(remaining)
    searches[:] = remaining
    return removed
