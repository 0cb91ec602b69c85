"""Derived values computed from an application state snapshot.

These are plain functions of ``AppState``; nothing here is cached or stored.
"""

from mitoview.constants import NO_SAMPLE
from mitoview.models.search import VariantSearch
from mitoview.models.settings import SampleSettings
from mitoview.models.state import AppState
from mitoview.searches import default_variant_search


def active_sample(state: AppState) -> str:
    """Id of the sample under review: the first key of the deletions mapping."""
    if not state.deletions:
        return NO_SAMPLE
    return next(iter(state.deletions))


def sample_settings(state: AppState) -> SampleSettings:
    """Settings record of the active sample, or an empty, detached record."""
    sample_id = active_sample(state)
    for sample in state.settings.samples:
        if sample.id == sample_id:
            return sample
    return SampleSettings()


def igv_host(state: AppState) -> str | None:
    return state.settings.igv_host


def settings_bam_dir(state: AppState) -> str | None:
    return sample_settings(state).bam_dir


def settings_bam_filename(state: AppState) -> str | None:
    return sample_settings(state).bam_filename


def settings_bam_file(state: AppState) -> str | None:
    """Full BAM path of the active sample, or None if either part is missing."""
    bam_dir = settings_bam_dir(state)
    bam_filename = settings_bam_filename(state)
    if not bam_dir or not bam_filename:
        return None
    return f"{bam_dir}{bam_filename}"


def widened_search(state: AppState, search: VariantSearch) -> VariantSearch:
    """Copy of a search whose depth upper bound is raised to the deepest variant."""
    search = search.model_copy(deep=True)
    low, high = (list(search.filter_config.depth_range) + [None, None])[:2]
    deepest = state.max_read_depth
    if high is not None and deepest > high:
        search.filter_config.depth_range = [low, deepest]
    return search


def default_search(state: AppState) -> VariantSearch:
    """Built-in default search, with the depth range widened to cover every variant."""
    return widened_search(state, default_variant_search())
