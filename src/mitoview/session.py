"""Review session coordinating data loading, saved searches and settings.

ARCHITECTURE:
    DataService (settings + variants + deletions) → Normalize → AppState → Getters / Filters

Owns the single ``AppState`` of a review session and routes every user action
through it.

Key Design:
- Async context manager for the data service lifecycle
- Initial load fires all three requests at once (asyncio.gather) and waits for all
- Failures become red notifications, never exceptions to the caller
- Derived values come from mitoview.getters, computed on access
"""

import asyncio
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from mitoview import getters
from mitoview.api.local_data import DataService, LocalDataClient
from mitoview.constants import DEFAULT_VARIANT_SEARCH, ERROR_COLOR
from mitoview.export import export_settings
from mitoview.filters import filter_variants
from mitoview.models.search import FilterConfig, VariantSearch
from mitoview.models.settings import SampleSettings, Settings
from mitoview.models.state import AppState, Notification
from mitoview.models.variant import Variant
from mitoview.searches import delete_search, find_search, upsert_search
from mitoview.utils.logging_config import get_logger
from mitoview.utils.variant_normalization import normalize_variants

logger = logging.getLogger(__name__)


def _error_message(error: BaseException) -> str:
    return str(error) or type(error).__name__


class ReviewSession:
    """
    Session state for reviewing one sample's variants.

    All mutations go through this object; there is no module-level state.
    """

    def __init__(
        self,
        data_service: DataService | None = None,
        load_timeout: float | None = None,
        enable_logging: bool = True,
    ):
        self.data_service = data_service if data_service is not None else LocalDataClient()
        self.load_timeout = load_timeout
        self.state = AppState()
        self.action_logger = get_logger() if enable_logging else None

    async def __aenter__(self):
        """Open the data service, if it manages a connection."""
        enter = getattr(self.data_service, "__aenter__", None)
        if enter is not None:
            await enter()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Close the data service to prevent resource leaks."""
        exit_ = getattr(self.data_service, "__aexit__", None)
        if exit_ is not None:
            await exit_(exc_type, exc_val, exc_tb)

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def sample(self) -> str:
        return getters.active_sample(self.state)

    @property
    def sample_settings(self) -> SampleSettings:
        return getters.sample_settings(self.state)

    @property
    def bam_file(self) -> str | None:
        return getters.settings_bam_file(self.state)

    @property
    def igv_host(self) -> str | None:
        return getters.igv_host(self.state)

    @property
    def max_read_depth(self) -> int | float:
        return self.state.max_read_depth

    @property
    def variant_searches(self) -> list[VariantSearch]:
        return self.sample_settings.variant_searches

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    async def fetch_data(self) -> bool:
        """Load settings, variants and deletions concurrently.

        All three requests run at the same time and are awaited to completion.
        If any of them fails, nothing is stored and a single red notification
        carries the first error. The loading flag is cleared either way.

        Returns:
            True if the data was loaded
        """
        self.state.loading = True
        try:
            requests = asyncio.gather(
                self.data_service.load_settings(),
                self.data_service.get_variants(),
                self.data_service.get_deletions(),
                return_exceptions=True,
            )
            if self.load_timeout is not None:
                responses = await asyncio.wait_for(requests, timeout=self.load_timeout)
            else:
                responses = await requests

            failures = [r for r in responses if isinstance(r, Exception)]
            if failures:
                raise failures[0]

            settings_data, variants_data, deletions_data = responses
            settings = Settings.model_validate(settings_data or {})
            variants = normalize_variants(variants_data or [])
            deletions = dict(deletions_data or {})
        except Exception as e:
            logger.debug("Data load failed", exc_info=True)
            if self.action_logger:
                self.action_logger.log_load_error(e)
            self.activate_notification(
                color=ERROR_COLOR,
                message=f"There was a problem fetching data: {_error_message(e)}",
            )
            return False
        else:
            self.state.settings = settings
            self.state.variants = variants
            self.state.deletions = deletions
            if self.action_logger:
                self.action_logger.log_data_loaded(self.sample, len(variants), self.max_read_depth)
            return True
        finally:
            self.state.loading = False

    # ------------------------------------------------------------------
    # Sample settings
    # ------------------------------------------------------------------

    def _warn_if_detached(self, sample_settings: SampleSettings) -> None:
        if not any(sample is sample_settings for sample in self.state.settings.samples):
            logger.warning(f"No settings stored for sample {self.sample}; change will not be persisted")

    def save_bam_dir(self, new_bam_dir: str) -> None:
        """Point the active sample at a new BAM directory."""
        sample_settings = self.sample_settings
        self._warn_if_detached(sample_settings)
        sample_settings.bam_dir = new_bam_dir

    def save_search(self, search: VariantSearch | Mapping[str, Any] | None) -> bool:
        """Create or update a custom saved search for the active sample."""
        sample_settings = self.sample_settings
        self._warn_if_detached(sample_settings)

        searches = sample_settings.variant_searches
        count_before = len(searches)
        if not upsert_search(searches, search):
            return False

        if self.action_logger:
            self.action_logger.log_search_saved(
                self.sample, _search_name(search), created=len(searches) > count_before
            )
        return True

    def delete_search(self, search: VariantSearch | Mapping[str, Any]) -> int:
        """Delete a custom saved search of the active sample by name."""
        if not _search_custom(search):
            return 0

        removed = delete_search(self.sample_settings.variant_searches, search)
        if removed and self.action_logger:
            self.action_logger.log_search_deleted(self.sample, _search_name(search), removed)
        return removed

    def find_search(self, name: str) -> VariantSearch | None:
        """Saved search of the active sample by name, falling back to the built-in default.

        Built-in (non-custom) searches are returned as copies with the depth
        range widened to the deepest variant.
        """
        search = find_search(self.variant_searches, name)
        if search is None:
            if name == DEFAULT_VARIANT_SEARCH["name"]:
                return getters.default_search(self.state)
            return None
        if not search.custom:
            return getters.widened_search(self.state, search)
        return search

    def filtered_variants(self, search: VariantSearch | FilterConfig | None = None) -> list[Variant]:
        """Variants matching a saved search or filter config. No filter returns all variants."""
        if search is None:
            return list(self.state.variants)
        config = search.filter_config if isinstance(search, VariantSearch) else search
        return filter_variants(self.state.variants, config)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    async def save_settings(self) -> bool:
        """Persist the current settings. Failures raise a red notification."""
        try:
            await self.data_service.save_settings_to_local(self.state.settings)
        except Exception as e:
            if self.action_logger:
                self.action_logger.log_settings_error(e)
            self.activate_notification(
                color=ERROR_COLOR,
                message=f"There was a problem saving settings: {_error_message(e)}",
            )
            return False

        if self.action_logger:
            self.action_logger.log_settings_saved(len(self.state.settings.samples))
        return True

    def download_settings(self, directory: str | Path = ".") -> Path:
        """Export the current settings as mitoSettings.json."""
        path = export_settings(self.state.settings, directory)
        if self.action_logger:
            self.action_logger.log_settings_exported(path)
        return path

    # ------------------------------------------------------------------
    # Notifications
    # ------------------------------------------------------------------

    def activate_notification(self, **options: Any) -> Notification:
        """Show a notification. Options override the defaults."""
        self.state.snackbar = Notification.activated(**options)
        return self.state.snackbar

    def close_notification(self) -> Notification:
        """Dismiss the notification, resetting it to the defaults."""
        self.state.snackbar = Notification.defaults()
        return self.state.snackbar


def _search_name(search: VariantSearch | Mapping[str, Any] | None) -> str | None:
    if isinstance(search, VariantSearch):
        return search.name
    return (search or {}).get("name")


def _search_custom(search: VariantSearch | Mapping[str, Any] | None) -> bool:
    if isinstance(search, VariantSearch):
        return search.custom
    return bool((search or {}).get("custom"))
