"""Data models for MitoView."""

from mitoview.models.variant import Consequence, Variant
from mitoview.models.search import FilterConfig, VariantSearch
from mitoview.models.settings import SampleSettings, Settings
from mitoview.models.state import AppState, Notification

__all__ = [
    "Consequence",
    "Variant",
    "FilterConfig",
    "VariantSearch",
    "SampleSettings",
    "Settings",
    "AppState",
    "Notification",
]
