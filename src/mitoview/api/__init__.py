"""API clients for external data sources."""

from mitoview.api.local_data import DataService, LocalDataAPIError, LocalDataClient

__all__ = ["DataService", "LocalDataAPIError", "LocalDataClient"]
