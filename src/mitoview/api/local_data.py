"""Local data service client for settings, variants and deletions.

ARCHITECTURE:
    ReviewSession → LocalDataClient → local data server → raw JSON

Fetches the raw records the review session normalizes, and persists the
reviewer's settings back to the server.

Key Design:
- Async HTTP with connection pooling (httpx.AsyncClient)
- Retry with exponential backoff (tenacity)
- Raw JSON out; validation happens in the session
- Context manager for session cleanup
"""

from typing import Any, Protocol

import httpx
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from mitoview.models.settings import Settings


class LocalDataAPIError(Exception):
    """Exception raised for local data service errors."""

    pass


class DataService(Protocol):
    """Collaborators the review session loads from and saves to."""

    async def load_settings(self) -> dict[str, Any]: ...

    async def get_variants(self) -> list[dict[str, Any]]: ...

    async def get_deletions(self) -> dict[str, Any]: ...

    async def save_settings_to_local(self, settings: Settings) -> None: ...


class LocalDataClient:
    """Client for the local MitoView data server.

    Endpoints (relative to ``base_url``):
    - GET /settings: persisted settings
    - GET /variants: raw variant calls
    - GET /deletions: deletion calls keyed by sample id
    - POST /settings: persist settings
    """

    DEFAULT_BASE_URL = "http://localhost:3000/api"
    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        max_retries: int = 3,
    ) -> None:
        """Initialize the local data client.

        Args:
            base_url: Root URL of the data server
            timeout: Request timeout in seconds
            max_retries: Maximum number of retry attempts
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.max_retries = max_retries
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "LocalDataClient":
        """Async context manager entry."""
        self._client = httpx.AsyncClient(timeout=self.timeout)
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self._client

    @retry(
        retry=retry_if_exception_type((httpx.HTTPError, httpx.TimeoutException)),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=2, max=10),
        reraise=True,
    )
    async def _request(self, method: str, path: str, json: Any = None) -> Any:
        """Send a request to the data server.

        Args:
            method: HTTP method
            path: Endpoint path (e.g., "/variants")
            json: Optional JSON body

        Returns:
            Decoded JSON response, or None for an empty body
        """
        client = self._get_client()
        response = await client.request(method, f"{self.base_url}{path}", json=json)
        response.raise_for_status()
        if not response.content:
            return None
        return response.json()

    async def _fetch(self, path: str, what: str) -> Any:
        try:
            return await self._request("GET", path)
        except httpx.HTTPStatusError as e:
            raise LocalDataAPIError(f"HTTP error fetching {what}: {e.response.status_code}")
        except (httpx.HTTPError, ValueError) as e:
            raise LocalDataAPIError(f"Failed to fetch {what}: {e}")

    async def load_settings(self) -> dict[str, Any]:
        """Fetch persisted settings. A missing settings document loads as empty."""
        return await self._fetch("/settings", "settings") or {}

    async def get_variants(self) -> list[dict[str, Any]]:
        """Fetch raw variant records."""
        return await self._fetch("/variants", "variants") or []

    async def get_deletions(self) -> dict[str, Any]:
        """Fetch deletions keyed by sample id."""
        return await self._fetch("/deletions", "deletions") or {}

    async def save_settings_to_local(self, settings: Settings) -> None:
        """Persist settings on the data server.

        Raises:
            LocalDataAPIError: If the server rejects the settings
        """
        try:
            await self._request("POST", "/settings", json=settings.to_json_dict())
        except httpx.HTTPStatusError as e:
            raise LocalDataAPIError(f"HTTP error saving settings: {e.response.status_code}")
        except httpx.HTTPError as e:
            raise LocalDataAPIError(f"Failed to save settings: {e}")
