"""
HTTP client for provider classification endpoints
"""

import asyncio
import httpx
import logging
from typing import Any, Optional

from category_api.core.errors import FetchError, FetchErrorKind
from category_api.schemas.category import Site

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0


class CategoryFetcher:
    """Fetches the raw classification list from one provider"""

    # Query convention providers expose for their category list
    CLASS_LIST_QUERY = "ac=list"

    def __init__(self, timeout: float = DEFAULT_TIMEOUT_SECONDS,
                 client: Optional[httpx.AsyncClient] = None):
        """
        Initialize the fetcher

        Args:
            timeout: Per-request deadline in seconds
            client: Shared client for connection reuse; a fresh one is opened per call when None
        """
        self.timeout = timeout
        self.client = client

    def class_url(self, site: Site) -> str:
        """Get the classification list URL for a site"""
        return f"{site.api}?{self.CLASS_LIST_QUERY}"

    async def fetch(self, site: Site) -> Any:
        """
        Fetch the classification payload from a site

        Args:
            site: Provider to query

        Returns:
            Decoded JSON body, unvalidated
        """
        if self.client is not None:
            return await self._fetch_with(self.client, site)

        async with httpx.AsyncClient() as client:
            return await self._fetch_with(client, site)

    async def _fetch_with(self, client: httpx.AsyncClient, site: Site) -> Any:
        url = self.class_url(site)

        try:
            # httpx timeouts are per phase; wait_for bounds the whole request
            response = await asyncio.wait_for(
                client.get(url, headers=site.headers, timeout=self.timeout,
                           follow_redirects=True),
                timeout=self.timeout,
            )
            response.raise_for_status()
        except (httpx.TimeoutException, asyncio.TimeoutError) as e:
            logger.error(f"Timed out fetching categories from {site.key} after {self.timeout}s")
            raise FetchError(FetchErrorKind.TIMEOUT, f"{url} timed out") from e
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.error(f"Provider {site.key} returned HTTP {status} for {url}")
            raise FetchError(FetchErrorKind.BAD_STATUS, f"{url} returned {status}",
                             status_code=status) from e
        except httpx.HTTPError as e:
            logger.error(f"Failed to fetch categories from {site.key}: {e}")
            raise FetchError(FetchErrorKind.NETWORK, f"{url}: {e}") from e

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Provider {site.key} returned a non-JSON body for {url}")
            raise FetchError(FetchErrorKind.INVALID_BODY, f"{url} returned invalid JSON") from e
