"""HTTP implementation of ListingSource."""

from __future__ import annotations

import logging
from typing import Any

import requests

from car_finder.domain.errors import CatalogFetchError
from car_finder.ports.listing_source import ListingSource

logger = logging.getLogger(__name__)

DEFAULT_LISTINGS_URL = "https://www.freetestapi.com/api/v1/cars"
DEFAULT_TIMEOUT = 10
DEFAULT_USER_AGENT = "CarFinder/0.1"


class HttpListingSource(ListingSource):
    """
    Fetches the listing payload from a fixed JSON endpoint.

    - One GET per fetch() call, no retries
    - Transport errors, HTTP >= 400 and invalid JSON become CatalogFetchError
    """

    def __init__(
        self,
        url: str = DEFAULT_LISTINGS_URL,
        timeout: int = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        session: requests.Session | None = None,
    ) -> None:
        self._url = url
        self._timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "User-Agent": user_agent,
                "Accept": "application/json",
            }
        )

    @property
    def url(self) -> str:
        return self._url

    def fetch(self) -> Any:
        logger.info("Fetching listings", extra={"url": self._url})

        try:
            response = self._session.get(self._url, timeout=self._timeout)
        except requests.RequestException as exc:
            raise CatalogFetchError(
                f"Listing source unreachable: {exc}",
                url=self._url,
            ) from exc

        if response.status_code >= 400:
            raise CatalogFetchError(
                f"Listing source answered HTTP {response.status_code}",
                url=self._url,
                status_code=response.status_code,
            )

        try:
            return response.json()
        except (ValueError, RecursionError) as exc:  # JSONDecodeError is a ValueError; deep nesting recurses
            raise CatalogFetchError(
                "Listing source returned invalid JSON",
                url=self._url,
            ) from exc
