"""HTTP client for the newsdata.io ``/news`` endpoint."""

from __future__ import annotations

import json
import logging
from typing import Dict, Optional

import httpx
from pydantic import ValidationError

from .config import DEFAULT_BASE_URL, ReaderConfig
from .exceptions import DecodeError, NetworkError
from .models import FilterParameters
from .schemas import FetchResult

LOGGER = logging.getLogger(__name__)

JSON_HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}


def build_query_params(
    api_key: str,
    category: Optional[str],
    language: str,
    country: Optional[str] = None,
) -> Dict[str, str]:
    """Build the query string: ``q`` and ``country`` only when they restrict the search."""

    params = {"apikey": api_key, "language": language}
    if category and category.strip():
        params["q"] = category.strip()
    if country and country.strip():
        params["country"] = country.strip()
    return params


class NewsClient:
    """Fetch the first page of articles for a set of filters.

    The transport is injected so tests can substitute a stub; when none is
    given the client owns an :class:`httpx.AsyncClient` and closes it in
    :meth:`aclose`.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: float = 10.0,
    ) -> None:
        if not api_key:
            raise ValueError("api_key must not be empty")
        self.api_key = api_key
        self.base_url = base_url
        self._owns_client = http_client is None
        self._http_client = http_client or httpx.AsyncClient(timeout=timeout)

    @classmethod
    def from_config(
        cls, config: ReaderConfig, http_client: Optional[httpx.AsyncClient] = None
    ) -> "NewsClient":
        return cls(
            api_key=config.api_key or "",
            base_url=config.base_url,
            http_client=http_client,
            timeout=config.timeout,
        )

    async def __aenter__(self) -> "NewsClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http_client.aclose()

    async def fetch(
        self,
        category: Optional[str],
        language: str,
        country: Optional[str] = None,
    ) -> FetchResult:
        """Issue one GET request and decode the body.

        Raises :class:`NetworkError` on transport failures and non-2xx
        responses, :class:`DecodeError` when the body cannot be decoded.
        Nothing is retried.
        """

        LOGGER.debug(
            "Fetching news: category=%r, language=%s, country=%s", category, language, country
        )
        params = build_query_params(self.api_key, category, language, country)
        try:
            response = await self._http_client.get(
                self.base_url, params=params, headers=JSON_HEADERS
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            LOGGER.error("News request rejected with status %s", exc.response.status_code)
            raise NetworkError(
                f"News API returned HTTP {exc.response.status_code}", cause=exc
            ) from exc
        except httpx.HTTPError as exc:
            LOGGER.error("News request failed: %r", exc)
            raise NetworkError(f"News request failed: {exc!r}", cause=exc) from exc

        try:
            result = FetchResult.model_validate(response.json())
        except (json.JSONDecodeError, ValueError, ValidationError) as exc:
            LOGGER.error("Could not decode news response: %s", exc)
            raise DecodeError("News response did not match the expected schema", cause=exc) from exc

        LOGGER.info(
            "News API status=%s, %d of %d results",
            result.status,
            len(result.results),
            result.total_results,
        )
        return result

    async def fetch_parameters(self, params: FilterParameters) -> FetchResult:
        return await self.fetch(params.category, params.language, params.country)


__all__ = ["NewsClient", "build_query_params"]
