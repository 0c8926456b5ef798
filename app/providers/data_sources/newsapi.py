"""NewsAPI client."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from app.core.errors import InvalidCategory, ProviderError
from app.interfaces.data_source import NewsSource
from app.schemas.news import NewsResponse

logger = logging.getLogger(__name__)

NEWSAPI_BASE_URL = "https://newsapi.org"
TOP_HEADLINES_PATH = "/v2/top-headlines"
NEWS_CATEGORIES = ("business", "entertainment", "general", "health", "science", "sports", "technology")
SUPPORTED_COUNTRIES = ("us",)
DEFAULT_PAGE_SIZE = 20


class NewsAPIClient(NewsSource):
    """Thin async wrapper over ``/v2/top-headlines``."""

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = NEWSAPI_BASE_URL,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not api_key:
            raise ValueError("newsapi_api_key is required")
        self._api_key = api_key
        self._base_url = base_url
        self._timeout = timeout
        self._transport = transport

    async def top_headlines(
        self,
        *,
        category: str | None = None,
        country: str | None = None,
        query: str | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        page: int = 1,
    ) -> NewsResponse:
        params: dict[str, Any] = {
            "pageSize": page_size if 1 <= page_size <= 100 else DEFAULT_PAGE_SIZE,
            "page": max(page, 1),
        }
        if category:
            if category not in NEWS_CATEGORIES:
                raise InvalidCategory(
                    f"invalid category: {category}. valid categories are {', '.join(NEWS_CATEGORIES)}"
                )
            params["category"] = category
        if country:
            if country not in SUPPORTED_COUNTRIES:
                raise ProviderError(f"invalid country code: {country}, valid country code is us")
            params["country"] = country
        if query:
            params["q"] = query

        headers = {"Authorization": f"Bearer {self._api_key}", "Accept": "application/json"}
        async with httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._timeout,
            transport=self._transport,
        ) as client:
            try:
                response = await client.get(TOP_HEADLINES_PATH, params=params, headers=headers)
            except httpx.HTTPError as exc:
                raise ProviderError(f"Error Get News Data: {exc}") from exc

        try:
            news = NewsResponse.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            raise ProviderError(f"Error Get News Data: unreadable response ({response.status_code})") from exc

        if news.status != "ok":
            logger.warning("NewsAPI returned %s: %s", news.code, news.message)
            raise ProviderError(f"Failed to get news from newsapi: {news.message}")
        return news
