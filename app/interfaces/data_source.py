"""Interface contracts for content providers."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from app.schemas.news import NewsResponse
from app.schemas.weather import DailySummaryResponse, OneCallResponse, OverviewResponse


class NewsSource(ABC):
    """Source of headline articles."""

    @abstractmethod
    async def top_headlines(
        self,
        *,
        category: str | None = None,
        country: str | None = None,
        query: str | None = None,
        page_size: int = 20,
        page: int = 1,
    ) -> NewsResponse:
        """Return current top headlines, optionally filtered."""
        raise NotImplementedError


class WeatherSource(ABC):
    """Source of forecast data for a coordinate pair."""

    @abstractmethod
    async def one_call(
        self,
        lat: float,
        lon: float,
        *,
        exclude: Sequence[str] = (),
        lang: str | None = None,
    ) -> OneCallResponse:
        """Return current/hourly/daily forecast data."""
        raise NotImplementedError

    @abstractmethod
    async def day_summary(self, lat: float, lon: float, *, date: str) -> DailySummaryResponse:
        """Return aggregated figures for one date (YYYY-MM-DD)."""
        raise NotImplementedError

    @abstractmethod
    async def overview(self, lat: float, lon: float, *, date: str | None = None) -> OverviewResponse:
        """Return the human-readable overview for today or tomorrow."""
        raise NotImplementedError
