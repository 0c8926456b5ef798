"""Builds news/weather messages from providers and hands them to the dispatcher."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime, timedelta

from app.core.errors import ProviderError
from app.interfaces.ai_provider import AIProvider
from app.interfaces.data_source import NewsSource, WeatherSource
from app.schemas.weather import ReportType, WeatherReport
from app.services.broadcast_dispatcher import BroadcastDispatcher, DispatchOutcome
from app.services.news_formatter import format_news_body, format_news_message
from app.services.prompts import get_news_type, news_summaries_prompt, weather_prompt
from app.services.weather_formatter import format_weather_message, format_weather_message_manual

logger = logging.getLogger(__name__)

HOURLY_WINDOW = 24


class NotifierService:
    """Thin facade over the providers, formatters and the broadcast dispatcher.

    Messages are fully rendered before the dispatcher is called, so a provider
    failure never leaves a half-sent broadcast behind.
    """

    def __init__(
        self,
        dispatcher: BroadcastDispatcher,
        *,
        news_source: NewsSource | None = None,
        weather_source: WeatherSource | None = None,
        ai_provider: AIProvider | None = None,
        news_page_size: int = 10,
    ) -> None:
        self.dispatcher = dispatcher
        self.news_source = news_source
        self.weather_source = weather_source
        self.ai_provider = ai_provider
        self.news_page_size = news_page_size

    async def send_messages(
        self,
        message: str,
        recipients: Sequence[str],
        *,
        disconnect_after: bool = False,
    ) -> list[DispatchOutcome]:
        return await self.dispatcher.dispatch(message, recipients, disconnect_after=disconnect_after)

    async def send_news(
        self,
        *,
        category: str,
        recipients: Sequence[str],
        using_llm: bool = False,
        disconnect_after: bool = False,
    ) -> list[DispatchOutcome]:
        message = await self.build_news_message(category=category, using_llm=using_llm)
        return await self.dispatcher.dispatch(message, recipients, disconnect_after=disconnect_after)

    async def build_news_message(self, *, category: str, using_llm: bool = False) -> str:
        if self.news_source is None:
            raise ProviderError("newsapi_api_key is required")
        # Validate the summarizer category before spending a NewsAPI call.
        news_type = get_news_type(category) if using_llm else None
        ai_provider = self._require_ai_provider() if using_llm else None

        news = await self.news_source.top_headlines(category=category, page_size=self.news_page_size, page=1)
        logger.info("Fetched %d %s headlines", len(news.articles), category)

        summary = None
        if ai_provider is not None and news_type is not None:
            prompt = news_summaries_prompt(format_news_body(category, news.articles), news_type)
            summary = await ai_provider.generate_response(prompt)
        return format_news_message(category, news.articles, summary=summary)

    async def send_weather(
        self,
        *,
        report_type: ReportType,
        lat: float,
        lon: float,
        recipients: Sequence[str],
        using_llm: bool = False,
        disconnect_after: bool = False,
    ) -> list[DispatchOutcome]:
        report = await self.build_weather_report(report_type=report_type, lat=lat, lon=lon)
        if using_llm:
            content = await self._require_ai_provider().generate_response(weather_prompt(report))
            message = format_weather_message(content, report)
        else:
            message = format_weather_message_manual(report)
        return await self.dispatcher.dispatch(message, recipients, disconnect_after=disconnect_after)

    async def build_weather_report(
        self,
        *,
        report_type: ReportType,
        lat: float,
        lon: float,
        now: datetime | None = None,
    ) -> WeatherReport:
        if self.weather_source is None:
            raise ProviderError("openweather_api_key is required")

        moment = now or datetime.now()
        if report_type == "tomorrow":
            moment += timedelta(days=1)
        date = moment.strftime("%Y-%m-%d")

        overview = await self.weather_source.overview(lat, lon, date=date)
        daily = await self.weather_source.day_summary(lat, lon, date=date)
        hourly = await self.weather_source.one_call(lat, lon, exclude=("current", "minutely", "daily", "alerts"))

        return WeatherReport(
            date=date,
            report_type=report_type,
            latitude=lat,
            longitude=lon,
            weather_overview=overview.weather_overview,
            timezone=overview.tz,
            daily_aggregate=daily,
            hourly_forecast=hourly.hourly[:HOURLY_WINDOW],
            current_time_local=moment.strftime("%H:%M:%S"),
        )

    def _require_ai_provider(self) -> AIProvider:
        if self.ai_provider is None:
            raise ProviderError("LLM summarizer is not configured")
        return self.ai_provider
