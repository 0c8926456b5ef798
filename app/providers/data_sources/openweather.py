"""OpenWeather One Call 3.0 client."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from app.core.errors import ProviderError
from app.interfaces.data_source import WeatherSource
from app.schemas.weather import DailySummaryResponse, OneCallResponse, OverviewResponse

OPENWEATHER_BASE_URL = "https://api.openweathermap.org/data/3.0"
ONECALL_PATH = "/onecall"
DAY_SUMMARY_PATH = "/onecall/day_summary"
OVERVIEW_PATH = "/onecall/overview"
EXCLUDABLE_PARTS = ("current", "minutely", "hourly", "daily", "alerts")
UNITS = ("standard", "metric", "imperial")

ResponseT = TypeVar("ResponseT", bound=BaseModel)


def check_coordinates(lat: float, lon: float) -> None:
    if lat < -90 or lat > 90:
        raise ValueError("latitude must be between -90 and 90")
    if lon < -180 or lon > 180:
        raise ValueError("longitude must be between -180 and 180")


class OpenWeatherClient(WeatherSource):
    """Async client for the three One Call endpoints the weather report needs."""

    def __init__(
        self,
        api_key: str,
        *,
        units: str = "metric",
        base_url: str = OPENWEATHER_BASE_URL,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not api_key:
            raise ValueError("appid or API Key is required")
        if units not in UNITS:
            raise ValueError("units must be either metric or imperial or standard")
        self._api_key = api_key
        self._units = units
        self._base_url = base_url
        self._timeout = timeout
        self._transport = transport

    async def one_call(
        self,
        lat: float,
        lon: float,
        *,
        exclude: Sequence[str] = (),
        lang: str | None = None,
    ) -> OneCallResponse:
        extra: dict[str, Any] = {}
        if exclude:
            unknown = [part for part in exclude if part not in EXCLUDABLE_PARTS]
            if unknown:
                raise ValueError("exclude value must be either current, minutely, hourly, daily or alerts")
            extra["exclude"] = ",".join(dict.fromkeys(exclude))
        if lang:
            extra["lang"] = lang
        return await self._get(ONECALL_PATH, lat, lon, extra, OneCallResponse)

    async def day_summary(self, lat: float, lon: float, *, date: str) -> DailySummaryResponse:
        return await self._get(DAY_SUMMARY_PATH, lat, lon, {"date": date}, DailySummaryResponse)

    async def overview(self, lat: float, lon: float, *, date: str | None = None) -> OverviewResponse:
        extra = {"date": date} if date else {}
        return await self._get(OVERVIEW_PATH, lat, lon, extra, OverviewResponse)

    async def _get(
        self,
        path: str,
        lat: float,
        lon: float,
        extra: dict[str, Any],
        model: type[ResponseT],
    ) -> ResponseT:
        check_coordinates(lat, lon)
        params = {
            "lat": f"{lat:f}",
            "lon": f"{lon:f}",
            "appid": self._api_key,
            "units": self._units,
            **extra,
        }
        async with httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._timeout,
            transport=self._transport,
        ) as client:
            try:
                response = await client.get(path, params=params, headers={"Accept": "application/json"})
            except httpx.HTTPError as exc:
                raise ProviderError(f"OpenWeather request failed: {exc}") from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise ProviderError(f"OpenWeather returned unreadable body ({response.status_code})") from exc

        if response.status_code != httpx.codes.OK:
            if not isinstance(payload, dict):
                raise ProviderError(f"OpenWeather request failed with status {response.status_code}")
            raise ProviderError(
                f"error message: {payload.get('message')}, error code: {payload.get('cod') or payload.get('code')}, "
                f"error parameters: {payload.get('parameters', [])}"
            )

        try:
            return model.model_validate(payload)
        except ValidationError as exc:
            raise ProviderError(f"OpenWeather response did not match {model.__name__}") from exc
