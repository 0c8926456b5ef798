"""OpenWeather One Call 3.0 schemas and the aggregate used by the weather formatters."""

from typing import Literal

from pydantic import BaseModel, Field

ReportType = Literal["today", "tomorrow"]


class WeatherCondition(BaseModel):
    id: int = 0
    main: str = ""
    description: str = ""
    icon: str = ""


class HourlyData(BaseModel):
    dt: int
    temp: float = 0.0
    feels_like: float = 0.0
    pressure: int = 0
    humidity: int = 0
    dew_point: float = 0.0
    uvi: float = 0.0
    clouds: int = 0
    visibility: int = 0
    wind_speed: float = 0.0
    wind_deg: int = 0
    wind_gust: float = 0.0
    weather: list[WeatherCondition] = Field(default_factory=list)
    pop: float = 0.0


class OneCallResponse(BaseModel):
    lat: float
    lon: float
    timezone: str = ""
    timezone_offset: int = 0
    hourly: list[HourlyData] = Field(default_factory=list)


class TemperatureSummary(BaseModel):
    min: float = 0.0
    max: float = 0.0
    afternoon: float = 0.0
    night: float = 0.0
    evening: float = 0.0
    morning: float = 0.0


class AfternoonValue(BaseModel):
    afternoon: float = 0.0


class PrecipitationSummary(BaseModel):
    total: float = 0.0


class WindDetail(BaseModel):
    speed: float = 0.0
    direction: float = 0.0


class WindSummary(BaseModel):
    max: WindDetail = Field(default_factory=WindDetail)


class DailySummaryResponse(BaseModel):
    """``/onecall/day_summary`` payload."""

    lat: float
    lon: float
    tz: str = ""
    date: str = ""
    units: str = ""
    cloud_cover: AfternoonValue = Field(default_factory=AfternoonValue)
    humidity: AfternoonValue = Field(default_factory=AfternoonValue)
    precipitation: PrecipitationSummary = Field(default_factory=PrecipitationSummary)
    temperature: TemperatureSummary = Field(default_factory=TemperatureSummary)
    pressure: AfternoonValue = Field(default_factory=AfternoonValue)
    wind: WindSummary = Field(default_factory=WindSummary)


class OverviewResponse(BaseModel):
    """``/onecall/overview`` payload."""

    lat: float
    lon: float
    tz: str = ""
    date: str = ""
    units: str = ""
    weather_overview: str = ""


class WeatherReport(BaseModel):
    """Everything the weather formatters and prompt need for one day."""

    date: str
    report_type: ReportType
    latitude: float
    longitude: float
    weather_overview: str
    timezone: str
    daily_aggregate: DailySummaryResponse
    hourly_forecast: list[HourlyData]
    current_time_local: str
