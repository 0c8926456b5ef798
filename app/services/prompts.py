"""Prompt templates for the LLM summarizer."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from enum import Enum

from app.core.errors import InvalidCategory
from app.schemas.weather import HourlyData, WeatherReport

WHATSAPP_FORMATTING_RULES = """IMPORTANT FORMATTING INSTRUCTIONS:
- Use WhatsApp formatting standards throughout your response
- For headers and section titles, use *asterisks for bold text*
- For emphasis within paragraphs, use _underscores for italic text_
- For lists, use proper bullet points (•) or numbers followed by periods
- For critical insights or statistics, use both *bold* and _italic_ formatting where appropriate
- Make sure all key points and takeaways are formatted in *bold* for easy visibility
- Format the final takeaways section as "*Key Takeaways:*" followed by numbered points
"""


class NewsType(str, Enum):
    BUSINESS = "business"
    TECHNOLOGY = "technology"
    SCIENCE = "science"
    GENERAL = "general"


# Extra analysis steps and report sections per category.
_NEWS_FOCUS: dict[NewsType, tuple[tuple[str, ...], tuple[str, ...]]] = {
    NewsType.BUSINESS: (
        (
            "Identify economic indicators or market signals",
            "Note corporate developments or policy changes affecting markets",
            "Analyze sector-specific performance or challenges",
        ),
        ("Market Implications", "Sectors to Watch", "Economic Indicators"),
    ),
    NewsType.TECHNOLOGY: (
        (
            "Identify emerging technologies or innovation trends",
            "Analyze competitive dynamics between tech companies or platforms",
            "Examine regulatory developments affecting technology",
        ),
        ("Innovation Highlights", "Tech Industry Dynamics", "Digital Transformation Impact"),
    ),
    NewsType.SCIENCE: (
        (
            "Evaluate the significance of research breakthroughs",
            "Analyze potential applications of scientific developments",
            "Identify interdisciplinary implications",
        ),
        ("Research Breakthroughs", "Practical Applications", "Scientific Community Developments"),
    ),
    NewsType.GENERAL: (
        (
            "Identify cross-domain patterns or interconnections",
            "Highlight societal impacts across different sectors",
            "Note emerging broad trends affecting multiple areas",
        ),
        ("Cross-Domain Connections", "Societal Impact", "Emerging Trends"),
    ),
}


def get_news_type(category: str) -> NewsType:
    try:
        return NewsType(category.lower())
    except ValueError as exc:
        raise InvalidCategory(f"invalid news type: {category}") from exc


def news_summaries_prompt(news_data: str, news_type: NewsType) -> str:
    tasks, sections = _NEWS_FOCUS[news_type]
    topic = news_type.value.upper()
    task_lines = "\n".join(f"{number}. {task}" for number, task in enumerate(tasks, start=4))
    section_lines = "\n".join(f"* {section}" for section in sections)
    return f"""You are an expert analyst specializing in {topic}.

I'll provide you with a set of recent {topic} news headlines and summaries. Your task is to:
1. Analyze these news items and identify key patterns or trends
2. Extract actionable insights relevant to {topic}
3. Highlight potential impacts for stakeholders in this field
{task_lines}

Present your analysis in a clear format under the heading "DAILY {topic} INSIGHTS" with the following sections:
* Key Trends Identified
{section_lines}
* Strategic Considerations

Here are the news items to analyze:
{news_data}

End your analysis with 2-3 key takeaways that summarize the most important insights from today's {topic} news.

{WHATSAPP_FORMATTING_RULES}"""


def format_hourly_for_prompt(hourly: Sequence[HourlyData]) -> str:
    """One line every three hours of the 24-hour window."""
    lines = []
    for index in range(0, 24, 3):
        if index >= len(hourly):
            break
        point = hourly[index]
        time_label = datetime.fromtimestamp(point.dt).strftime("%H:%M")
        weather = "No weather data"
        if point.weather:
            weather = f"{point.weather[0].main} ({point.weather[0].description})"
        lines.append(
            f"- {time_label}: {point.temp:.1f}°C, {weather}, Humidity: {point.humidity}%, "
            f"Wind: {point.wind_speed:.1f} m/s, Precipitation Chance: {point.pop * 100:.0f}%"
        )
    return "\n".join(lines) + ("\n" if lines else "")


def weather_prompt(report: WeatherReport) -> str:
    daily = report.daily_aggregate
    temperature = daily.temperature
    return f"""
You are a professional weather forecaster providing accurate and useful weather reports for WhatsApp users.

## DATA CONTEXT
I will provide you with three types of weather data for coordinates [{report.latitude:.4f}, {report.longitude:.4f}]:
1. Overview summary
2. Daily aggregate statistics
3. Hour-by-hour forecast for the next 24 hours

Your task is to analyze this data and create a concise, informative, and visually engaging WhatsApp message for {report.report_type}'s weather ({report.date}).

## LOCATION CONTEXT
First, determine the location name based on these coordinates: Latitude {report.latitude:.4f}, Longitude {report.longitude:.4f}
For example: "Jakarta, Indonesia" or "South Jakarta, Indonesia" - be as specific as possible.

## WEATHER DATA
1. Weather Overview: {report.weather_overview}
2. Daily Aggregate:
	- Temperature: Min {temperature.min:.1f}°C, Max {temperature.max:.1f}°C
	- Morning: {temperature.morning:.1f}°C, Afternoon: {temperature.afternoon:.1f}°C, Evening: {temperature.evening:.1f}°C, Night: {temperature.night:.1f}°C
	- Humidity (afternoon): {daily.humidity.afternoon:.0f}%
	- Cloud Cover (afternoon): {daily.cloud_cover.afternoon:.0f}%
	- Precipitation Total: {daily.precipitation.total:.1f}mm
	- Wind Speed (max): {daily.wind.max.speed:.1f} m/s, Direction: {daily.wind.max.direction:.0f}°
	- Pressure (afternoon): {daily.pressure.afternoon:.0f} hPa

## HOUR-BY-HOUR DATA
{format_hourly_for_prompt(report.hourly_forecast)}
## OUTPUT FORMAT
Create a WhatsApp-ready message using emojis and formatting with the following sections (must follow and have these sections):
1. HEADER: Create an eye-catching title with location and date
2. OVERVIEW: A 2-3 sentence summary of the day's weather
3. KEY METRICS: Important temperature, precipitation, and wind data
4. HOURLY HIGHLIGHTS: Key weather changes throughout the day (morning, afternoon, evening, night)
5. RECOMMENDATIONS: 3-5 practical suggestions based on the forecast (what to wear, activities to consider/avoid, precautions)
6. Key Takeaways: 2-3 concise points summarizing the most important insights from the weather report
7. Quote: some inspirational quote related to weather or nature that matches the forecast

Use appropriate weather emojis (☀️🌤️⛅🌥️☁️🌧️⛈️❄️) to make the message visually engaging.
Keep your response concise (under 1000 characters) and optimized for mobile viewing.
Format temperatures in Celsius with the degree symbol (°C)

{WHATSAPP_FORMATTING_RULES}"""
