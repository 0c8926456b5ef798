"""WhatsApp-formatted weather reports, with or without an LLM-written body."""

from __future__ import annotations

from datetime import datetime

from app.schemas.weather import WeatherReport

WEATHER_FOOTER = "Powered by OpenWeather"

CONDITION_EMOJI = {
    "Clear": "☀️",
    "Clouds": "☁️",
    "Rain": "🌧️",
    "Drizzle": "🌦️",
    "Thunderstorm": "⛈️",
    "Snow": "❄️",
    "Mist": "🌫️",
    "Fog": "🌫️",
    "Haze": "🌫️",
}

# Offsets into the 24-hour window used for the "key hours" section.
KEY_HOURS = ((6, "Morning"), (12, "Afternoon"), (18, "Evening"))


def _report_label(report: WeatherReport) -> str:
    return "TOMORROW'S" if report.report_type == "tomorrow" else "TODAY'S"


def format_weather_message(content: str, report: WeatherReport) -> str:
    """Wrap an LLM-written report with the standard header and footer."""
    header = f"🌤️ *{_report_label(report)} WEATHER FORECAST* 🌤️\n\n"
    return f"{header}{content}\n\n{WEATHER_FOOTER}"


def format_weather_message_manual(report: WeatherReport) -> str:
    daily = report.daily_aggregate
    temperature = daily.temperature
    precipitation = daily.precipitation.total
    lines = [
        f"🌤️ *{_report_label(report)} WEATHER FORECAST* 🌤️",
        f"📍 Coordinates: [{report.latitude:.4f}, {report.longitude:.4f}]",
        f"📅 Date: {report.date}",
        f"🌐 Timezone: {report.timezone}",
        "",
        "*📝 OVERVIEW*",
        report.weather_overview,
        "",
        "*🌡️ TEMPERATURE*",
        f"• Min: {temperature.min:.1f}°C | Max: {temperature.max:.1f}°C",
        f"• Morning: {temperature.morning:.1f}°C | Afternoon: {temperature.afternoon:.1f}°C",
        f"• Evening: {temperature.evening:.1f}°C | Night: {temperature.night:.1f}°C",
        "",
        "*☁️ CONDITIONS*",
        f"• Humidity: {daily.humidity.afternoon:.0f}%",
        f"• Cloud Cover: {daily.cloud_cover.afternoon:.0f}%",
        f"• Precipitation: {precipitation:.1f}mm",
        f"• Wind: {daily.wind.max.speed:.1f} m/s at {daily.wind.max.direction:.0f}°",
        f"• Pressure: {daily.pressure.afternoon:.0f} hPa",
        "",
        "*⏰ KEY HOURS FORECAST*",
    ]

    if report.hourly_forecast:
        for offset, label in KEY_HOURS:
            if offset >= len(report.hourly_forecast):
                continue
            point = report.hourly_forecast[offset]
            time_label = datetime.fromtimestamp(point.dt).strftime("%H:%M")
            description, emoji = "No data", "❓"
            if point.weather:
                description = point.weather[0].description
                emoji = CONDITION_EMOJI.get(point.weather[0].main, "🌤️")
            lines.append(
                f"• {label} ({time_label}): {emoji} {point.temp:.1f}°C, {description}, "
                f"{point.humidity}% humidity, {point.pop * 100:.0f}% chance of rain"
            )
    else:
        lines.append("• Hourly forecast data not available")

    lines += ["", "*💡 RECOMMENDATIONS*"]
    if precipitation > 0:
        lines.append("• Carry an umbrella or raincoat ☔")
    if temperature.max > 30:
        lines.append("• Stay hydrated and wear light clothing 💧")
        lines.append("• Use sunscreen if going outdoors 🧴")
    elif temperature.min < 15:
        lines.append("• Wear warm clothing, especially in the morning/evening 🧥")
    if daily.wind.max.speed > 10:
        lines.append("• Expect strong winds - secure loose items outdoors 💨")

    lines += ["", "*🔑 KEY TAKEAWAYS*"]
    if precipitation > 5:
        lines.append("• Expect significant rainfall, plan indoor activities ☔")
    elif precipitation > 0:
        lines.append("• Light rain possible, keep an umbrella handy 🌂")
    else:
        lines.append("• Dry conditions expected, no rain gear needed 👍")
    if temperature.max - temperature.min > 10:
        lines.append("• Large temperature swings throughout the day, dress in layers 🧥➡️👕")

    lines += ["", "*💭 WEATHER WISDOM*"]
    if precipitation > 0:
        lines.append('"The best thing one can do when it\'s raining is to let it rain." - Henry W. Longfellow')
    elif daily.cloud_cover.afternoon > 70:
        lines.append(
            '"Clouds come floating into my life, no longer to carry rain or usher storm, '
            'but to add color to my sunset sky." - Rabindranath Tagore'
        )
    else:
        lines.append(
            '"Wherever you go, no matter what the weather, always bring your own sunshine." - Anthony J. D\'Angelo'
        )

    lines += ["", "*Weather data provided by OpenWeather*"]
    return "\n".join(lines)
