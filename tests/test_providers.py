"""HTTP provider clients exercised against httpx.MockTransport."""

from __future__ import annotations

import unittest

import httpx

from app.core.errors import InvalidCategory, ProviderError
from app.providers.data_sources.newsapi import NewsAPIClient
from app.providers.data_sources.openweather import OpenWeatherClient, check_coordinates


def recording_transport(handler, requests: list[httpx.Request]) -> httpx.MockTransport:
    def record(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return handler(request)

    return httpx.MockTransport(record)


class NewsAPIClientTestCase(unittest.IsolatedAsyncioTestCase):
    async def test_top_headlines_sends_params_and_bearer_token(self) -> None:
        requests: list[httpx.Request] = []
        payload = {
            "status": "ok",
            "totalResults": 1,
            "articles": [
                {
                    "source": {"id": None, "name": "Reuters"},
                    "title": "Markets rally",
                    "url": "https://example.com/a",
                    "publishedAt": "2025-04-04T14:19:00Z",
                }
            ],
        }
        transport = recording_transport(lambda request: httpx.Response(200, json=payload), requests)
        client = NewsAPIClient("secret", transport=transport)

        news = await client.top_headlines(category="business", page_size=10)

        request = requests[0]
        self.assertEqual(request.url.path, "/v2/top-headlines")
        self.assertEqual(request.url.params["category"], "business")
        self.assertEqual(request.url.params["pageSize"], "10")
        self.assertEqual(request.url.params["page"], "1")
        self.assertEqual(request.headers["Authorization"], "Bearer secret")
        self.assertEqual(news.total_results, 1)
        self.assertEqual(news.articles[0].published_at, "2025-04-04T14:19:00Z")

    async def test_out_of_range_page_size_falls_back_to_default(self) -> None:
        requests: list[httpx.Request] = []
        transport = recording_transport(
            lambda request: httpx.Response(200, json={"status": "ok", "articles": []}), requests
        )

        await NewsAPIClient("secret", transport=transport).top_headlines(page_size=500)

        self.assertEqual(requests[0].url.params["pageSize"], "20")

    async def test_error_status_is_provider_error(self) -> None:
        payload = {"status": "error", "code": "apiKeyInvalid", "message": "Your API key is invalid."}
        transport = httpx.MockTransport(lambda request: httpx.Response(401, json=payload))

        with self.assertRaises(ProviderError) as ctx:
            await NewsAPIClient("bad", transport=transport).top_headlines(category="science")

        self.assertIn("Your API key is invalid.", str(ctx.exception))

    async def test_invalid_category_is_rejected_locally(self) -> None:
        requests: list[httpx.Request] = []
        transport = recording_transport(lambda request: httpx.Response(200, json={}), requests)

        with self.assertRaises(InvalidCategory):
            await NewsAPIClient("secret", transport=transport).top_headlines(category="weather")

        self.assertEqual(requests, [])

    async def test_unsupported_country_is_rejected(self) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(200, json={}))

        with self.assertRaises(ProviderError):
            await NewsAPIClient("secret", transport=transport).top_headlines(country="id")

    def test_api_key_is_required(self) -> None:
        with self.assertRaises(ValueError):
            NewsAPIClient("")


class OpenWeatherClientTestCase(unittest.IsolatedAsyncioTestCase):
    async def test_one_call_joins_exclude_and_sends_key(self) -> None:
        requests: list[httpx.Request] = []
        payload = {"lat": -6.2, "lon": 106.8, "timezone": "Asia/Jakarta", "hourly": [{"dt": 1760659200, "temp": 27.1}]}
        transport = recording_transport(lambda request: httpx.Response(200, json=payload), requests)
        client = OpenWeatherClient("owm-key", transport=transport)

        response = await client.one_call(-6.2, 106.8, exclude=("current", "daily", "current"))

        params = requests[0].url.params
        self.assertEqual(requests[0].url.path, "/data/3.0/onecall")
        self.assertEqual(params["exclude"], "current,daily")
        self.assertEqual(params["appid"], "owm-key")
        self.assertEqual(params["units"], "metric")
        self.assertEqual(response.hourly[0].temp, 27.1)

    async def test_day_summary_and_overview_paths(self) -> None:
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path.endswith("/overview"):
                return httpx.Response(200, json={"lat": 1, "lon": 2, "tz": "+07:00", "weather_overview": "Clear."})
            return httpx.Response(200, json={"lat": 1, "lon": 2, "precipitation": {"total": 1.5}})

        client = OpenWeatherClient("owm-key", transport=recording_transport(handler, requests))

        overview = await client.overview(1, 2, date="2026-10-17")
        daily = await client.day_summary(1, 2, date="2026-10-17")

        self.assertEqual([request.url.path for request in requests], [
            "/data/3.0/onecall/overview",
            "/data/3.0/onecall/day_summary",
        ])
        self.assertEqual(requests[1].url.params["date"], "2026-10-17")
        self.assertEqual(overview.weather_overview, "Clear.")
        self.assertEqual(daily.precipitation.total, 1.5)

    async def test_error_payload_is_provider_error(self) -> None:
        payload = {"cod": 401, "message": "Invalid API key.", "parameters": ["appid"]}
        transport = httpx.MockTransport(lambda request: httpx.Response(401, json=payload))

        with self.assertRaises(ProviderError) as ctx:
            await OpenWeatherClient("bad", transport=transport).overview(1, 2)

        self.assertEqual(
            str(ctx.exception),
            "error message: Invalid API key., error code: 401, error parameters: ['appid']",
        )

    async def test_unknown_exclude_part_is_rejected(self) -> None:
        client = OpenWeatherClient("owm-key", transport=httpx.MockTransport(lambda request: httpx.Response(200)))

        with self.assertRaises(ValueError):
            await client.one_call(1, 2, exclude=("weekly",))

    def test_coordinates_are_range_checked(self) -> None:
        check_coordinates(90, -180)
        with self.assertRaises(ValueError):
            check_coordinates(91, 0)
        with self.assertRaises(ValueError):
            check_coordinates(0, 181)


if __name__ == "__main__":
    unittest.main()
