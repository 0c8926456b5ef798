"""FastAPI entrypoint for the WhatsApp notifier."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.v1.router import api_router
from app.core.settings import Settings, settings
from app.db.session import get_session_factory
from app.interfaces.ai_provider import AIProvider
from app.providers.ai.openai_ai import OpenAIProvider
from app.providers.data_sources.newsapi import NewsAPIClient
from app.providers.data_sources.openweather import OpenWeatherClient
from app.providers.storage.sql_store import SqlSessionStore
from app.providers.transport.console_transport import ConsoleTransport
from app.services.broadcast_dispatcher import BroadcastDispatcher
from app.services.notifier_service import NotifierService
from app.services.session_manager import SessionManager

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def build_notifier_service(config: Settings, session_manager: SessionManager) -> NotifierService:
    """Wire providers that have credentials configured; the rest stay unset."""
    news_source = None
    if config.newsapi_api_key:
        news_source = NewsAPIClient(config.newsapi_api_key, timeout=config.http_timeout_seconds)
    weather_source = None
    if config.openweather_api_key:
        weather_source = OpenWeatherClient(config.openweather_api_key, timeout=config.http_timeout_seconds)
    ai_provider: AIProvider | None = None
    if config.openai_api_key:
        ai_provider = OpenAIProvider(config.openai_api_key, config.openai_model, config.openai_base_url)

    return NotifierService(
        BroadcastDispatcher(session_manager, send_delay_seconds=config.dispatch_send_delay_seconds),
        news_source=news_source,
        weather_source=weather_source,
        ai_provider=ai_provider,
        news_page_size=config.news_page_size,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    session_manager = SessionManager(SqlSessionStore(get_session_factory()), ConsoleTransport)
    app.state.session_manager = session_manager
    app.state.notifier_service = build_notifier_service(settings, session_manager)
    logger.info("%s %s started (%s)", settings.app_name, settings.app_version, settings.environment)
    yield
    if session_manager.current_session is not None:
        await session_manager.teardown()


app = FastAPI(title=settings.app_name, version=settings.app_version, lifespan=lifespan)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": True, "message": str(exc.detail)})


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    message = "Invalid request body"
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{field}: {first.get('msg', 'invalid value')}" if field else str(first.get("msg", message))
    return JSONResponse(status_code=400, content={"error": True, "message": message})


@app.get("/")
async def health_check() -> dict[str, str]:
    """Simple health endpoint to validate service status."""
    return {"status": "ok", "message": "WhatsApp notifier is running"}


# Mount API v1 routes under /api/v1.
app.include_router(api_router, prefix="/api/v1")
