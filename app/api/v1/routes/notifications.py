"""News and weather broadcast endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from app.api.deps import get_notifier_service
from app.core.errors import InitializationError, InvalidCategory, ProviderError, SessionNotReady
from app.schemas.whatsapp import DataResponse, NewsSendRequest, WeatherSendRequest
from app.services.broadcast_dispatcher import summarize_outcomes
from app.services.notifier_service import NotifierService

router = APIRouter(prefix="/wa")


@router.post("/news", response_model=DataResponse)
async def send_news(
    payload: NewsSendRequest,
    notifier_service: NotifierService = Depends(get_notifier_service),
) -> DataResponse:
    """Broadcast today's top headlines for a category, optionally with an AI summary."""
    try:
        outcomes = await notifier_service.send_news(
            category=payload.category,
            recipients=payload.whatsapp_numbers,
            using_llm=payload.using_llm,
            disconnect_after=payload.disconnect_after,
        )
    except InvalidCategory as exc:
        raise HTTPException(status_code=400, detail=f"Invalid category: {exc}") from exc
    except ProviderError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    except (InitializationError, SessionNotReady) as exc:
        raise HTTPException(status_code=500, detail=f"Failed to send messages: {exc}") from exc
    return DataResponse(message="News sent to WhatsApp successfully", data=summarize_outcomes(outcomes))


@router.post("/weathers", response_model=DataResponse)
async def send_weather(
    payload: WeatherSendRequest,
    notifier_service: NotifierService = Depends(get_notifier_service),
) -> DataResponse:
    """Broadcast the daily forecast for a coordinate pair."""
    try:
        outcomes = await notifier_service.send_weather(
            report_type=payload.type,
            lat=payload.lat,
            lon=payload.lon,
            recipients=payload.whatsapp_numbers,
            using_llm=payload.using_llm,
            disconnect_after=payload.disconnect_after,
        )
    except ProviderError as exc:
        raise HTTPException(status_code=500, detail=f"Failed to get weather data: {exc}") from exc
    except (InitializationError, SessionNotReady) as exc:
        raise HTTPException(status_code=500, detail=f"Failed to send messages: {exc}") from exc
    return DataResponse(message="Send WeatherAPI to Whatsapp", data=summarize_outcomes(outcomes))
