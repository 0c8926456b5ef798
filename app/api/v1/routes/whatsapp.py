"""Session status, logout and free-text broadcast endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from app.api.deps import get_notifier_service, get_session_manager
from app.core.errors import InitializationError, NotConnected, SessionNotReady, TransportError
from app.schemas.whatsapp import (
    DataResponse,
    MessageResponse,
    StatusData,
    StatusResponse,
    WhatsappMessagesRequest,
)
from app.services.broadcast_dispatcher import summarize_outcomes
from app.services.notifier_service import NotifierService
from app.services.session_manager import SessionManager

router = APIRouter(prefix="/wa")


@router.get("/status", response_model=StatusResponse)
async def whatsapp_status(session_manager: SessionManager = Depends(get_session_manager)) -> StatusResponse:
    """Connection state plus the pairing code to link a device, when one is pending."""
    try:
        status = await session_manager.status()
    except InitializationError as exc:
        raise HTTPException(status_code=500, detail=f"Failed Initiate Whatsapp: {exc}") from exc
    return StatusResponse(message="WhatsApp Status", data=StatusData(**status.as_dict()))


@router.post("/logout", response_model=MessageResponse)
async def whatsapp_logout(session_manager: SessionManager = Depends(get_session_manager)) -> MessageResponse:
    try:
        await session_manager.logout()
    except InitializationError as exc:
        raise HTTPException(status_code=500, detail=f"Failed Initiate Whatsapp: {exc}") from exc
    except (NotConnected, TransportError) as exc:
        raise HTTPException(status_code=500, detail=f"Failed Logout Whatsapp: {exc}") from exc
    return MessageResponse(message="Logout success")


@router.post("/reset", response_model=MessageResponse)
async def whatsapp_reset(session_manager: SessionManager = Depends(get_session_manager)) -> MessageResponse:
    """Drop the current session and any cached startup failure; the next call reconnects."""
    disconnected = await session_manager.teardown()
    message = "Reset success" if disconnected else "Reset success, no active connection"
    return MessageResponse(message=message)


@router.post("/messages", response_model=DataResponse)
async def send_messages(
    payload: WhatsappMessagesRequest,
    notifier_service: NotifierService = Depends(get_notifier_service),
) -> DataResponse:
    """Send one custom text to every number in the request."""
    try:
        outcomes = await notifier_service.send_messages(
            payload.messages,
            payload.whatsapp_numbers,
            disconnect_after=payload.disconnect_after,
        )
    except (InitializationError, SessionNotReady) as exc:
        raise HTTPException(status_code=500, detail=f"Failed to send messages: {exc}") from exc
    return DataResponse(message="Send Messages to Whatsapp", data=summarize_outcomes(outcomes))
