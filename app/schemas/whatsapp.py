"""Request and response schemas for the /wa endpoints."""

from typing import Any

from pydantic import BaseModel, Field

from app.core.settings import settings
from app.schemas.weather import ReportType

_NUMBERS_DESCRIPTION = "Recipient numbers with country code and no leading 0 or +, e.g. 6285727771234"


class WhatsappMessagesRequest(BaseModel):
    """Request body for /wa/messages."""

    messages: str = Field(..., min_length=1, description="Message to send", examples=["Hello, this is a test message"])
    whatsapp_numbers: list[str] = Field(
        ...,
        min_length=1,
        max_length=settings.max_recipients,
        description=_NUMBERS_DESCRIPTION,
        examples=[["6285727771234", "6285667889887"]],
    )
    disconnect_after: bool = Field(default=False, description="Tear the session down once the broadcast ends")


class NewsSendRequest(BaseModel):
    """Request body for /wa/news."""

    whatsapp_numbers: list[str] = Field(
        ...,
        min_length=1,
        max_length=settings.max_recipients,
        description=_NUMBERS_DESCRIPTION,
    )
    category: str = Field(
        ...,
        min_length=1,
        description="business, entertainment, general, health, science, sports or technology",
        examples=["business"],
    )
    using_llm: bool = Field(default=False, description="Append an AI summary of the headlines")
    disconnect_after: bool = False


class WeatherSendRequest(BaseModel):
    """Request body for /wa/weathers."""

    type: ReportType = Field(..., examples=["today"])
    lat: float = Field(..., ge=-90, le=90, examples=[-6.2617])
    lon: float = Field(..., ge=-180, le=180, examples=[106.8103])
    whatsapp_numbers: list[str] = Field(
        ...,
        min_length=1,
        max_length=settings.max_recipients,
        description=_NUMBERS_DESCRIPTION,
    )
    using_llm: bool = Field(default=False, description="Let the LLM write the report body")
    disconnect_after: bool = False


class MessageResponse(BaseModel):
    error: bool = False
    message: str


class DataResponse(BaseModel):
    error: bool = False
    message: str
    data: Any = None


class StatusData(BaseModel):
    is_connected: bool
    is_pairing_ready: bool
    pairing_code: str


class StatusResponse(DataResponse):
    data: StatusData
