"""Main router for API v1."""

from fastapi import APIRouter

from app.api.v1.routes.notifications import router as notifications_router
from app.api.v1.routes.whatsapp import router as whatsapp_router

api_router = APIRouter()

api_router.include_router(whatsapp_router, tags=["Whatsapp"])
api_router.include_router(notifications_router, tags=["News"])
