"""FastAPI dependencies resolving the services built at startup."""

from fastapi import Request

from app.services.notifier_service import NotifierService
from app.services.session_manager import SessionManager


def get_session_manager(request: Request) -> SessionManager:
    return request.app.state.session_manager


def get_notifier_service(request: Request) -> NotifierService:
    return request.app.state.notifier_service
