"""SQLAlchemy-backed device credential store."""

from __future__ import annotations

import logging

from sqlalchemy import delete, select
from sqlalchemy.orm import Session, sessionmaker

from app.interfaces.session_store import SessionStore
from app.models.device import Device

logger = logging.getLogger(__name__)


class SqlSessionStore(SessionStore):
    """Keeps the linked device in the ``whatsapp_devices`` table."""

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def get_first_device(self) -> Device | None:
        with self._session_factory() as db:
            query = select(Device).order_by(Device.created_at.asc(), Device.id.asc()).limit(1)
            device = db.execute(query).scalars().first()
            if device is not None:
                return device

            device = Device(credentials={})
            db.add(device)
            try:
                db.commit()
            except Exception:
                db.rollback()
                raise
            db.refresh(device)
            logger.info("Created blank device record %s, pairing required", device.id)
            return device

    def has_identity(self) -> bool:
        with self._session_factory() as db:
            query = select(Device.id).where(Device.jid.is_not(None)).limit(1)
            return db.execute(query).first() is not None

    def save_identity(self, device: Device) -> Device:
        with self._session_factory() as db:
            merged = db.merge(device)
            try:
                db.commit()
            except Exception:
                db.rollback()
                raise
            db.refresh(merged)
            return merged

    def delete_identity(self) -> None:
        with self._session_factory() as db:
            db.execute(delete(Device))
            try:
                db.commit()
            except Exception:
                db.rollback()
                raise
        logger.info("Stored device identity deleted")
