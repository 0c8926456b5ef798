"""WhatsApp device model."""

from __future__ import annotations

import uuid
from typing import Any

from sqlalchemy import JSON, Index, String, TIMESTAMP, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class Device(Base):
    """Linked-device credentials needed to resume a session without re-pairing.

    ``jid`` stays NULL until pairing completes; a row without a jid is a
    device that still has to be linked.
    """

    __tablename__ = "whatsapp_devices"
    __table_args__ = (Index("ix_whatsapp_devices_jid", "jid", unique=True),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    jid: Mapped[str | None] = mapped_column(String(128), nullable=True)
    push_name: Mapped[str | None] = mapped_column(String(160), nullable=True)
    credentials: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False, default=dict)
    created_at: Mapped[Any] = mapped_column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    updated_at: Mapped[Any] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    @property
    def has_identity(self) -> bool:
        return self.jid is not None
