"""Fan one rendered message out to many recipients."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from app.core.errors import SendFailure, SessionNotReady
from app.services.session_manager import SessionManager

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DispatchOutcome:
    recipient: str
    success: bool
    error: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {"recipient": self.recipient, "success": self.success, "error": self.error}


def summarize_outcomes(outcomes: Sequence[DispatchOutcome]) -> dict[str, Any]:
    """Counts plus per-recipient detail, as returned by the broadcast routes."""
    sent = sum(1 for outcome in outcomes if outcome.success)
    return {
        "sent": sent,
        "failed": len(outcomes) - sent,
        "outcomes": [outcome.as_dict() for outcome in outcomes],
    }


class BroadcastDispatcher:
    """Sequential best-effort broadcast over the shared session.

    Sends go out in recipient order, one attempt each. A failing recipient is
    logged and recorded; it never stops the remaining sends.
    """

    def __init__(self, session_manager: SessionManager, send_delay_seconds: float = 0.0) -> None:
        self._session_manager = session_manager
        self._send_delay_seconds = send_delay_seconds

    async def dispatch(
        self,
        body: str,
        recipients: Sequence[str],
        *,
        disconnect_after: bool = False,
    ) -> list[DispatchOutcome]:
        """Send ``body`` to every recipient.

        Raises:
            InitializationError: the session could not be created.
            SessionNotReady: the session exists but is not live; nothing was sent.

        With ``disconnect_after`` the session is torn down even when the
        pre-flight fails, which also clears a cached initialization error.
        """
        outcomes: list[DispatchOutcome] = []
        try:
            session = await self._session_manager.acquire_session()
            if not session.is_live():
                raise SessionNotReady("WhatsApp client is not connected")

            for index, recipient in enumerate(recipients):
                if index and self._send_delay_seconds:
                    await asyncio.sleep(self._send_delay_seconds)
                try:
                    await session.send_text(recipient, body)
                except Exception as exc:
                    failure = SendFailure(recipient, str(exc))
                    logger.warning("Error sending message on number %s error: %s", recipient, exc)
                    outcomes.append(DispatchOutcome(recipient=recipient, success=False, error=str(failure)))
                    continue
                logger.info("Message sent successfully to %s", recipient)
                outcomes.append(DispatchOutcome(recipient=recipient, success=True))
        finally:
            if disconnect_after:
                await self._session_manager.teardown()

        failed = sum(1 for outcome in outcomes if not outcome.success)
        logger.info("Broadcast finished: %d recipients, %d failed", len(outcomes), failed)
        return outcomes
