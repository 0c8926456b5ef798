"""Console transport implementation."""

from __future__ import annotations

import asyncio
import logging
import secrets
import string
from collections.abc import AsyncIterator

from app.core.errors import TransportError
from app.interfaces.session_store import SessionStore
from app.interfaces.transport_client import PairingEvent, TransportClient
from app.models.device import Device

logger = logging.getLogger(__name__)

CONSOLE_JID = "console@s.whatsapp.net"


def generate_pairing_code() -> str:
    """Return a code shaped like the ones the chat network hands out (ABCD-1234)."""
    letters = "".join(secrets.choice(string.ascii_uppercase) for _ in range(4))
    digits = "".join(secrets.choice(string.digits) for _ in range(4))
    return f"{letters}-{digits}"


class ConsoleTransport(TransportClient):
    """Logs outbound messages instead of sending them.

    Pairing is simulated: on connect without an identity a code is emitted and,
    after ``pairing_delay_seconds``, the device is marked as linked.
    """

    def __init__(self, device: Device, session_store: SessionStore, pairing_delay_seconds: float = 15.0) -> None:
        self._device = device
        self._session_store = session_store
        self._pairing_delay_seconds = pairing_delay_seconds
        self._connected = False
        self._events: asyncio.Queue[PairingEvent | None] | None = None
        self._pairing_task: asyncio.Task[None] | None = None

    def pairing_events(self) -> AsyncIterator[PairingEvent]:
        self._events = asyncio.Queue()
        return self._iterate_events(self._events)

    async def _iterate_events(self, queue: asyncio.Queue[PairingEvent | None]) -> AsyncIterator[PairingEvent]:
        while True:
            event = await queue.get()
            if event is None:
                return
            yield event
            if event.kind == "success":
                return

    async def connect(self) -> None:
        self._connected = True
        if self.has_stored_identity():
            logger.info("[ConsoleTransport] connected as %s", self._device.jid)
            return
        if self._events is not None:
            code = generate_pairing_code()
            logger.info("[ConsoleTransport] pairing code issued: %s", code)
            self._events.put_nowait(PairingEvent(kind="code", code=code))
            self._pairing_task = asyncio.create_task(self._complete_pairing())

    async def _complete_pairing(self) -> None:
        await asyncio.sleep(self._pairing_delay_seconds)
        self._device.jid = CONSOLE_JID
        self._device = self._session_store.save_identity(self._device)
        logger.info("[ConsoleTransport] device linked as %s", CONSOLE_JID)
        if self._events is not None:
            self._events.put_nowait(PairingEvent(kind="success"))

    async def disconnect(self) -> None:
        self._connected = False
        if self._pairing_task is not None and not self._pairing_task.done():
            self._pairing_task.cancel()
        if self._events is not None:
            self._events.put_nowait(None)
            self._events = None
        logger.info("[ConsoleTransport] disconnected")

    async def logout(self) -> None:
        if not self._connected or not self.has_stored_identity():
            raise TransportError("not connected")
        self._session_store.delete_identity()
        self._device.jid = None
        logger.info("[ConsoleTransport] device unlinked")

    async def send_text(self, recipient: str, body: str) -> None:
        if not self._connected:
            raise TransportError("websocket not connected")
        logger.info("[ConsoleTransport] -> %s | %s", recipient, body)

    def is_connected(self) -> bool:
        return self._connected

    def has_stored_identity(self) -> bool:
        return self._device.jid is not None
