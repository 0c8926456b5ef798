"""Test doubles shared by the session, dispatcher and route tests."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from typing import Any

from app.core.errors import TransportError
from app.interfaces.session_store import SessionStore
from app.interfaces.transport_client import PairingEvent, TransportClient
from app.models.device import Device
from app.providers.storage.memory_store import MemorySessionStore

PAIRED_JID = "6285727771234@s.whatsapp.net"


async def settle(rounds: int = 10) -> None:
    """Let background tasks (the pairing consumer) run."""
    for _ in range(rounds):
        await asyncio.sleep(0)


def paired_store() -> MemorySessionStore:
    return MemorySessionStore(Device(jid=PAIRED_JID, credentials={}))


class FakeTransport(TransportClient):
    """Transport double that records every call and lets tests drive pairing."""

    def __init__(
        self,
        device: Device,
        session_store: SessionStore,
        *,
        connect_error: Exception | None = None,
        logout_error: Exception | None = None,
        disconnect_error: Exception | None = None,
        pairing_events_error: Exception | None = None,
        fail_for: set[str] | None = None,
        connect_yields: int = 3,
    ) -> None:
        self.device = device
        self.session_store = session_store
        self.connect_error = connect_error
        self.logout_error = logout_error
        self.disconnect_error = disconnect_error
        self.pairing_events_error = pairing_events_error
        self.fail_for = fail_for or set()
        self.connect_yields = connect_yields
        self.calls: list[Any] = []
        self.sent: list[tuple[str, str]] = []
        self.connected = False
        self.identity = device.jid is not None
        self._queue: asyncio.Queue[PairingEvent | Exception | None] | None = None

    def pairing_events(self) -> AsyncIterator[PairingEvent]:
        self.calls.append("pairing_events")
        if self.pairing_events_error is not None:
            raise self.pairing_events_error
        self._queue = asyncio.Queue()
        return self._iterate(self._queue)

    async def _iterate(self, queue: asyncio.Queue[PairingEvent | Exception | None]) -> AsyncIterator[PairingEvent]:
        while True:
            event = await queue.get()
            if event is None:
                return
            if isinstance(event, Exception):
                raise event
            yield event

    async def emit_code(self, code: str) -> None:
        assert self._queue is not None
        self._queue.put_nowait(PairingEvent(kind="code", code=code))
        await settle()

    async def fail_pairing_stream(self, error: Exception) -> None:
        assert self._queue is not None
        self._queue.put_nowait(error)
        await settle()

    async def complete_pairing(self) -> None:
        assert self._queue is not None
        self.identity = True
        self.device.jid = PAIRED_JID
        self.session_store.save_identity(self.device)
        self._queue.put_nowait(PairingEvent(kind="success"))
        await settle()

    async def connect(self) -> None:
        self.calls.append("connect")
        # Yield so concurrent acquirers really overlap with the connect.
        await settle(self.connect_yields)
        if self.connect_error is not None:
            raise self.connect_error
        self.connected = True

    async def disconnect(self) -> None:
        self.calls.append("disconnect")
        if self.disconnect_error is not None:
            raise self.disconnect_error
        self.connected = False

    async def logout(self) -> None:
        self.calls.append("logout")
        if self.logout_error is not None:
            raise self.logout_error
        self.identity = False
        self.session_store.delete_identity()

    async def send_text(self, recipient: str, body: str) -> None:
        self.calls.append(("send_text", recipient))
        if recipient in self.fail_for:
            raise TransportError(f"recipient {recipient} unreachable")
        self.sent.append((recipient, body))

    def is_connected(self) -> bool:
        return self.connected

    def has_stored_identity(self) -> bool:
        return self.identity


class FakeTransportFactory:
    """Builds ``FakeTransport`` objects and keeps them for assertions."""

    def __init__(self, **transport_kwargs: Any) -> None:
        self.transport_kwargs = transport_kwargs
        self.created: list[FakeTransport] = []

    def __call__(self, device: Device, session_store: SessionStore) -> FakeTransport:
        transport = FakeTransport(device, session_store, **self.transport_kwargs)
        self.created.append(transport)
        return transport

    @property
    def last(self) -> FakeTransport:
        return self.created[-1]


class FailingTransportFactory:
    """Factory whose transport cannot be built; counts the attempts."""

    def __init__(self) -> None:
        self.attempts = 0

    def __call__(self, device: Device, session_store: SessionStore) -> FakeTransport:
        self.attempts += 1
        raise OSError("transport driver missing")


class FailingStore(MemorySessionStore):
    def get_first_device(self) -> Device | None:
        raise OSError("database unavailable")


class EmptyStore(MemorySessionStore):
    def get_first_device(self) -> Device | None:
        return None
