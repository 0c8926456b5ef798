"""Owner of the single WhatsApp session: lazy creation, pairing, status and logout."""

from __future__ import annotations

import asyncio
import logging
import threading
from collections.abc import AsyncIterator, Callable
from dataclasses import dataclass
from enum import Enum

from app.core.errors import InitializationError, NotConnected, NotInitialized, TransportError
from app.interfaces.session_store import SessionStore
from app.interfaces.transport_client import PairingEvent, TransportClient
from app.models.device import Device

logger = logging.getLogger(__name__)

TransportFactory = Callable[[Device, SessionStore], TransportClient]


class SessionState(str, Enum):
    UNINITIALIZED = "uninitialized"
    INITIALIZING = "initializing"
    PAIRING_PENDING = "pairing_pending"
    CONNECTED = "connected"
    LOGGED_OUT = "logged_out"


@dataclass(frozen=True, slots=True)
class PairingStatus:
    code: str
    ready: bool


@dataclass(frozen=True, slots=True)
class SessionStatus:
    """Snapshot served by the status endpoint."""

    is_connected: bool
    is_pairing_ready: bool
    pairing_code: str

    def as_dict(self) -> dict[str, bool | str]:
        return {
            "is_connected": self.is_connected,
            "is_pairing_ready": self.is_pairing_ready,
            "pairing_code": self.pairing_code,
        }


class WhatsAppSession:
    """The one logical connection to the chat network.

    Pairing code, ready flag and state are only touched under ``_lock``. The
    lock is a plain thread lock held for field access only, never across an
    await, so status reads never wait on network I/O.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._transport: TransportClient | None = None
        self._state = SessionState.UNINITIALIZED
        self._pairing_code = ""
        self._pairing_ready = False
        self._pairing_task: asyncio.Task[None] | None = None

    @property
    def transport(self) -> TransportClient | None:
        return self._transport

    @property
    def state(self) -> SessionState:
        with self._lock:
            return self._state

    def set_state(self, state: SessionState) -> None:
        with self._lock:
            previous, self._state = self._state, state
        logger.debug("Session state %s -> %s", previous.value, state.value)

    def attach_transport(self, transport: TransportClient) -> None:
        with self._lock:
            if self._transport is not None:
                raise RuntimeError("Transport already attached; reset the session manager to replace it.")
            self._transport = transport

    def pairing_status(self) -> PairingStatus:
        with self._lock:
            return PairingStatus(code=self._pairing_code, ready=self._pairing_ready)

    def set_pairing_code(self, code: str) -> None:
        with self._lock:
            self._pairing_code = code
            self._pairing_ready = True

    def mark_paired(self) -> None:
        with self._lock:
            self._pairing_code = ""
            self._pairing_ready = False
            self._state = SessionState.CONNECTED

    def _is_live_locked(self) -> bool:
        transport = self._transport
        return transport is not None and transport.is_connected() and transport.has_stored_identity()

    def is_live(self) -> bool:
        """Transport attached, connected, and a paired identity is stored."""
        with self._lock:
            return self._is_live_locked()

    def status(self) -> SessionStatus:
        with self._lock:
            return SessionStatus(
                is_connected=self._is_live_locked(),
                is_pairing_ready=self._pairing_ready,
                pairing_code=self._pairing_code,
            )

    async def send_text(self, recipient: str, body: str) -> None:
        transport = self._transport
        if transport is None:
            raise NotInitialized("session has no transport attached")
        if not transport.has_stored_identity():
            raise NotConnected("client is not connected")
        await transport.send_text(recipient, body)

    async def disconnect(self) -> None:
        transport = self._transport
        if transport is None:
            raise NotInitialized("session has no transport attached")
        await transport.disconnect()

    def start_pairing_consumer(self, events: AsyncIterator[PairingEvent]) -> None:
        self._pairing_task = asyncio.create_task(self._consume_pairing_events(events))

    async def stop_pairing_consumer(self) -> None:
        task, self._pairing_task = self._pairing_task, None
        if task is None or task.done():
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass

    async def _consume_pairing_events(self, events: AsyncIterator[PairingEvent]) -> None:
        try:
            async for event in events:
                if event.kind == "code":
                    self.set_pairing_code(event.code)
                    logger.info("Pairing code received, ready for linking")
                elif event.kind == "success":
                    self.mark_paired()
                    logger.info("Pairing successful, pairing code no longer needed")
        except Exception:
            logger.exception("Pairing event stream failed")


class SessionManager:
    """Hands out one lazily created ``WhatsAppSession`` to every caller.

    ``_lock`` guards the creation decision and is held while the session
    connects, so concurrent first callers share a single attempt. A failed
    attempt is cached and re-raised until ``reset`` or ``teardown``.
    """

    def __init__(self, session_store: SessionStore, transport_factory: TransportFactory) -> None:
        self._session_store = session_store
        self._transport_factory = transport_factory
        self._lock = asyncio.Lock()
        self._session: WhatsAppSession | None = None
        self._init_error: InitializationError | None = None

    @property
    def current_session(self) -> WhatsAppSession | None:
        """The session if one was built, without triggering initialization."""
        return self._session

    async def acquire_session(self) -> WhatsAppSession:
        async with self._lock:
            if self._init_error is not None:
                raise self._init_error
            if self._session is None:
                try:
                    self._session = await self._initialize()
                except InitializationError as exc:
                    logger.error("WhatsApp session initialization failed: %s", exc)
                    self._init_error = exc
                    raise
            return self._session

    async def _initialize(self) -> WhatsAppSession:
        session = WhatsAppSession()
        session.set_state(SessionState.INITIALIZING)

        try:
            device = self._session_store.get_first_device()
        except Exception as exc:
            raise InitializationError(f"failed to open session store: {exc}") from exc
        if device is None:
            raise InitializationError("session store returned no device record")

        try:
            transport = self._transport_factory(device, self._session_store)
            has_identity = transport.has_stored_identity()
        except Exception as exc:
            raise InitializationError(f"failed to create transport: {exc}") from exc
        session.attach_transport(transport)

        if has_identity:
            try:
                await transport.connect()
            except Exception as exc:
                raise InitializationError(f"failed to connect: {exc}") from exc
            session.set_state(SessionState.CONNECTED)
            logger.info("WhatsApp client connected with existing session")
            return session

        # Subscribe before connecting so the first code is not missed.
        try:
            events = transport.pairing_events()
        except Exception as exc:
            raise InitializationError(f"failed to subscribe to pairing events: {exc}") from exc
        session.start_pairing_consumer(events)
        session.set_state(SessionState.PAIRING_PENDING)
        try:
            await transport.connect()
        except Exception as exc:
            await session.stop_pairing_consumer()
            raise InitializationError(f"failed to connect: {exc}") from exc
        logger.info("No stored identity, waiting for device pairing")
        return session

    async def status(self) -> SessionStatus:
        session = await self.acquire_session()
        return session.status()

    async def logout(self) -> None:
        """Unlink the device and drop the session; the next acquire pairs again."""
        session = await self.acquire_session()
        transport = session.transport
        if transport is None or not session.is_live():
            raise NotConnected("client is not connected")

        await transport.logout()
        try:
            await transport.disconnect()
        finally:
            session.set_state(SessionState.LOGGED_OUT)
            await self.reset()
        logger.info("WhatsApp session logged out")

    async def reset(self) -> None:
        """Forget the session and any cached failure without touching the transport."""
        async with self._lock:
            session, self._session = self._session, None
            self._init_error = None
        if session is not None:
            await session.stop_pairing_consumer()

    async def teardown(self) -> bool:
        """Disconnect (best effort) and reset. Returns True if the disconnect went through."""
        async with self._lock:
            session, self._session = self._session, None
            self._init_error = None
        if session is None:
            logger.warning("Teardown requested with no active session")
            return False

        await session.stop_pairing_consumer()
        try:
            await session.disconnect()
        except (NotInitialized, TransportError) as exc:
            logger.warning("Error disconnecting WhatsApp client: %s", exc)
            return False
        logger.info("WhatsApp client disconnected")
        return True
