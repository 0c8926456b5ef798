"""Interface contract for chat-network transport clients."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator
from dataclasses import dataclass
from typing import Literal

PairingEventKind = Literal["code", "success"]


@dataclass(frozen=True, slots=True)
class PairingEvent:
    """One item of the pairing feed: a fresh code to show, or pairing success."""

    kind: PairingEventKind
    code: str = ""


class TransportClient(ABC):
    """Connection to the chat network for one linked device.

    Every coroutine raises ``TransportError`` when the network call fails.
    """

    @abstractmethod
    async def connect(self) -> None:
        """Open the connection."""
        raise NotImplementedError

    @abstractmethod
    async def disconnect(self) -> None:
        """Close the connection; the stored identity is kept."""
        raise NotImplementedError

    @abstractmethod
    async def logout(self) -> None:
        """Unlink the device on the server side; fails if not connected/paired."""
        raise NotImplementedError

    @abstractmethod
    async def send_text(self, recipient: str, body: str) -> None:
        """Send a plain text message to one recipient identifier."""
        raise NotImplementedError

    @abstractmethod
    def is_connected(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def has_stored_identity(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def pairing_events(self) -> AsyncIterator[PairingEvent]:
        """Subscribe to the pairing feed; must be called before ``connect``.

        The subscription is registered when this method is called, so events
        emitted by ``connect`` are not lost. The iterator ends after a
        ``success`` event or when the transport disconnects.
        """
        raise NotImplementedError
