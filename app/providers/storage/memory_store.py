"""In-memory device store for local runs and tests."""

from app.interfaces.session_store import SessionStore
from app.models.device import Device


class MemorySessionStore(SessionStore):
    """Holds at most one device in RAM; lost on restart."""

    def __init__(self, device: Device | None = None) -> None:
        self._device = device

    def get_first_device(self) -> Device | None:
        if self._device is None:
            self._device = Device(credentials={})
        return self._device

    def has_identity(self) -> bool:
        return self._device is not None and self._device.jid is not None

    def save_identity(self, device: Device) -> Device:
        self._device = device
        return device

    def delete_identity(self) -> None:
        self._device = None
