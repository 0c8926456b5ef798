"""Interface contract for device-credential storage."""

from abc import ABC, abstractmethod

from app.models.device import Device


class SessionStore(ABC):
    """Durable storage of the linked-device identity."""

    @abstractmethod
    def get_first_device(self) -> Device | None:
        """Return the stored device, creating a blank (unpaired) one if none exists."""
        raise NotImplementedError

    @abstractmethod
    def has_identity(self) -> bool:
        """Return True when a paired device identity is stored."""
        raise NotImplementedError

    @abstractmethod
    def save_identity(self, device: Device) -> Device:
        """Persist identity material after a successful pairing."""
        raise NotImplementedError

    @abstractmethod
    def delete_identity(self) -> None:
        """Forget the stored identity so the next session has to pair again."""
        raise NotImplementedError
