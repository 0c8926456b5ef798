"""Domain models package."""

from app.models.device import Device

__all__ = [
    "Device",
]
