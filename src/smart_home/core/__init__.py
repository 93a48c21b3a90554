"""
Core components of the smart-home registry.

This package contains:
- device: Device capability base class
- room: Room registry of uniquely named devices
- house: House registry of uniquely named rooms
- errors: Duplicate-name exceptions
"""

from smart_home.core.device import Device
from smart_home.core.errors import DuplicateNameError, DuplicateRoomError, DuplicateDeviceError
from smart_home.core.room import Room
from smart_home.core.house import House

__all__ = [
    "Device",
    "DuplicateNameError",
    "DuplicateRoomError",
    "DuplicateDeviceError",
    "Room",
    "House",
]
