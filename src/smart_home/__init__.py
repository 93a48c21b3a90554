"""
smart-home: an in-memory registry of a smart home.

This library provides the structural backbone of a home inventory:
- House → Room → Device container hierarchy with unique names per level
- Device capability abstraction for externally supplied device types
- Pluggable Reporter strategies that render a house as text
"""

from smart_home.core.device import Device
from smart_home.core.errors import DuplicateNameError, DuplicateRoomError, DuplicateDeviceError
from smart_home.core.room import Room
from smart_home.core.house import House
from smart_home.reports.base import Reporter

__version__ = "0.1.0"

__all__ = [
    "Device",
    "DuplicateNameError",
    "DuplicateRoomError",
    "DuplicateDeviceError",
    "Room",
    "House",
    "Reporter",
]
