"""
Room registry.

A Room is a named container of uniquely named devices. Devices are shared
references: callers may keep their own handle to a device after plugging it.
"""

from typing import List, Optional, Tuple
import logging

from smart_home.core.device import Device
from smart_home.core.errors import DuplicateDeviceError

logger = logging.getLogger(__name__)


class Room:
    """
    A named room holding pluggable devices.

    Responsibilities:
    - Keep devices in insertion order
    - Reject a device whose name is already plugged
    - Answer connectivity queries by device name

    Two rooms compare equal when their names are equal, regardless of devices.
    """

    def __init__(self, name: str) -> None:
        """
        Initialize an empty room.

        Args:
            name: Room name, unique within its house
        """
        self._name = name
        self._devices: List[Device] = []

    @property
    def name(self) -> str:
        """Room name."""
        return self._name

    def plug(self, device: Device) -> None:
        """
        Connect a device to this room.

        Args:
            device: The device to connect

        Raises:
            DuplicateDeviceError: If a device with the same name is already plugged
        """
        if self.get_device(device.name) is not None:
            logger.warning(f"Rejected device '{device.name}' in room '{self._name}': already plugged")
            raise DuplicateDeviceError(device.name)

        self._devices.append(device)
        logger.info(f"Plugged device '{device.name}' into room '{self._name}'")

    def unplug(self, name: str) -> None:
        """
        Disconnect the device with the given name.

        Does nothing if no such device is plugged.

        Args:
            name: Device name
        """
        for index, device in enumerate(self._devices):
            if device.name == name:
                del self._devices[index]
                logger.info(f"Unplugged device '{name}' from room '{self._name}'")
                return

        logger.debug(f"Unplug ignored: no device '{name}' in room '{self._name}'")

    def is_connected(self, device: Device) -> bool:
        """
        Check whether a device with the same name is plugged.

        Args:
            device: Any device; only its name is compared

        Returns:
            True if a device with that name is connected
        """
        return any(d.name == device.name for d in self._devices)

    def devices(self) -> List[str]:
        """
        Get the names of all connected devices.

        Returns:
            Device names in the order they were plugged
        """
        return [d.name for d in self._devices]

    def get_device(self, name: str) -> Optional[Device]:
        """
        Get a connected device by name.

        Args:
            name: Device name

        Returns:
            The Device or None if not plugged
        """
        for device in self._devices:
            if device.name == name:
                return device
        return None

    def get_devices(self) -> Tuple[Device, ...]:
        """Get a read-only view of connected devices, in plug order."""
        return tuple(self._devices)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Room):
            return NotImplemented
        return self._name == other._name

    def __hash__(self) -> int:
        return hash(self._name)

    def __str__(self) -> str:
        return f"--> Room: {self._name}\n"

    def __repr__(self) -> str:
        return f"Room(name={self._name!r}, devices={self.devices()!r})"
