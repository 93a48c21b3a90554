"""
Device capability base class.

A Device is any controllable element of the home: a socket, a thermometer, a lamp.
Concrete device types live outside this package and only need to expose a name.
"""

from abc import ABC, abstractmethod


class Device(ABC):
    """
    Base class for pluggable devices.

    A device:
    - Is identified solely by its name inside a Room
    - Keeps the same name for its whole lifetime
    - May carry any other state or operations its implementer needs
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Name used as the uniqueness key inside a room."""
        pass

    def __str__(self) -> str:
        return f"---> Device: {self.name}\n"
