"""Exceptions raised when a name uniqueness invariant would be violated."""


class DuplicateNameError(ValueError):
    """
    An item with the same name is already present in its container.

    Attributes:
        name: The conflicting name
    """

    def __init__(self, name: str, message: str) -> None:
        super().__init__(message)
        self.name = name


class DuplicateRoomError(DuplicateNameError):
    """A room with the same name is already part of the house."""

    def __init__(self, name: str) -> None:
        super().__init__(name, f"room {name} already constructed")


class DuplicateDeviceError(DuplicateNameError):
    """A device with the same name is already plugged into the room."""

    def __init__(self, name: str) -> None:
        super().__init__(name, f"Device with name {name} already plugged")
