"""
House registry.

The House owns the room collection and hands itself to Reporter strategies.
It imposes no report format.
"""

from typing import List, Optional, Tuple, TYPE_CHECKING
import logging

from smart_home.core.errors import DuplicateRoomError
from smart_home.core.room import Room

if TYPE_CHECKING:
    from smart_home.reports.base import Reporter

logger = logging.getLogger(__name__)


class House:
    """
    A named house holding uniquely named rooms.

    Responsibilities:
    - Keep rooms in insertion order
    - Reject a room that compares equal (same name) to one already added
    - Delegate report generation to a Reporter

    Does NOT format reports itself.
    """

    def __init__(self, name: str) -> None:
        """
        Initialize an empty house.

        Args:
            name: House name
        """
        self._name = name
        self._rooms: List[Room] = []

    @property
    def name(self) -> str:
        """House name."""
        return self._name

    def add(self, room: Room) -> None:
        """
        Add a room to the house.

        Args:
            room: The room to add

        Raises:
            DuplicateRoomError: If a room with the same name already exists
        """
        if room in self._rooms:
            logger.warning(f"Rejected room '{room.name}' in house '{self._name}': already exists")
            raise DuplicateRoomError(room.name)

        self._rooms.append(room)
        logger.info(f"Added room '{room.name}' to house '{self._name}'")

    def delete(self, name: str) -> None:
        """
        Remove the room with the given name.

        Does nothing if no such room exists.

        Args:
            name: Room name
        """
        for index, room in enumerate(self._rooms):
            if room.name == name:
                del self._rooms[index]
                logger.info(f"Deleted room '{name}' from house '{self._name}'")
                return

        logger.debug(f"Delete ignored: no room '{name}' in house '{self._name}'")

    def get_rooms(self) -> Tuple[Room, ...]:
        """
        Get all rooms.

        Returns:
            Read-only tuple of rooms in the order they were added
        """
        return tuple(self._rooms)

    def get_room(self, name: str) -> Optional[Room]:
        """
        Get a room by name.

        Args:
            name: Room name

        Returns:
            The Room or None if not found
        """
        for room in self._rooms:
            if room.name == name:
                return room
        return None

    def create_report(self, reporter: "Reporter") -> str:
        """
        Build a report of this house.

        Args:
            reporter: Strategy that renders the house

        Returns:
            Whatever text the reporter produces

        Raises:
            Any exception raised by the reporter, unchanged
        """
        logger.debug(f"Creating report for house '{self._name}' with {type(reporter).__name__}")
        return reporter.make(self)

    def __str__(self) -> str:
        return f"-> House: {self._name}\n"

    def __repr__(self) -> str:
        return f"House(name={self._name!r}, rooms={[r.name for r in self._rooms]!r})"
