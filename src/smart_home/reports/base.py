"""Base class for report strategies."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from smart_home.core.house import House


class Reporter(ABC):
    """
    Base class for house reporters.

    A reporter reads the house name, its rooms and, transitively, each room's
    devices, and renders them as arbitrary text.
    """

    @abstractmethod
    def make(self, house: "House") -> str:
        """
        Render a report of the house.

        Args:
            house: The house to report on; must not be mutated

        Returns:
            Report text

        Raises:
            Any implementer-defined exception; House.create_report propagates it
        """
        pass
