"""
Tests for Reporter delegation through House.create_report.

Includes the end-to-end scenario: build a house, hit both duplicate
checks, then render a deterministic report.
"""

import logging
import pytest

from smart_home import (
    Device,
    DuplicateDeviceError,
    DuplicateRoomError,
    House,
    Reporter,
    Room,
)

logging.basicConfig(
    level=logging.DEBUG, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = logging.getLogger(__name__)


class SmartSocket(Device):
    def __init__(self, name: str) -> None:
        self._name = name

    @property
    def name(self) -> str:
        return self._name


class InventoryReporter(Reporter):
    """Lists the house, its rooms and their devices using the display lines."""

    def make(self, house: House) -> str:
        lines = [str(house)]
        for room in house.get_rooms():
            lines.append(str(room))
            for device in room.get_devices():
                lines.append(str(device))
        return "".join(lines)


class DeviceCountReporter(Reporter):
    """Counts devices per room."""

    def make(self, house: House) -> str:
        return "; ".join(f"{room.name}={len(room.devices())}" for room in house.get_rooms())


class FailingReporter(Reporter):
    def make(self, house: House) -> str:
        raise RuntimeError(f"cannot report on {house.name}")


class TestCreateReport:
    """Test suite for report delegation."""

    def test_report_on_empty_house(self):
        """Test that a reporter sees an empty house."""
        house = House("Empty")
        assert house.create_report(InventoryReporter()) == "-> House: Empty\n"

    def test_inventory_report(self):
        """Test a full inventory report walking rooms and devices."""
        house = House("My Smart Home")
        kitchen = Room("Kitchen")
        kitchen.plug(SmartSocket("Toaster"))
        kitchen.plug(SmartSocket("Kettle"))
        house.add(kitchen)
        house.add(Room("Hall"))

        report = house.create_report(InventoryReporter())
        logger.info(f"Report:\n{report}")

        assert report == (
            "-> House: My Smart Home\n"
            "--> Room: Kitchen\n"
            "---> Device: Toaster\n"
            "---> Device: Kettle\n"
            "--> Room: Hall\n"
        )

    def test_device_count_report(self):
        """Test swapping in a different reporter on the same house."""
        house = House("Home")
        office = Room("Office")
        office.plug(SmartSocket("Printer"))
        house.add(office)
        house.add(Room("Attic"))

        assert house.create_report(DeviceCountReporter()) == "Office=1; Attic=0"

    def test_reporter_error_propagates(self):
        """Test that reporter exceptions pass through unchanged."""
        house = House("Home")
        with pytest.raises(RuntimeError, match="cannot report on Home"):
            house.create_report(FailingReporter())


def test_end_to_end_scenario():
    """Test the full add/plug/report flow with duplicate rejections."""
    logger.info("=" * 80)
    logger.info("TEST: End-to-end scenario")
    logger.info("=" * 80)

    house = House("H")

    logger.info("Step 1: Add 'Kitchen'")
    kitchen = Room("Kitchen")
    house.add(kitchen)

    logger.info("Step 2: Add 'Kitchen' again")
    with pytest.raises(DuplicateRoomError) as exc_info:
        house.add(Room("Kitchen"))
    assert exc_info.value.name == "Kitchen"

    logger.info("Step 3: Plug 'Toaster' twice")
    kitchen.plug(SmartSocket("Toaster"))
    with pytest.raises(DuplicateDeviceError) as exc_info:
        kitchen.plug(SmartSocket("Toaster"))
    assert exc_info.value.name == "Toaster"

    class ConcatReporter(Reporter):
        def make(self, house: House) -> str:
            parts = [house.name]
            for room in house.get_rooms():
                parts.append(room.name)
                parts.extend(room.devices())
            return "|".join(parts)

    logger.info("Step 4: Create report")
    report = house.create_report(ConcatReporter())
    logger.info(f"✓ Report: {report}")

    assert report == "H|Kitchen|Toaster"
    assert report == house.create_report(ConcatReporter())
