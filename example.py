#!/usr/bin/env python3
"""
Quick example demonstrating smart-home basic usage.

Run with: PYTHONPATH=src python3 example.py
"""

import logging

from smart_home import Device, DuplicateNameError, House, Reporter, Room

logging.basicConfig(level=logging.INFO, format="%(name)s - %(levelname)s - %(message)s")


class SmartSocket(Device):
    """Socket that can be switched on and off and reports its power draw."""

    def __init__(self, name: str) -> None:
        self._name = name
        self.enabled = False
        self.power = 0.0

    @property
    def name(self) -> str:
        return self._name

    def __str__(self) -> str:
        state = "on" if self.enabled else "off"
        return f"---> Socket: {self._name} ({state}, {self.power:.1f} W)\n"


class Thermometer(Device):
    def __init__(self, name: str, temperature: float) -> None:
        self._name = name
        self.temperature = temperature

    @property
    def name(self) -> str:
        return self._name

    def __str__(self) -> str:
        return f"---> Thermometer: {self._name} ({self.temperature:.1f} °C)\n"


class InventoryReport(Reporter):
    """Full inventory: house, rooms and every device."""

    def make(self, house: House) -> str:
        lines = [str(house)]
        for room in house.get_rooms():
            lines.append(str(room))
            lines.extend(str(device) for device in room.get_devices())
        return "".join(lines)


class DeviceCountReport(Reporter):
    """One line per room with its device count."""

    def make(self, house: House) -> str:
        return "\n".join(f"{room.name}: {len(room.devices())} device(s)" for room in house.get_rooms())


print("=" * 60)
print("smart-home Example")
print("=" * 60)

# 1. Devices are created by the caller and stay shared with the rooms
print("\n1. Creating devices...")
kettle = SmartSocket("Kettle")
fridge = Thermometer("Fridge", 4.5)
tv = SmartSocket("TV")
print("   ✓ Kettle, Fridge, TV created")

# 2. Rooms
print("\n2. Plugging devices into rooms...")
kitchen = Room("Kitchen")
kitchen.plug(kettle)
kitchen.plug(fridge)
living_room = Room("Living Room")
living_room.plug(tv)
print(f"   ✓ Kitchen: {kitchen.devices()}")
print(f"   ✓ Living Room: {living_room.devices()}")

# 3. House
print("\n3. Building house...")
house = House("My Smart Home")
house.add(kitchen)
house.add(living_room)
try:
    house.add(Room("Kitchen"))
except DuplicateNameError as e:
    print(f"   ✓ Duplicate rejected: {e}")

# 4. Device state changes are visible through the house
kettle.enabled = True
kettle.power = 1850.0

# 5. Reports
print("\n4. Inventory report:")
print(house.create_report(InventoryReport()))
print("5. Device count report:")
print(house.create_report(DeviceCountReport()))

print("\n" + "=" * 60)
print("Example complete!")
print("=" * 60)
