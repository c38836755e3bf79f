"""Reversible device operations.

Every action wraps exactly one device and knows how to apply its effect and
the exact inverse of that effect. Actions are frozen once built; the only
mutable state lives in the device they point at.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from pattern_demos.smart_home.devices import TV, Door, Light, Thermostat


class DeviceAction(ABC):
    description = "device action"

    @abstractmethod
    def execute(self) -> None:
        """Apply the forward effect to the device."""

    @abstractmethod
    def undo(self) -> None:
        """Apply the inverse of `execute`."""


@dataclass(frozen=True, slots=True)
class LightOnAction(DeviceAction):
    light: Light
    description = "light on"

    def execute(self) -> None:
        self.light.on()

    def undo(self) -> None:
        self.light.off()


@dataclass(frozen=True, slots=True)
class LightOffAction(DeviceAction):
    light: Light
    description = "light off"

    def execute(self) -> None:
        self.light.off()

    def undo(self) -> None:
        self.light.on()


@dataclass(frozen=True, slots=True)
class DoorOpenAction(DeviceAction):
    door: Door
    description = "door open"

    def execute(self) -> None:
        self.door.open()

    def undo(self) -> None:
        self.door.close()


@dataclass(frozen=True, slots=True)
class DoorCloseAction(DeviceAction):
    door: Door
    description = "door close"

    def execute(self) -> None:
        self.door.close()

    def undo(self) -> None:
        self.door.open()


@dataclass(frozen=True, slots=True)
class TempUpAction(DeviceAction):
    thermostat: Thermostat
    description = "temperature up"

    def execute(self) -> None:
        self.thermostat.increase()

    def undo(self) -> None:
        self.thermostat.decrease()


@dataclass(frozen=True, slots=True)
class TempDownAction(DeviceAction):
    thermostat: Thermostat
    description = "temperature down"

    def execute(self) -> None:
        self.thermostat.decrease()

    def undo(self) -> None:
        self.thermostat.increase()


@dataclass(frozen=True, slots=True)
class TVOnAction(DeviceAction):
    tv: TV
    description = "tv on"

    def execute(self) -> None:
        self.tv.on()

    def undo(self) -> None:
        self.tv.off()


@dataclass(frozen=True, slots=True)
class TVOffAction(DeviceAction):
    tv: TV
    description = "tv off"

    def execute(self) -> None:
        self.tv.off()

    def undo(self) -> None:
        self.tv.on()
