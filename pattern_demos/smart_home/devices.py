from __future__ import annotations

from dataclasses import dataclass

from pattern_demos.console import ConsoleOutput


@dataclass(slots=True)
class Light:
    output: ConsoleOutput
    is_on: bool = False

    def on(self) -> None:
        self.is_on = True
        self.output.write_line("Light is on")

    def off(self) -> None:
        self.is_on = False
        self.output.write_line("Light is off")


@dataclass(slots=True)
class Door:
    output: ConsoleOutput
    is_open: bool = False

    def open(self) -> None:
        self.is_open = True
        self.output.write_line("Door is open")

    def close(self) -> None:
        self.is_open = False
        self.output.write_line("Door is closed")


@dataclass(slots=True)
class Thermostat:
    output: ConsoleOutput
    temperature: int = 22
    step: int = 1

    def increase(self) -> None:
        self.temperature += self.step
        self.output.write_line(f"Temperature raised to {self.temperature}°C")

    def decrease(self) -> None:
        self.temperature -= self.step
        self.output.write_line(f"Temperature lowered to {self.temperature}°C")


@dataclass(slots=True)
class TV:
    output: ConsoleOutput
    is_on: bool = False

    def on(self) -> None:
        self.is_on = True
        self.output.write_line("TV is on")

    def off(self) -> None:
        self.is_on = False
        self.output.write_line("TV is off")
