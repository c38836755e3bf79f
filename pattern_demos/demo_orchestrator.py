from __future__ import annotations

from dataclasses import dataclass, field

from pattern_demos.beverages.beverage import Beverage, CondimentsHook, make_condiments_prompt
from pattern_demos.beverages.recipes import Coffee, HotChocolate, Tea
from pattern_demos.chat.mediator import ChatRoom
from pattern_demos.chat.user import User
from pattern_demos.config import RuntimeConfig
from pattern_demos.console import ConsoleOutput, LineReader
from pattern_demos.logging_orchestrator import LoggingOrchestrator
from pattern_demos.smart_home.actions import DoorOpenAction, LightOnAction, TempUpAction, TVOnAction
from pattern_demos.smart_home.devices import TV, Door, Light, Thermostat
from pattern_demos.smart_home.history import CommandHistory


@dataclass(slots=True)
class DemoOrchestrator:
    """Runs the command, template method and mediator demos in that order."""

    output: ConsoleOutput
    console_input: LineReader
    logger: LoggingOrchestrator
    config: RuntimeConfig = field(default_factory=RuntimeConfig)
    condiments_hook: CondimentsHook | None = None

    def _section(self, title: str, leading_blank: bool = True) -> None:
        if leading_blank:
            self.output.write_line()
        self.output.write_line(f"=== {title} ===")

    def run_command_demo(self) -> CommandHistory:
        self._section("Command Pattern", leading_blank=False)
        history = CommandHistory(self.output, self.logger)
        light = Light(self.output)
        door = Door(self.output)
        thermostat = Thermostat(
            self.output,
            temperature=self.config.initial_temperature,
            step=self.config.temperature_step,
        )
        tv = TV(self.output)

        history.execute(LightOnAction(light))
        history.execute(DoorOpenAction(door))
        history.execute(TempUpAction(thermostat))
        history.execute(TVOnAction(tv))
        # One more undo than executed actions to show the empty-history case.
        for _ in range(5):
            history.undo()
        return history

    def run_template_method_demo(self) -> list[list[str]]:
        self._section("Template Method Pattern")
        hook = self.condiments_hook or make_condiments_prompt(self.console_input, self.config)
        beverages: list[Beverage] = [
            Tea(self.output, hook),
            Coffee(self.output, hook),
            HotChocolate(self.output, hook),
        ]
        prepared: list[list[str]] = []
        for beverage in beverages:
            steps = beverage.prepare()
            self.logger.info(f"Prepared {beverage.name} in {len(steps)} step(s).")
            prepared.append(steps)
        return prepared

    def run_mediator_demo(self) -> ChatRoom:
        self._section("Mediator Pattern")
        room = ChatRoom(self.logger, system_sender=self.config.system_sender)
        alice = User(room, "Alice", self.output)
        bob = User(room, "Bob", self.output)
        eve = User(room, "Eve", self.output)
        room.register(alice)
        room.register(bob)
        room.register(eve)
        alice.send("Hello everyone!")
        bob.send("Hi, Alice!")
        eve.send("How is it going?")
        return room

    def run_all(self) -> None:
        self.run_command_demo()
        self.run_template_method_demo()
        self.run_mediator_demo()
        self.logger.info(f"Demo finished with {len(self.output.lines)} line(s) of output.")
