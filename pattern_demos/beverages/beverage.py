"""Beverage preparation skeleton.

`Beverage.prepare` fixes the order of the steps: boil, brew, pour and,
when the condiments hook agrees, add condiments. Boiling and pouring are
shared by every beverage; brewing and condiments are supplied by each
variant. The hook is a plain callable handed in per instance and defaults
to asking on the console.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from pattern_demos.config import RuntimeConfig
from pattern_demos.console import ConsoleInput, ConsoleOutput, LineReader

CondimentsHook = Callable[[], bool]


def make_condiments_prompt(
    console_input: LineReader,
    config: RuntimeConfig | None = None,
) -> CondimentsHook:
    config = config or RuntimeConfig()

    def ask_for_condiments() -> bool:
        answer = console_input.read_line(config.condiments_prompt)
        return answer == config.condiments_yes_answer

    return ask_for_condiments


class Beverage(ABC):
    name = "beverage"

    def __init__(
        self,
        output: ConsoleOutput,
        condiments_hook: CondimentsHook | None = None,
    ) -> None:
        self.output = output
        self._condiments_hook = condiments_hook or make_condiments_prompt(ConsoleInput())

    def prepare(self) -> list[str]:
        """Run every step in order and return the step lines written."""
        mark = self.output.mark()
        self._boil_water()
        self.brew()
        self._pour()
        if self.customer_wants_condiments():
            self.add_condiments()
        return self.output.since(mark)

    def _boil_water(self) -> None:
        self.output.write_line("Boiling water")

    def _pour(self) -> None:
        self.output.write_line("Pouring into cup")

    @abstractmethod
    def brew(self) -> None:
        ...

    @abstractmethod
    def add_condiments(self) -> None:
        ...

    def customer_wants_condiments(self) -> bool:
        return self._condiments_hook()
