from __future__ import annotations

from pattern_demos.beverages.beverage import Beverage


class Tea(Beverage):
    name = "tea"

    def brew(self) -> None:
        self.output.write_line("Brewing tea")

    def add_condiments(self) -> None:
        self.output.write_line("Adding lemon")


class Coffee(Beverage):
    name = "coffee"

    def brew(self) -> None:
        self.output.write_line("Brewing coffee")

    def add_condiments(self) -> None:
        self.output.write_line("Adding sugar and milk")


class HotChocolate(Beverage):
    name = "hot chocolate"

    def brew(self) -> None:
        self.output.write_line("Melting chocolate")

    def add_condiments(self) -> None:
        self.output.write_line("Adding whipped cream")
