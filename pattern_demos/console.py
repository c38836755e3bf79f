from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol


@dataclass(slots=True)
class ConsoleOutput:
    """Line-oriented stdout sink that keeps a record of everything written."""

    echo: bool = True
    lines: list[str] = field(default_factory=list)

    def write_line(self, line: str = "") -> None:
        self.lines.append(line)
        if self.echo:
            print(line)

    def mark(self) -> int:
        return len(self.lines)

    def since(self, mark: int) -> list[str]:
        return self.lines[mark:]


class LineReader(Protocol):
    def read_line(self, prompt: str = "") -> str:
        ...


class ConsoleInput:
    def read_line(self, prompt: str = "") -> str:
        return input(prompt)
