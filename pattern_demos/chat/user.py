from __future__ import annotations

from pattern_demos.chat.mediator import ChatMediator
from pattern_demos.console import ConsoleOutput


class User:
    def __init__(self, chat: ChatMediator, name: str, output: ConsoleOutput) -> None:
        self._chat = chat
        self._output = output
        self.name = name
        self.inbox: list[tuple[str, str]] = []

    def send(self, message: str) -> None:
        self._chat.send(message, self)

    def receive(self, message: str, sender_name: str) -> None:
        self.inbox.append((sender_name, message))
        self._output.write_line(f"{sender_name} -> {self.name}: {message}")

    def __repr__(self) -> str:
        return f"User(name={self.name!r})"
