from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from pattern_demos.logging_orchestrator import LoggingOrchestrator

if TYPE_CHECKING:
    from pattern_demos.chat.user import User


class ChatMediator(ABC):
    @abstractmethod
    def register(self, user: User) -> None:
        ...

    @abstractmethod
    def send(self, message: str, sender: User) -> None:
        ...


class ChatRoom(ChatMediator):
    """Routes messages between registered users in registration order."""

    def __init__(self, logger: LoggingOrchestrator, system_sender: str = "System") -> None:
        self._logger = logger
        self._system_sender = system_sender
        self._users: list[User] = []

    @property
    def participants(self) -> list[User]:
        return list(self._users)

    def register(self, user: User) -> None:
        self._users.append(user)
        self._logger.info(f"Registered user={user.name} participants={len(self._users)}")
        self._notify_join(user)

    def send(self, message: str, sender: User) -> None:
        recipients = [user for user in self._users if user is not sender]
        for user in recipients:
            user.receive(message, sender.name)
        self._logger.info(f"Delivered message from={sender.name} to {len(recipients)} user(s).")

    def _notify_join(self, newcomer: User) -> None:
        # Only users already in the room hear about the newcomer.
        notice = f"User {newcomer.name} joined the chat"
        for user in self._users:
            if user is not newcomer:
                user.receive(notice, self._system_sender)
