from __future__ import annotations

import logging

from pattern_demos.chat.mediator import ChatRoom
from pattern_demos.chat.user import User
from pattern_demos.console import ConsoleOutput
from pattern_demos.logging_orchestrator import LoggingOrchestrator


def _room() -> ChatRoom:
    return ChatRoom(LoggingOrchestrator("test_chat", logging.INFO))


def test_join_notice_goes_only_to_earlier_users() -> None:
    output = ConsoleOutput(echo=False)
    room = _room()
    alice, bob, eve = (User(room, name, output) for name in ("Alice", "Bob", "Eve"))

    room.register(alice)
    room.register(bob)
    room.register(eve)

    assert output.lines == [
        "System -> Alice: User Bob joined the chat",
        "System -> Alice: User Eve joined the chat",
        "System -> Bob: User Eve joined the chat",
    ]
    assert eve.inbox == []
    assert [user.name for user in room.participants] == ["Alice", "Bob", "Eve"]


def test_send_reaches_everyone_but_sender_in_registration_order() -> None:
    output = ConsoleOutput(echo=False)
    room = _room()
    alice, bob, eve = (User(room, name, output) for name in ("Alice", "Bob", "Eve"))
    for user in (alice, bob, eve):
        room.register(user)
    mark = output.mark()

    alice.send("Hello everyone!")
    eve.send("How is it going?")

    assert output.since(mark) == [
        "Alice -> Bob: Hello everyone!",
        "Alice -> Eve: Hello everyone!",
        "Eve -> Alice: How is it going?",
        "Eve -> Bob: How is it going?",
    ]
    assert ("Alice", "Hello everyone!") not in alice.inbox
    assert bob.inbox[-1] == ("Eve", "How is it going?")


def test_users_with_same_name_are_distinct_participants() -> None:
    output = ConsoleOutput(echo=False)
    room = _room()
    first, second = User(room, "Sam", output), User(room, "Sam", output)
    room.register(first)
    room.register(second)

    first.send("ping")
    assert second.inbox[-1] == ("Sam", "ping")
    assert first.inbox == [("System", "User Sam joined the chat")]


def test_unregistered_sender_still_reaches_every_registered_user() -> None:
    output = ConsoleOutput(echo=False)
    room = _room()
    alice = User(room, "Alice", output)
    bob = User(room, "Bob", output)
    stranger = User(room, "Mallory", output)
    room.register(alice)
    room.register(bob)

    stranger.send("hi")

    assert alice.inbox[-1] == ("Mallory", "hi")
    assert bob.inbox == [("Mallory", "hi")]
    assert stranger.inbox == []
