"""
Mediator.

Base: every chat user keeps references to every other user and sends
messages to each one directly.
Improved: users talk only to a chat room that does the routing.
"""

from __future__ import annotations

from collections.abc import Iterator

SUMMARY = "Define an object that encapsulates how a set of objects interact."


class PeerUser:
    def __init__(self, name: str, log: list[str]):
        self.name = name
        self.peers: list[PeerUser] = []
        self._log = log

    def send(self, message: str) -> None:
        for peer in self.peers:
            peer.receive(self.name, message)

    def receive(self, sender: str, message: str) -> None:
        self._log.append(f"{self.name} got {message!r} from {sender}")


class ChatRoom:
    def __init__(self) -> None:
        self._members: dict[str, Member] = {}
        self.log: list[str] = []

    def join(self, member: Member) -> None:
        self._members[member.name] = member
        member.room = self

    def broadcast(self, sender: str, message: str) -> None:
        for name, member in self._members.items():
            if name != sender:
                member.receive(sender, message)

    def direct(self, sender: str, recipient: str, message: str) -> None:
        member = self._members.get(recipient)
        if member is None:
            self.log.append(f"room: {recipient} is not here")
            return
        member.receive(sender, message)


class Member:
    def __init__(self, name: str):
        self.name = name
        self.room: ChatRoom | None = None

    def say(self, message: str) -> None:
        if self.room is not None:
            self.room.broadcast(self.name, message)

    def whisper(self, recipient: str, message: str) -> None:
        if self.room is not None:
            self.room.direct(self.name, recipient, message)

    def receive(self, sender: str, message: str) -> None:
        if self.room is not None:
            self.room.log.append(f"{self.name} got {message!r} from {sender}")


def base() -> Iterator[str]:
    log: list[str] = []
    users = [PeerUser(name, log) for name in ("ann", "bob", "cy")]
    for user in users:
        user.peers = [other for other in users if other is not user]

    users[0].send("hi all")
    yield from log
    yield f"peer links: {sum(len(u.peers) for u in users)}"


def improved() -> Iterator[str]:
    room = ChatRoom()
    members = [Member(name) for name in ("ann", "bob", "cy")]
    for member in members:
        room.join(member)

    members[0].say("hi all")
    members[1].whisper("cy", "lunch?")
    members[2].whisper("dee", "hello?")
    yield from room.log
    yield f"peer links: {len(members)}"
