"""
Chain of Responsibility.

Base: a single function decides who handles each support ticket with a
growing if/elif ladder.
Improved: handlers are linked; each one handles what it can and passes
the rest along.
"""

from __future__ import annotations

from collections.abc import Iterator

SUMMARY = "Pass a request along a chain of handlers until one of them handles it."

TICKETS = [("password reset", 1), ("billing dispute", 2), ("data breach", 3), ("alien invasion", 9)]


def route_ticket(subject: str, severity: int) -> str:
    if severity <= 1:
        return f"helpdesk handles {subject!r}"
    elif severity == 2:
        return f"supervisor handles {subject!r}"
    elif severity == 3:
        return f"manager handles {subject!r}"
    return f"nobody handles {subject!r}"


class Handler:
    name = "handler"
    max_severity = 0

    def __init__(self, successor: Handler | None = None):
        self.successor = successor

    def handle(self, subject: str, severity: int) -> str:
        if severity <= self.max_severity:
            return f"{self.name} handles {subject!r}"
        if self.successor is not None:
            return self.successor.handle(subject, severity)
        return f"nobody handles {subject!r}"


class Helpdesk(Handler):
    name = "helpdesk"
    max_severity = 1


class Supervisor(Handler):
    name = "supervisor"
    max_severity = 2


class Manager(Handler):
    name = "manager"
    max_severity = 3


def base() -> Iterator[str]:
    for subject, severity in TICKETS:
        yield route_ticket(subject, severity)


def improved() -> Iterator[str]:
    chain = Helpdesk(Supervisor(Manager()))
    for subject, severity in TICKETS:
        yield chain.handle(subject, severity)
