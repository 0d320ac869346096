"""
Null Object.

Base: the logger is optional, so every call site checks for None.
Improved: a do-nothing logger stands in when logging is off.
"""

from __future__ import annotations

from collections.abc import Iterator

SUMMARY = "Replace None checks with an object that does nothing."


class ListLogger:
    def __init__(self) -> None:
        self.lines: list[str] = []

    def log(self, message: str) -> None:
        self.lines.append(message)


class NullLogger:
    lines: list[str] = []

    def log(self, message: str) -> None:
        pass


class GuardedService:
    def __init__(self, logger: ListLogger | None = None):
        self.logger = logger
        self.checks = 0

    def process(self, item: str) -> str:
        self.checks += 1
        if self.logger is not None:
            self.logger.log(f"processing {item}")
        return item.upper()


class Service:
    def __init__(self, logger: ListLogger | NullLogger | None = None):
        self.logger = logger or NullLogger()

    def process(self, item: str) -> str:
        self.logger.log(f"processing {item}")
        return item.upper()


def base() -> Iterator[str]:
    quiet = GuardedService()
    loud = GuardedService(ListLogger())
    yield quiet.process("a")
    yield loud.process("b")
    yield f"none checks: {quiet.checks + loud.checks}"


def improved() -> Iterator[str]:
    quiet = Service()
    loud_logger = ListLogger()
    loud = Service(loud_logger)
    yield quiet.process("a")
    yield loud.process("b")
    yield f"logged: {loud_logger.lines}"
    yield "none checks: 0"
