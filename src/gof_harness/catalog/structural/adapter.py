"""
Adapter.

Base: the client type-checks every printer and calls whichever method
each one happens to expose.
Improved: an adapter wraps the legacy printer so the client sees one
interface.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol

SUMMARY = "Convert the interface of a class into another interface clients expect."


class Printer(Protocol):
    def print_text(self, text: str) -> str: ...


class ModernPrinter:
    def print_text(self, text: str) -> str:
        return f"modern: {text}"


class LegacyPrinter:
    """Third-party class we cannot change."""

    def emit(self, payload: bytes, upper: bool) -> str:
        text = payload.decode("ascii")
        return f"legacy: {text.upper() if upper else text}"


class LegacyPrinterAdapter:
    def __init__(self, legacy: LegacyPrinter):
        self._legacy = legacy

    def print_text(self, text: str) -> str:
        return self._legacy.emit(text.encode("ascii"), upper=False)


def base() -> Iterator[str]:
    printers: list[object] = [ModernPrinter(), LegacyPrinter()]
    for printer in printers:
        if isinstance(printer, ModernPrinter):
            yield printer.print_text("hello")
        elif isinstance(printer, LegacyPrinter):
            yield printer.emit(b"hello", upper=False)
    yield "client knows about 2 printer APIs"


def improved() -> Iterator[str]:
    printers: list[Printer] = [ModernPrinter(), LegacyPrinterAdapter(LegacyPrinter())]
    for printer in printers:
        yield printer.print_text("hello")
    yield "client knows about 1 printer API"
