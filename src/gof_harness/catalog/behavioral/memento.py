"""
Memento.

Base: the caller saves state by reading the editor's private fields and
restores it by writing them back.
Improved: the editor produces opaque snapshots and restores from them;
a caretaker keeps the history.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

SUMMARY = "Capture and restore an object's internal state without violating encapsulation."


class Document:
    def __init__(self) -> None:
        self._content = ""
        self._cursor = 0

    def type(self, text: str) -> None:
        self._content += text
        self._cursor = len(self._content)

    def describe(self) -> str:
        return f"{self._content!r} cursor={self._cursor}"


@dataclass(frozen=True)
class Snapshot:
    content: str
    cursor: int


class SnapshotDocument(Document):
    def save(self) -> Snapshot:
        return Snapshot(self._content, self._cursor)

    def restore(self, snapshot: Snapshot) -> None:
        self._content = snapshot.content
        self._cursor = snapshot.cursor


class Caretaker:
    def __init__(self, document: SnapshotDocument):
        self._document = document
        self._history: list[Snapshot] = []

    def checkpoint(self) -> None:
        self._history.append(self._document.save())

    def undo(self) -> None:
        if self._history:
            self._document.restore(self._history.pop())


def base() -> Iterator[str]:
    doc = Document()
    doc.type("Dear Sir")
    saved = (doc._content, doc._cursor)
    doc.type(", you fool")
    yield doc.describe()

    doc._content, doc._cursor = saved
    yield doc.describe()
    yield "caller touched private state: True"


def improved() -> Iterator[str]:
    doc = SnapshotDocument()
    history = Caretaker(doc)

    doc.type("Dear Sir")
    history.checkpoint()
    doc.type(", you fool")
    yield doc.describe()

    history.undo()
    yield doc.describe()
    yield "caller touched private state: False"
