"""
Command.

Base: toolbar buttons call the editor directly, so there is nothing to
undo.
Improved: every action is a command object with ``execute`` and
``undo``, kept in a history.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator

SUMMARY = "Encapsulate a request as an object, enabling undo, queuing and logging."


class Editor:
    def __init__(self) -> None:
        self.text = ""

    def append(self, chunk: str) -> None:
        self.text += chunk

    def truncate(self, length: int) -> None:
        self.text = self.text[:length]


class Command(ABC):
    @abstractmethod
    def execute(self) -> None: ...

    @abstractmethod
    def undo(self) -> None: ...


class AppendCommand(Command):
    def __init__(self, editor: Editor, chunk: str):
        self.editor = editor
        self.chunk = chunk
        self._before = 0

    def execute(self) -> None:
        self._before = len(self.editor.text)
        self.editor.append(self.chunk)

    def undo(self) -> None:
        self.editor.truncate(self._before)


class History:
    def __init__(self) -> None:
        self._done: list[Command] = []

    def run(self, command: Command) -> None:
        command.execute()
        self._done.append(command)

    def undo(self) -> bool:
        if not self._done:
            return False
        self._done.pop().undo()
        return True


def base() -> Iterator[str]:
    editor = Editor()
    editor.append("Hello")
    editor.append(", world")
    yield f"text: {editor.text!r}"
    yield "undo: not supported"


def improved() -> Iterator[str]:
    editor = Editor()
    history = History()
    history.run(AppendCommand(editor, "Hello"))
    history.run(AppendCommand(editor, ", world"))
    yield f"text: {editor.text!r}"

    history.undo()
    yield f"after undo: {editor.text!r}"
    history.undo()
    yield f"after undo: {editor.text!r}"
    yield f"undo on empty history: {history.undo()}"
