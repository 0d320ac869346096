"""
Case study: a small document editor.

Combines three patterns:
- Composite: a document is a tree of sections and paragraphs
- Command: edits are objects that can be undone
- Memento: commands restore the document from snapshots

The base version keeps the whole document in one string and edits it
in place, so undo and structure-aware operations are impossible.
"""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass

SUMMARY = "Composite, Command and Memento working together in a document editor."


class Element(ABC):
    @abstractmethod
    def render(self, depth: int = 0) -> list[str]: ...

    @abstractmethod
    def word_count(self) -> int: ...


class Paragraph(Element):
    def __init__(self, text: str):
        self.text = text

    def render(self, depth: int = 0) -> list[str]:
        return [f"{'  ' * depth}{self.text}"]

    def word_count(self) -> int:
        return len(self.text.split())


class Section(Element):
    def __init__(self, title: str):
        self.title = title
        self.children: list[Element] = []

    def render(self, depth: int = 0) -> list[str]:
        lines = [f"{'  ' * depth}# {self.title}"]
        for child in self.children:
            lines.extend(child.render(depth + 1))
        return lines

    def word_count(self) -> int:
        return len(self.title.split()) + sum(c.word_count() for c in self.children)


@dataclass(frozen=True)
class DocumentSnapshot:
    root: Section


class DocumentEditor:
    def __init__(self, title: str):
        self.root = Section(title)

    def snapshot(self) -> DocumentSnapshot:
        return DocumentSnapshot(copy.deepcopy(self.root))

    def restore(self, snapshot: DocumentSnapshot) -> None:
        self.root = copy.deepcopy(snapshot.root)

    def find_section(self, title: str) -> Section:
        stack: list[Element] = [self.root]
        while stack:
            node = stack.pop()
            if isinstance(node, Section):
                if node.title == title:
                    return node
                stack.extend(node.children)
        raise KeyError(f"no section titled {title!r}")


class EditCommand(ABC):
    def __init__(self, editor: DocumentEditor):
        self.editor = editor
        self._before: DocumentSnapshot | None = None

    def execute(self) -> None:
        self._before = self.editor.snapshot()
        self.apply()

    def undo(self) -> None:
        if self._before is not None:
            self.editor.restore(self._before)

    @abstractmethod
    def apply(self) -> None: ...


class AddSection(EditCommand):
    def __init__(self, editor: DocumentEditor, parent: str, title: str):
        super().__init__(editor)
        self.parent = parent
        self.title = title

    def apply(self) -> None:
        self.editor.find_section(self.parent).children.append(Section(self.title))


class AddParagraph(EditCommand):
    def __init__(self, editor: DocumentEditor, section: str, text: str):
        super().__init__(editor)
        self.section = section
        self.text = text

    def apply(self) -> None:
        self.editor.find_section(self.section).children.append(Paragraph(self.text))


def base() -> Iterator[str]:
    text = "# Report\n"
    text += "  # Intro\n"
    text += "    Patterns help.\n"
    text += "    A late remark.\n"
    text = text.replace("    A late remark.\n", "")

    yield from text.rstrip("\n").splitlines()
    yield "undo: not supported"
    yield "word count: needs parsing the text"


def improved() -> Iterator[str]:
    editor = DocumentEditor("Report")
    history: list[EditCommand] = []

    for command in (
        AddSection(editor, "Report", "Intro"),
        AddParagraph(editor, "Intro", "Patterns help."),
        AddParagraph(editor, "Intro", "A late remark."),
    ):
        command.execute()
        history.append(command)

    yield f"word count: {editor.root.word_count()}"
    history.pop().undo()
    yield from editor.root.render()
    yield f"word count: {editor.root.word_count()}"
