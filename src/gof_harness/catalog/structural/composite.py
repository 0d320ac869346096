"""
Composite.

Base: the size calculation walks nested dicts and has to tell files
from folders at every step.
Improved: files and folders share one interface, so the tree sizes
itself.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any

SUMMARY = "Compose objects into trees and treat individual objects and compositions uniformly."


def total_size(node: dict[str, Any]) -> int:
    if node["type"] == "file":
        return node["size"]
    size = 0
    for child in node["children"]:
        if child["type"] == "file":
            size += child["size"]
        else:
            size += total_size(child)
    return size


class Node(ABC):
    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def size(self) -> int: ...

    @abstractmethod
    def lines(self, depth: int = 0) -> list[str]: ...


class File(Node):
    def __init__(self, name: str, size: int):
        super().__init__(name)
        self._size = size

    def size(self) -> int:
        return self._size

    def lines(self, depth: int = 0) -> list[str]:
        return [f"{'  ' * depth}{self.name} ({self._size})"]


class Folder(Node):
    def __init__(self, name: str, children: list[Node] | None = None):
        super().__init__(name)
        self.children = children or []

    def add(self, node: Node) -> Folder:
        self.children.append(node)
        return self

    def size(self) -> int:
        return sum(child.size() for child in self.children)

    def lines(self, depth: int = 0) -> list[str]:
        result = [f"{'  ' * depth}{self.name}/ ({self.size()})"]
        for child in self.children:
            result.extend(child.lines(depth + 1))
        return result


def base() -> Iterator[str]:
    tree = {
        "type": "folder",
        "children": [
            {"type": "file", "size": 120},
            {
                "type": "folder",
                "children": [{"type": "file", "size": 30}, {"type": "file", "size": 50}],
            },
        ],
    }
    yield f"total size: {total_size(tree)}"
    yield "type checks in traversal: 2"


def improved() -> Iterator[str]:
    root = Folder("project")
    root.add(File("README.md", 120))
    root.add(Folder("src", [File("main.py", 30), File("util.py", 50)]))

    yield from root.lines()
    yield f"total size: {root.size()}"
