"""
Prototype.

Base: copies are made by hand, field by field, and the hand-written copy
silently shares the mutable tag list with the original.
Improved: objects clone themselves, and a registry of prototypes hands
out independent copies.
"""

from __future__ import annotations

import copy
from collections.abc import Iterator

SUMMARY = "Create new objects by copying a prototypical instance."


class Shape:
    def __init__(self, kind: str, color: str, tags: list[str]):
        self.kind = kind
        self.color = color
        self.tags = tags

    def clone(self, **changes: str) -> Shape:
        duplicate = copy.deepcopy(self)
        for attr, value in changes.items():
            setattr(duplicate, attr, value)
        return duplicate

    def describe(self) -> str:
        return f"{self.color} {self.kind} tags={self.tags}"


class PrototypeRegistry:
    def __init__(self) -> None:
        self._prototypes: dict[str, Shape] = {}

    def add(self, name: str, prototype: Shape) -> None:
        self._prototypes[name] = prototype

    def create(self, name: str, **changes: str) -> Shape:
        return self._prototypes[name].clone(**changes)


def base() -> Iterator[str]:
    original = Shape("circle", "red", ["ui"])
    duplicate = Shape(original.kind, "blue", original.tags)
    duplicate.tags.append("copied")

    yield f"original: {original.describe()}"
    yield f"duplicate: {duplicate.describe()}"
    yield f"tags shared: {original.tags is duplicate.tags}"


def improved() -> Iterator[str]:
    registry = PrototypeRegistry()
    registry.add("button", Shape("rectangle", "grey", ["ui"]))

    ok_button = registry.create("button", color="green")
    cancel_button = registry.create("button", color="red")
    cancel_button.tags.append("danger")

    yield f"ok: {ok_button.describe()}"
    yield f"cancel: {cancel_button.describe()}"
    yield f"tags shared: {ok_button.tags is cancel_button.tags}"
