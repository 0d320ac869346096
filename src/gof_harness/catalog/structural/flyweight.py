"""
Flyweight.

Base: every tree carries its own copy of the species data.
Improved: species data is shared through a factory; each tree keeps
only its position.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

SUMMARY = "Share fine-grained objects to support large numbers of them efficiently."

PLANTING = [("oak", "green"), ("pine", "dark green"), ("oak", "green"), ("birch", "white")] * 25


@dataclass(frozen=True)
class TreeType:
    species: str
    color: str


class HeavyTree:
    def __init__(self, x: int, y: int, species: str, color: str):
        self.x = x
        self.y = y
        self.tree_type = TreeType(species, color)


class TreeTypeFactory:
    def __init__(self) -> None:
        self._types: dict[tuple[str, str], TreeType] = {}

    def get(self, species: str, color: str) -> TreeType:
        key = (species, color)
        if key not in self._types:
            self._types[key] = TreeType(species, color)
        return self._types[key]

    def __len__(self) -> int:
        return len(self._types)


@dataclass
class Tree:
    x: int
    y: int
    tree_type: TreeType


def base() -> Iterator[str]:
    forest = [HeavyTree(i, i * 2, species, color) for i, (species, color) in enumerate(PLANTING)]
    distinct = {id(tree.tree_type) for tree in forest}
    yield f"trees planted: {len(forest)}"
    yield f"type objects: {len(distinct)}"


def improved() -> Iterator[str]:
    factory = TreeTypeFactory()
    forest = [
        Tree(i, i * 2, factory.get(species, color)) for i, (species, color) in enumerate(PLANTING)
    ]
    yield f"trees planted: {len(forest)}"
    yield f"type objects: {len(factory)}"
    yield f"first and third share type: {forest[0].tree_type is forest[2].tree_type}"
