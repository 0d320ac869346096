"""
Bridge.

Base: one subclass per (shape, renderer) pair; adding a renderer
multiplies the class count.
Improved: shapes hold a renderer, so the two hierarchies vary
independently.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator

SUMMARY = "Decouple an abstraction from its implementation so the two can vary independently."


class VectorCircle:
    def draw(self) -> str:
        return "circle as vector paths"


class RasterCircle:
    def draw(self) -> str:
        return "circle as pixels"


class VectorSquare:
    def draw(self) -> str:
        return "square as vector paths"


class RasterSquare:
    def draw(self) -> str:
        return "square as pixels"


class Renderer(ABC):
    @abstractmethod
    def render(self, shape: str) -> str: ...


class VectorRenderer(Renderer):
    def render(self, shape: str) -> str:
        return f"{shape} as vector paths"


class RasterRenderer(Renderer):
    def render(self, shape: str) -> str:
        return f"{shape} as pixels"


class Shape:
    name = "shape"

    def __init__(self, renderer: Renderer):
        self.renderer = renderer

    def draw(self) -> str:
        return self.renderer.render(self.name)


class Circle(Shape):
    name = "circle"


class Square(Shape):
    name = "square"


def base() -> Iterator[str]:
    classes = [VectorCircle, RasterCircle, VectorSquare, RasterSquare]
    for cls in classes:
        yield cls().draw()
    yield f"classes needed: {len(classes)}"


def improved() -> Iterator[str]:
    renderers = [VectorRenderer(), RasterRenderer()]
    for shape_cls in (Circle, Square):
        for renderer in renderers:
            yield shape_cls(renderer).draw()
    yield f"classes needed: {2 + len(renderers)}"
