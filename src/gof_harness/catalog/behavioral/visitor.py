"""
Visitor.

Base: each new operation over the shapes is a function full of
isinstance checks.
Improved: shapes accept visitors, and each operation is a visitor class
with one method per shape.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Iterator

SUMMARY = "Add operations to an object structure without changing the element classes."


class Shape(ABC):
    @abstractmethod
    def accept(self, visitor: ShapeVisitor) -> str: ...


class Circle(Shape):
    def __init__(self, radius: float):
        self.radius = radius

    def accept(self, visitor: ShapeVisitor) -> str:
        return visitor.visit_circle(self)


class Rectangle(Shape):
    def __init__(self, width: float, height: float):
        self.width = width
        self.height = height

    def accept(self, visitor: ShapeVisitor) -> str:
        return visitor.visit_rectangle(self)


class ShapeVisitor(ABC):
    @abstractmethod
    def visit_circle(self, circle: Circle) -> str: ...

    @abstractmethod
    def visit_rectangle(self, rectangle: Rectangle) -> str: ...


class AreaVisitor(ShapeVisitor):
    def visit_circle(self, circle: Circle) -> str:
        return f"circle area {math.pi * circle.radius**2:.2f}"

    def visit_rectangle(self, rectangle: Rectangle) -> str:
        return f"rectangle area {rectangle.width * rectangle.height:.2f}"


class SvgVisitor(ShapeVisitor):
    def visit_circle(self, circle: Circle) -> str:
        return f'<circle r="{circle.radius:g}"/>'

    def visit_rectangle(self, rectangle: Rectangle) -> str:
        return f'<rect width="{rectangle.width:g}" height="{rectangle.height:g}"/>'


def area(shape: Shape) -> str:
    if isinstance(shape, Circle):
        return f"circle area {math.pi * shape.radius**2:.2f}"
    elif isinstance(shape, Rectangle):
        return f"rectangle area {shape.width * shape.height:.2f}"
    raise TypeError(f"unsupported shape: {type(shape).__name__}")


SHAPES: list[Shape] = [Circle(1.0), Rectangle(2.0, 3.0)]


def base() -> Iterator[str]:
    for shape in SHAPES:
        yield area(shape)
    yield "svg export: needs another isinstance ladder"


def improved() -> Iterator[str]:
    for visitor in (AreaVisitor(), SvgVisitor()):
        for shape in SHAPES:
            yield shape.accept(visitor)
