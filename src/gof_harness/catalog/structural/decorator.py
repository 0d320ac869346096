"""
Decorator.

Base: a subclass for every combination of extras.
Improved: extras wrap a coffee at runtime and stack in any order.
"""

from __future__ import annotations

from collections.abc import Iterator

SUMMARY = "Attach additional responsibilities to an object dynamically."


class Coffee:
    def cost(self) -> float:
        return 2.0

    def description(self) -> str:
        return "coffee"


class CoffeeWithMilk(Coffee):
    def cost(self) -> float:
        return super().cost() + 0.5

    def description(self) -> str:
        return "coffee, milk"


class CoffeeWithMilkAndSugar(CoffeeWithMilk):
    def cost(self) -> float:
        return super().cost() + 0.25

    def description(self) -> str:
        return "coffee, milk, sugar"


class AddOn(Coffee):
    price = 0.0
    label = ""

    def __init__(self, wrapped: Coffee):
        self._wrapped = wrapped

    def cost(self) -> float:
        return self._wrapped.cost() + self.price

    def description(self) -> str:
        return f"{self._wrapped.description()}, {self.label}"


class Milk(AddOn):
    price = 0.5
    label = "milk"


class Sugar(AddOn):
    price = 0.25
    label = "sugar"


class Whip(AddOn):
    price = 0.75
    label = "whip"


def base() -> Iterator[str]:
    for drink in (Coffee(), CoffeeWithMilk(), CoffeeWithMilkAndSugar()):
        yield f"{drink.description()}: {drink.cost():.2f}"
    yield "whip needs more subclasses"


def improved() -> Iterator[str]:
    orders = [
        Coffee(),
        Milk(Coffee()),
        Sugar(Milk(Coffee())),
        Whip(Sugar(Milk(Coffee()))),
        Milk(Milk(Coffee())),
    ]
    for drink in orders:
        yield f"{drink.description()}: {drink.cost():.2f}"
