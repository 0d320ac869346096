"""
Builder.

Base: a telescoping constructor where callers pass long positional
argument lists and easily get the order wrong.
Improved: a fluent builder assembles the product step by step, and a
director captures common recipes.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

SUMMARY = "Separate the construction of a complex object from its representation."


class TelescopingPizza:
    def __init__(
        self,
        size: int,
        cheese: bool = False,
        pepperoni: bool = False,
        mushrooms: bool = False,
        olives: bool = False,
    ):
        self.size = size
        self.toppings = [
            name
            for name, wanted in (
                ("cheese", cheese),
                ("pepperoni", pepperoni),
                ("mushrooms", mushrooms),
                ("olives", olives),
            )
            if wanted
        ]

    def describe(self) -> str:
        return f"{self.size}in pizza with {', '.join(self.toppings) or 'nothing'}"


@dataclass
class Pizza:
    size: int
    crust: str = "regular"
    toppings: list[str] = field(default_factory=list)

    def describe(self) -> str:
        return f"{self.size}in {self.crust} pizza with {', '.join(self.toppings) or 'nothing'}"


class PizzaBuilder:
    def __init__(self, size: int):
        self._pizza = Pizza(size=size)

    def crust(self, crust: str) -> PizzaBuilder:
        self._pizza.crust = crust
        return self

    def topping(self, name: str) -> PizzaBuilder:
        self._pizza.toppings.append(name)
        return self

    def build(self) -> Pizza:
        return self._pizza


class PizzaDirector:
    """Knows the recipes; the builder knows the assembly."""

    @staticmethod
    def margherita(size: int) -> Pizza:
        return PizzaBuilder(size).crust("thin").topping("tomato").topping("mozzarella").build()

    @staticmethod
    def veggie(size: int) -> Pizza:
        return (
            PizzaBuilder(size)
            .topping("mushrooms")
            .topping("olives")
            .topping("peppers")
            .build()
        )


def base() -> Iterator[str]:
    wanted = TelescopingPizza(12, True, False, True)
    # Meant mushrooms and olives, but the flags were passed one slot off
    mistaken = TelescopingPizza(12, False, True, False, True)

    yield wanted.describe()
    yield mistaken.describe()


def improved() -> Iterator[str]:
    custom = PizzaBuilder(12).topping("mushrooms").topping("olives").build()

    yield custom.describe()
    yield PizzaDirector.margherita(10).describe()
    yield PizzaDirector.veggie(14).describe()
