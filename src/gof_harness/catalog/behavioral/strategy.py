"""
Strategy.

Base: the shipping cost function switches on the carrier name.
Improved: each carrier's pricing is an interchangeable strategy.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator

SUMMARY = "Define a family of algorithms and make them interchangeable."


def shipping_cost(carrier: str, weight_kg: float) -> float:
    if carrier == "standard":
        return 5.0 + weight_kg * 1.0
    elif carrier == "express":
        return 10.0 + weight_kg * 2.5
    elif carrier == "pickup":
        return 0.0
    raise ValueError(f"unknown carrier: {carrier}")


PricingStrategy = Callable[[float], float]


def standard(weight_kg: float) -> float:
    return 5.0 + weight_kg * 1.0


def express(weight_kg: float) -> float:
    return 10.0 + weight_kg * 2.5


def pickup(weight_kg: float) -> float:
    return 0.0


def flat_rate(weight_kg: float) -> float:
    return 12.0


class Checkout:
    def __init__(self, strategy: PricingStrategy):
        self.strategy = strategy

    def total(self, subtotal: float, weight_kg: float) -> float:
        return subtotal + self.strategy(weight_kg)


def base() -> Iterator[str]:
    for carrier in ("standard", "express", "pickup", "flat"):
        try:
            yield f"{carrier}: {shipping_cost(carrier, 4.0):.2f}"
        except ValueError as e:
            yield f"{carrier}: {e}"


def improved() -> Iterator[str]:
    for strategy in (standard, express, pickup, flat_rate):
        checkout = Checkout(strategy)
        yield f"{strategy.__name__}: {checkout.total(0.0, 4.0):.2f}"
