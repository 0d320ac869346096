"""
State.

Base: the order checks a status string in every method.
Improved: each status is a class that knows which transitions it allows.
"""

from __future__ import annotations

from collections.abc import Iterator

SUMMARY = "Let an object alter its behavior when its internal state changes."


class StringlyOrder:
    def __init__(self) -> None:
        self.status = "new"

    def pay(self) -> str:
        if self.status == "new":
            self.status = "paid"
            return "paid"
        elif self.status == "paid":
            return "already paid"
        return f"cannot pay when {self.status}"

    def ship(self) -> str:
        if self.status == "paid":
            self.status = "shipped"
            return "shipped"
        elif self.status == "new":
            return "cannot ship unpaid order"
        return f"cannot ship when {self.status}"


class OrderState:
    name = "state"

    def pay(self, order: Order) -> str:
        return f"cannot pay when {self.name}"

    def ship(self, order: Order) -> str:
        return f"cannot ship when {self.name}"


class New(OrderState):
    name = "new"

    def pay(self, order: Order) -> str:
        order.state = Paid()
        return "paid"


class Paid(OrderState):
    name = "paid"

    def ship(self, order: Order) -> str:
        order.state = Shipped()
        return "shipped"


class Shipped(OrderState):
    name = "shipped"


class Order:
    def __init__(self) -> None:
        self.state: OrderState = New()

    def pay(self) -> str:
        return self.state.pay(self)

    def ship(self) -> str:
        return self.state.ship(self)


def base() -> Iterator[str]:
    order = StringlyOrder()
    yield order.ship()
    yield order.pay()
    yield order.ship()
    yield order.pay()


def improved() -> Iterator[str]:
    order = Order()
    yield order.ship()
    yield order.pay()
    yield order.ship()
    yield order.pay()
    yield f"final state: {order.state.name}"
