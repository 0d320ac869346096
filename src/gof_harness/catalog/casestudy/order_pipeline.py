"""
Case study: an order checkout pipeline.

Combines three patterns:
- Factory Method: each checkout channel creates its payment processor
- Strategy: discounts are pluggable pricing rules
- Observer: interested services subscribe to order events

The base version is one function that hardcodes the processor choice,
the discount rules and every notification.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from dataclasses import dataclass

SUMMARY = "Factory Method, Strategy and Observer working together in a checkout pipeline."


@dataclass(frozen=True)
class Order:
    order_id: str
    subtotal: float
    customer_tier: str


ORDERS = [Order("A-1", 100.0, "regular"), Order("A-2", 250.0, "gold")]


def checkout_monolith(order: Order, channel: str) -> list[str]:
    lines = []
    if order.customer_tier == "gold":
        total = order.subtotal * 0.8
    elif order.subtotal > 200:
        total = order.subtotal - 20
    else:
        total = order.subtotal
    if channel == "web":
        lines.append(f"card charged {total:.2f} for {order.order_id}")
    else:
        lines.append(f"invoice issued {total:.2f} for {order.order_id}")
    lines.append(f"email sent for {order.order_id}")
    lines.append(f"warehouse notified for {order.order_id}")
    return lines


class PaymentProcessor(ABC):
    @abstractmethod
    def charge(self, order_id: str, amount: float) -> str: ...


class CardProcessor(PaymentProcessor):
    def charge(self, order_id: str, amount: float) -> str:
        return f"card charged {amount:.2f} for {order_id}"


class InvoiceProcessor(PaymentProcessor):
    def charge(self, order_id: str, amount: float) -> str:
        return f"invoice issued {amount:.2f} for {order_id}"


Discount = Callable[[Order], float]
Listener = Callable[[str, Order], str]


def no_discount(order: Order) -> float:
    return order.subtotal


def tiered_discount(order: Order) -> float:
    if order.customer_tier == "gold":
        return order.subtotal * 0.8
    if order.subtotal > 200:
        return order.subtotal - 20
    return order.subtotal


class Checkout(ABC):
    def __init__(self, discount: Discount):
        self.discount = discount
        self._listeners: list[Listener] = []

    @abstractmethod
    def create_processor(self) -> PaymentProcessor:
        """Factory method for the channel's payment processor."""

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def place(self, order: Order) -> list[str]:
        total = self.discount(order)
        lines = [self.create_processor().charge(order.order_id, total)]
        lines.extend(listener("placed", order) for listener in self._listeners)
        return lines


class WebCheckout(Checkout):
    def create_processor(self) -> PaymentProcessor:
        return CardProcessor()


class B2BCheckout(Checkout):
    def create_processor(self) -> PaymentProcessor:
        return InvoiceProcessor()


def email_service(event: str, order: Order) -> str:
    return f"email sent for {order.order_id}"


def warehouse(event: str, order: Order) -> str:
    return f"warehouse notified for {order.order_id}"


def base() -> Iterator[str]:
    for order, channel in zip(ORDERS, ("web", "b2b"), strict=True):
        yield from checkout_monolith(order, channel)


def improved() -> Iterator[str]:
    web = WebCheckout(tiered_discount)
    b2b = B2BCheckout(tiered_discount)
    for checkout in (web, b2b):
        checkout.subscribe(email_service)
        checkout.subscribe(warehouse)

    for order, checkout in zip(ORDERS, (web, b2b), strict=True):
        yield from checkout.place(order)

    # Swapping the strategy does not touch the pipeline
    staff = WebCheckout(no_discount)
    yield from staff.place(Order("S-1", 50.0, "gold"))
