"""
Factory Method.

Base: the planning code switches on a string to decide which transport
to build; every new transport means editing that switch.
Improved: subclasses override the factory method that creates the
transport, and the planning code stays untouched.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator

SUMMARY = "Let subclasses decide which class to instantiate."


class Transport(ABC):
    @abstractmethod
    def deliver(self, cargo: str) -> str: ...


class Truck(Transport):
    def deliver(self, cargo: str) -> str:
        return f"truck delivers {cargo} by road"


class Ship(Transport):
    def deliver(self, cargo: str) -> str:
        return f"ship delivers {cargo} by sea"


class Drone(Transport):
    def deliver(self, cargo: str) -> str:
        return f"drone delivers {cargo} by air"


def plan_delivery(mode: str, cargo: str) -> str:
    if mode == "road":
        transport: Transport = Truck()
    elif mode == "sea":
        transport = Ship()
    else:
        raise ValueError(f"unsupported delivery mode: {mode}")
    return transport.deliver(cargo)


class Logistics(ABC):
    @abstractmethod
    def create_transport(self) -> Transport:
        """The factory method."""

    def plan_delivery(self, cargo: str) -> str:
        return self.create_transport().deliver(cargo)


class RoadLogistics(Logistics):
    def create_transport(self) -> Transport:
        return Truck()


class SeaLogistics(Logistics):
    def create_transport(self) -> Transport:
        return Ship()


class AirLogistics(Logistics):
    def create_transport(self) -> Transport:
        return Drone()


def base() -> Iterator[str]:
    for mode in ("road", "sea", "air"):
        try:
            yield plan_delivery(mode, "parcels")
        except ValueError as e:
            yield f"planning failed: {e}"


def improved() -> Iterator[str]:
    for logistics in (RoadLogistics(), SeaLogistics(), AirLogistics()):
        yield logistics.plan_delivery("parcels")
