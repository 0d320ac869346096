"""
Observer.

Base: the weather station knows each display by name and updates them
by hand; adding a display means editing the station.
Improved: displays subscribe and the station notifies whoever is
listening.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator

SUMMARY = "Notify dependents automatically when an object changes state."


class CurrentDisplay:
    def show(self, celsius: float) -> str:
        return f"current: {celsius:.1f}C"


class StatsDisplay:
    def __init__(self) -> None:
        self.readings: list[float] = []

    def show(self, celsius: float) -> str:
        self.readings.append(celsius)
        average = sum(self.readings) / len(self.readings)
        return f"average: {average:.1f}C"


class HardwiredStation:
    def __init__(self) -> None:
        self.current = CurrentDisplay()
        self.stats = StatsDisplay()

    def set_temperature(self, celsius: float) -> list[str]:
        return [self.current.show(celsius), self.stats.show(celsius)]


Listener = Callable[[float], str]


class WeatherStation:
    def __init__(self) -> None:
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    def set_temperature(self, celsius: float) -> list[str]:
        return [listener(celsius) for listener in self._listeners]


def base() -> Iterator[str]:
    station = HardwiredStation()
    for celsius in (20.0, 22.0):
        yield from station.set_temperature(celsius)
    yield "adding a display requires editing the station"


def improved() -> Iterator[str]:
    station = WeatherStation()
    station.subscribe(CurrentDisplay().show)
    station.subscribe(StatsDisplay().show)
    unsubscribe_alert = station.subscribe(
        lambda c: f"alert: {'hot' if c > 21 else 'fine'}"
    )

    for celsius in (20.0, 22.0):
        yield from station.set_temperature(celsius)

    unsubscribe_alert()
    yield from station.set_temperature(24.0)
