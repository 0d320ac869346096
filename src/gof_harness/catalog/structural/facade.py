"""
Facade.

Base: the client drives every subsystem of the home theater itself and
must know the right order.
Improved: one facade method does the sequencing.
"""

from __future__ import annotations

from collections.abc import Iterator

SUMMARY = "Provide a unified, simpler interface to a set of interfaces in a subsystem."


class Lights:
    def dim(self, level: int) -> str:
        return f"lights dimmed to {level}%"


class Projector:
    def on(self) -> str:
        return "projector on"

    def input(self, source: str) -> str:
        return f"projector input {source}"


class Amplifier:
    def on(self) -> str:
        return "amplifier on"

    def volume(self, level: int) -> str:
        return f"volume {level}"


class Player:
    def play(self, title: str) -> str:
        return f"playing {title!r}"


class HomeTheater:
    def __init__(self) -> None:
        self.lights = Lights()
        self.projector = Projector()
        self.amplifier = Amplifier()
        self.player = Player()

    def watch(self, title: str) -> list[str]:
        return [
            self.lights.dim(10),
            self.projector.on(),
            self.projector.input("hdmi"),
            self.amplifier.on(),
            self.amplifier.volume(5),
            self.player.play(title),
        ]


def base() -> Iterator[str]:
    lights, projector, amplifier, player = Lights(), Projector(), Amplifier(), Player()
    yield lights.dim(10)
    yield projector.on()
    yield projector.input("hdmi")
    yield amplifier.on()
    yield amplifier.volume(5)
    yield player.play("Metropolis")
    yield "client calls: 6"


def improved() -> Iterator[str]:
    yield from HomeTheater().watch("Metropolis")
    yield "client calls: 1"
