"""
Proxy.

Base: every image is loaded from disk when it is constructed, even if
the gallery never shows it.
Improved: a virtual proxy defers loading until the image is displayed,
then caches it.
"""

from __future__ import annotations

from collections.abc import Iterator

SUMMARY = "Provide a surrogate that controls access to another object."


class HighResImage:
    def __init__(self, filename: str, log: list[str]):
        self.filename = filename
        log.append(f"loading {filename}")

    def display(self) -> str:
        return f"displaying {self.filename}"


class LazyImage:
    def __init__(self, filename: str, log: list[str]):
        self.filename = filename
        self._log = log
        self._real: HighResImage | None = None

    def display(self) -> str:
        if self._real is None:
            self._real = HighResImage(self.filename, self._log)
        return self._real.display()


FILES = ["a.png", "b.png", "c.png"]


def base() -> Iterator[str]:
    log: list[str] = []
    gallery = [HighResImage(name, log) for name in FILES]
    log.append(gallery[0].display())
    yield from log
    yield f"loads: {sum(1 for line in log if line.startswith('loading'))}"


def improved() -> Iterator[str]:
    log: list[str] = []
    gallery = [LazyImage(name, log) for name in FILES]
    log.append(gallery[0].display())
    log.append(gallery[0].display())
    yield from log
    yield f"loads: {sum(1 for line in log if line.startswith('loading'))}"
