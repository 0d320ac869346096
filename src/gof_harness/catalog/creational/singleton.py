"""
Singleton.

Base: every caller builds its own configuration object, so settings
changed in one place are invisible elsewhere.
Improved: the class hands out a single shared instance.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

SUMMARY = "Ensure a class has only one instance and provide a global point of access to it."


class PlainConfig:
    def __init__(self) -> None:
        self.settings: dict[str, Any] = {"theme": "light"}


class SingletonMeta(type):
    """Metaclass that caches one instance per class."""

    _instances: dict[type, Any] = {}

    def __call__(cls, *args: Any, **kwargs: Any) -> Any:
        if cls not in SingletonMeta._instances:
            SingletonMeta._instances[cls] = super().__call__(*args, **kwargs)
        return SingletonMeta._instances[cls]

    def reset(cls) -> None:
        SingletonMeta._instances.pop(cls, None)


class AppConfig(metaclass=SingletonMeta):
    def __init__(self) -> None:
        self.settings: dict[str, Any] = {"theme": "light"}


def base() -> Iterator[str]:
    first = PlainConfig()
    second = PlainConfig()
    first.settings["theme"] = "dark"

    yield "two config objects created"
    yield f"first theme: {first.settings['theme']}"
    yield f"second theme: {second.settings['theme']}"
    yield f"same instance: {first is second}"


def improved() -> Iterator[str]:
    # Start from a clean slate so every run prints the same lines
    AppConfig.reset()

    first = AppConfig()
    yield "instance created"
    second = AppConfig()
    yield "instance reused"

    first.settings["theme"] = "dark"
    yield f"second theme: {second.settings['theme']}"
    yield f"same instance: {first is second}"
