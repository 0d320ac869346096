"""
Abstract Factory.

Base: the client picks concrete widget classes itself, and nothing stops
it from mixing widgets of different families.
Improved: a factory per family creates matching widgets.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator

SUMMARY = "Create families of related objects without naming their concrete classes."


class Button(ABC):
    @abstractmethod
    def render(self) -> str: ...


class Checkbox(ABC):
    @abstractmethod
    def render(self) -> str: ...


class LightButton(Button):
    def render(self) -> str:
        return "light button"


class DarkButton(Button):
    def render(self) -> str:
        return "dark button"


class LightCheckbox(Checkbox):
    def render(self) -> str:
        return "light checkbox"


class DarkCheckbox(Checkbox):
    def render(self) -> str:
        return "dark checkbox"


class WidgetFactory(ABC):
    """Creates one consistent family of widgets."""

    @abstractmethod
    def create_button(self) -> Button: ...

    @abstractmethod
    def create_checkbox(self) -> Checkbox: ...


class LightFactory(WidgetFactory):
    def create_button(self) -> Button:
        return LightButton()

    def create_checkbox(self) -> Checkbox:
        return LightCheckbox()


class DarkFactory(WidgetFactory):
    def create_button(self) -> Button:
        return DarkButton()

    def create_checkbox(self) -> Checkbox:
        return DarkCheckbox()


def render_dialog(factory: WidgetFactory) -> list[str]:
    return [factory.create_button().render(), factory.create_checkbox().render()]


def base() -> Iterator[str]:
    theme = "dark"
    button = DarkButton() if theme == "dark" else LightButton()
    # The checkbox branch was never updated for the dark theme
    checkbox = LightCheckbox()

    yield f"theme: {theme}"
    yield button.render()
    yield checkbox.render()
    yield "widgets match: False"


def improved() -> Iterator[str]:
    factories: dict[str, WidgetFactory] = {"light": LightFactory(), "dark": DarkFactory()}

    for theme, factory in factories.items():
        widgets = render_dialog(factory)
        yield f"theme: {theme}"
        yield from widgets
        yield f"widgets match: {all(w.startswith(theme) for w in widgets)}"
