"""
Error types for the registry and harness.

The registry raises these for catalog bugs and failed lookups. The harness
catches them at its boundary and turns them into failed RunResults.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gof_harness.constants import ErrorMessages

if TYPE_CHECKING:
    from gof_harness.models.entry import PatternKey


class PatternHarnessError(Exception):
    """Base class for all harness errors."""


class DuplicateKeyError(PatternHarnessError, ValueError):
    """A (category, name, variant) key was registered twice."""

    def __init__(self, key: PatternKey):
        self.key = key
        super().__init__(ErrorMessages.DUPLICATE_KEY.format(key=key))


class RegistryFrozenError(PatternHarnessError, RuntimeError):
    """Registration attempted after the initialization phase ended."""

    def __init__(self, key: PatternKey):
        self.key = key
        super().__init__(ErrorMessages.REGISTRY_FROZEN.format(key=key))


class NotFoundError(PatternHarnessError, LookupError):
    """No entry is registered under the requested key."""

    def __init__(self, category: str, name: str, variant: str):
        self.category = category
        self.name = name
        self.variant = variant
        super().__init__(f"{ErrorMessages.PATTERN_NOT_FOUND}: {category}/{name}/{variant}")


class ExecutionFault(PatternHarnessError):
    """
    A pattern's own code raised while running.

    The original exception is kept as ``__cause__``.
    """

    def __init__(self, key: PatternKey | None, message: str):
        self.key = key
        super().__init__(message)

    @classmethod
    def from_exception(cls, key: PatternKey | None, exc: BaseException) -> ExecutionFault:
        """Wrap an exception raised by a run callable."""
        detail = str(exc)
        message = f"{type(exc).__name__}: {detail}" if detail else type(exc).__name__
        fault = cls(key, message)
        fault.__cause__ = exc
        return fault


class TimeoutFault(ExecutionFault):
    """A run exceeded the configured wall-clock bound."""

    def __init__(self, key: PatternKey, seconds: float):
        self.seconds = seconds
        super().__init__(key, ErrorMessages.TIMEOUT.format(key=key, seconds=seconds))
