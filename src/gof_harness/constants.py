"""
Constants and enums for the pattern harness.

No magic strings - use enums for constrained values.
"""

from enum import Enum


class Category(str, Enum):
    """
    Pattern categories.

    The first three are the Gang-of-Four groupings; the last two hold
    case studies that combine patterns and patterns outside the GoF book.
    """

    CREATIONAL = "creational"
    STRUCTURAL = "structural"
    BEHAVIORAL = "behavioral"
    CASESTUDY = "casestudy"
    ADDITIONAL = "additional"


class Variant(str, Enum):
    """Which form of a pattern example to run."""

    BASE = "base"  # Naive version showing the problem
    IMPROVED = "improved"  # Version applying the pattern


class RunStatus(str, Enum):
    """Outcome of a single harness run."""

    OK = "ok"
    FAILED = "failed"


class RunState(str, Enum):
    """
    Lifecycle of a single run.

    pending -> resolving -> executing -> completed | faulted
    """

    PENDING = "pending"
    RESOLVING = "resolving"
    EXECUTING = "executing"
    COMPLETED = "completed"
    FAULTED = "faulted"

    @property
    def terminal(self) -> bool:
        return self in (RunState.COMPLETED, RunState.FAULTED)


class FaultKind(str, Enum):
    """Why a run failed."""

    NOT_FOUND = "not_found"
    EXECUTION = "execution"
    TIMEOUT = "timeout"


class OutputFormat(str, Enum):
    """Rendering formats for results."""

    TEXT = "text"
    JSON = "json"
    YAML = "yaml"


# Sibling variant used when checking base/improved pairing
SIBLING_VARIANT: dict[Variant, Variant] = {
    Variant.BASE: Variant.IMPROVED,
    Variant.IMPROVED: Variant.BASE,
}


class ErrorMessages:
    """Standardized error messages."""

    PATTERN_NOT_FOUND = "pattern not found"
    DUPLICATE_KEY = "Pattern '{key}' is already registered."
    REGISTRY_FROZEN = "Registry is frozen; cannot register '{key}'."
    TIMEOUT = "Pattern '{key}' exceeded {seconds:g}s wall-clock limit."
