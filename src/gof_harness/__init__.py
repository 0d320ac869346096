"""
GoF Pattern Harness.

A teaching collection of Gang-of-Four design patterns, each shown as a naive
``base`` example and an ``improved`` example, plus the registry and harness
used to list, run and compare them.
"""

from gof_harness.constants import Category, FaultKind, RunState, RunStatus, Variant
from gof_harness.errors import (
    DuplicateKeyError,
    ExecutionFault,
    NotFoundError,
    PatternHarnessError,
    RegistryFrozenError,
    TimeoutFault,
)
from gof_harness.harness import DemoHarness
from gof_harness.models import PatternComparison, PatternEntry, PatternKey, RunResult
from gof_harness.registry import PatternRegistry, build_registry

__version__ = "0.1.0"

__all__ = [
    "Category",
    "DemoHarness",
    "DuplicateKeyError",
    "ExecutionFault",
    "FaultKind",
    "NotFoundError",
    "PatternComparison",
    "PatternEntry",
    "PatternHarnessError",
    "PatternKey",
    "PatternRegistry",
    "RegistryFrozenError",
    "RunResult",
    "RunState",
    "RunStatus",
    "TimeoutFault",
    "Variant",
    "build_registry",
]
