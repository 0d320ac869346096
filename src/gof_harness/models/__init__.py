"""
Pydantic models for the pattern harness.

This module provides:
- PatternKey: (category, name, variant) identity
- PatternEntry: A registered runnable example
- RunResult: Outcome of one harness run
- PatternComparison: Base and improved results side by side
"""

from gof_harness.models.entry import PatternEntry, PatternKey, normalize_name, normalize_token
from gof_harness.models.result import PatternComparison, RunResult

__all__ = [
    "PatternComparison",
    "PatternEntry",
    "PatternKey",
    "RunResult",
    "normalize_name",
    "normalize_token",
]
