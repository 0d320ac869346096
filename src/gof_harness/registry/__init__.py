"""
Pattern registry - the catalog of runnable examples, keyed by
(category, name, variant).
"""

from gof_harness.registry.registry import PatternRegistry, build_registry

__all__ = [
    "PatternRegistry",
    "build_registry",
]
