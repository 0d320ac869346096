"""
Catalog loader - discovers the built-in pattern modules.

Each category is a subpackage of ``gof_harness.catalog`` and each pattern
is one module inside it. A pattern module provides:

- SUMMARY: one-line description
- base(): the naive example
- improved(): the example applying the pattern

The module name becomes the pattern name (``factory_method`` ->
``factory-method``).
"""

from __future__ import annotations

import importlib
import logging
import pkgutil
from types import ModuleType

from gof_harness.constants import Category, Variant
from gof_harness.models.entry import PatternEntry
from gof_harness.registry import PatternRegistry, build_registry

logger = logging.getLogger(__name__)

CATALOG_PACKAGE = "gof_harness.catalog"


def iter_pattern_modules(category: Category) -> list[ModuleType]:
    """Import every pattern module of one category, sorted by name."""
    package = importlib.import_module(f"{CATALOG_PACKAGE}.{category.value}")
    modules = []
    for info in sorted(pkgutil.iter_modules(package.__path__), key=lambda m: m.name):
        if info.ispkg or info.name.startswith("_"):
            continue
        modules.append(importlib.import_module(f"{package.__name__}.{info.name}"))
    return modules


def entries_from_module(category: Category, module: ModuleType) -> list[PatternEntry]:
    """Build entries for every variant a pattern module defines."""
    name = module.__name__.rsplit(".", 1)[-1]
    summary = getattr(module, "SUMMARY", "")
    entries = []

    for variant in Variant:
        run = getattr(module, variant.value, None)
        if run is None:
            continue
        if not callable(run):
            logger.warning("%s.%s is not callable; skipping", module.__name__, variant.value)
            continue
        entries.append(
            PatternEntry(
                category=category,
                name=name,
                variant=variant,
                run=run,
                summary=summary,
                source=module.__name__,
            )
        )

    return entries


def load_catalog(
    registry: PatternRegistry,
    categories: list[Category] | None = None,
) -> int:
    """
    Register the built-in catalog.

    Args:
        registry: Registry to populate (must not be frozen)
        categories: Limit to these categories (default: all)

    Returns:
        Number of entries registered
    """
    count = 0
    for category in categories or list(Category):
        for module in iter_pattern_modules(category):
            entries = entries_from_module(category, module)
            if not entries:
                logger.warning("Pattern module %s defines no variants", module.__name__)
                continue
            for entry in entries:
                registry.register(entry)
                count += 1

    logger.debug("Loaded %d catalog entries", count)
    return count


def build_catalog_registry(categories: list[Category] | None = None) -> PatternRegistry:
    """Build a frozen registry holding the built-in catalog."""
    return build_registry(lambda registry: load_catalog(registry, categories))
