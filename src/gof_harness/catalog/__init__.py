"""
Built-in pattern catalog - the teaching content.

Every pattern ships a naive ``base`` example and an ``improved`` example
that applies the pattern. Patterns are grouped by category:

- creational - object creation
- structural - composing objects and classes
- behavioral - responsibilities and communication
- casestudy - several patterns working together
- additional - useful patterns outside the GoF book
"""

from gof_harness.catalog.loader import (
    build_catalog_registry,
    entries_from_module,
    iter_pattern_modules,
    load_catalog,
)

__all__ = [
    "build_catalog_registry",
    "entries_from_module",
    "iter_pattern_modules",
    "load_catalog",
]
