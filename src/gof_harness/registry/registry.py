"""
Pattern Registry - the catalog of runnable examples.

The registry is populated once during startup and then frozen. After that
it only answers lookups and listings.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any

from pydantic import ValidationError

from gof_harness.constants import SIBLING_VARIANT, Category, Variant
from gof_harness.errors import DuplicateKeyError, NotFoundError, RegistryFrozenError
from gof_harness.models.entry import PatternEntry, PatternKey, normalize_name, normalize_token

logger = logging.getLogger(__name__)


class PatternRegistry:
    """
    Holds every (category, name, variant) entry and answers lookups.

    Registries are plain values passed to whoever needs them; several
    independent catalogs can coexist (e.g. a fake one in tests).
    """

    def __init__(self) -> None:
        self._entries: dict[PatternKey, PatternEntry] = {}
        self._frozen = False

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __repr__(self) -> str:
        state = "frozen" if self._frozen else "open"
        return f"PatternRegistry({len(self._entries)} entries, {state})"

    @property
    def frozen(self) -> bool:
        """True once the initialization phase has ended."""
        return self._frozen

    def freeze(self) -> None:
        """End the initialization phase. Further registration fails."""
        self._frozen = True
        logger.debug("Registry frozen with %d entries", len(self._entries))

    def register(self, entry: PatternEntry) -> PatternKey:
        """
        Register an entry.

        Args:
            entry: The pattern entry

        Returns:
            The key it was registered under

        Raises:
            DuplicateKeyError: If the key is already registered
            RegistryFrozenError: If the registry has been frozen
        """
        key = entry.key
        if self._frozen:
            raise RegistryFrozenError(key)
        if key in self._entries:
            raise DuplicateKeyError(key)

        self._entries[key] = entry
        logger.debug("Registered %s", key)
        return key

    def register_callable(
        self,
        category: Category | str,
        name: str,
        variant: Variant | str,
        run: Callable[[], Any],
        summary: str = "",
    ) -> PatternKey:
        """
        Build and register an entry from its parts.

        Useful for tests and ad-hoc catalogs.
        """
        entry = PatternEntry(
            category=category,
            name=name,
            variant=variant,
            run=run,
            summary=summary,
        )
        return self.register(entry)

    def resolve(
        self,
        category: Category | str,
        name: str,
        variant: Variant | str,
    ) -> PatternEntry:
        """
        Look up the entry for a key.

        Unknown category or variant tokens count as not found.

        Raises:
            NotFoundError: If nothing is registered under the key
        """
        try:
            key = PatternKey(category=category, name=name, variant=variant)
        except ValidationError as e:
            raise NotFoundError(str(category), str(name), str(variant)) from e

        entry = self._entries.get(key)
        if entry is None:
            raise NotFoundError(key.category.value, key.name, key.variant.value)
        return entry

    def list_patterns(
        self,
        category: Category | str | None = None,
        name: str | None = None,
    ) -> list[PatternKey]:
        """
        List registered keys with optional filtering.

        Args:
            category: Filter by category
            name: Filter by pattern name

        Returns:
            Keys sorted by category, then name, then variant
        """
        return [entry.key for entry in self.list_entries(category=category, name=name)]

    def list_entries(
        self,
        category: Category | str | None = None,
        name: str | None = None,
    ) -> list[PatternEntry]:
        """List registered entries, in the same order as list_patterns."""
        result: Iterable[PatternEntry] = self._entries.values()

        if category is not None:
            wanted = (
                category.value if isinstance(category, Category) else normalize_token(str(category))
            )
            result = [e for e in result if e.category.value == wanted]

        if name is not None:
            try:
                wanted_name = normalize_name(name)
            except ValueError:
                return []
            result = [e for e in result if e.name == wanted_name]

        return sorted(result, key=lambda e: e.key.sort_key())

    def categories(self) -> list[Category]:
        """Categories that have at least one entry, sorted by value."""
        return sorted({key.category for key in self._entries}, key=lambda c: c.value)

    def missing_pairs(self) -> list[PatternKey]:
        """
        Report base/improved pairing gaps.

        Returns:
            Keys of the sibling variants that are not registered
        """
        missing = {
            key.model_copy(update={"variant": SIBLING_VARIANT[key.variant]})
            for key in self._entries
        }
        return sorted(
            (key for key in missing if key not in self._entries),
            key=lambda k: k.sort_key(),
        )


def build_registry(*populators: Callable[[PatternRegistry], None]) -> PatternRegistry:
    """
    Run the single initialization phase and return a frozen registry.

    Args:
        populators: Callables that register entries into the new registry

    Returns:
        The frozen registry
    """
    registry = PatternRegistry()
    for populate in populators:
        populate(registry)
    registry.freeze()
    logger.info("Pattern registry ready: %d entries", len(registry))
    return registry
