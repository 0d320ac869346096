"""
Tests for the pattern registry.

Tests cover:
- Registration and duplicate detection
- Resolution round-trips and NotFoundError
- Deterministic, filtered listing
- Freezing and base/improved pairing checks
"""

import pytest

from gof_harness.constants import Category, Variant
from gof_harness.errors import DuplicateKeyError, NotFoundError, RegistryFrozenError
from gof_harness.models import PatternEntry, PatternKey
from gof_harness.registry import PatternRegistry, build_registry


def noop() -> list[str]:
    return []


class TestRegister:
    """Tests for registering entries."""

    def test_register_returns_key(self) -> None:
        """Registration returns the entry's key."""
        registry = PatternRegistry()
        key = registry.register_callable("structural", "adapter", "base", noop)
        assert key == PatternKey(category="structural", name="adapter", variant="base")
        assert key in registry
        assert len(registry) == 1

    def test_duplicate_key_rejected(self) -> None:
        """Registering the same key twice fails."""
        registry = PatternRegistry()
        registry.register_callable("structural", "adapter", "base", noop)
        with pytest.raises(DuplicateKeyError) as exc_info:
            registry.register_callable("structural", "adapter", "base", noop)
        assert exc_info.value.key.name == "adapter"

    def test_duplicate_detected_after_normalization(self) -> None:
        """Names that normalize to the same key collide."""
        registry = PatternRegistry()
        registry.register_callable("behavioral", "template-method", "base", noop)
        with pytest.raises(DuplicateKeyError):
            registry.register_callable("behavioral", "Template_Method", "base", noop)

    def test_same_name_in_other_category_allowed(self) -> None:
        """Names are unique within a category only."""
        registry = PatternRegistry()
        registry.register_callable("structural", "proxy", "base", noop)
        registry.register_callable("additional", "proxy", "base", noop)
        assert len(registry) == 2

    def test_register_after_freeze_rejected(self) -> None:
        """A frozen registry is read-only."""
        registry = PatternRegistry()
        registry.freeze()
        assert registry.frozen
        with pytest.raises(RegistryFrozenError):
            registry.register_callable("structural", "adapter", "base", noop)


class TestResolve:
    """Tests for resolving keys."""

    def test_resolve_round_trip(self, fake_registry: PatternRegistry) -> None:
        """Resolve returns exactly the registered entry."""
        for key in fake_registry.list_patterns():
            entry = fake_registry.resolve(key.category, key.name, key.variant)
            assert entry.key == key

    def test_resolve_returns_same_object(self) -> None:
        """The registered entry object itself comes back."""
        registry = PatternRegistry()
        entry = PatternEntry(category="creational", name="builder", variant="improved", run=noop)
        registry.register(entry)
        assert registry.resolve("creational", "builder", "improved") is entry

    def test_resolve_accepts_enums(self, fake_registry: PatternRegistry) -> None:
        """Enum and string tokens are interchangeable."""
        entry = fake_registry.resolve(Category.CREATIONAL, "singleton", Variant.IMPROVED)
        assert entry.summary == "One instance"

    def test_resolve_ignores_token_case(self, fake_registry: PatternRegistry) -> None:
        """Resolve accepts the same spellings the listing filters do."""
        entry = fake_registry.resolve(" Behavioral ", "Observer", "BASE")
        assert str(entry.key) == "behavioral/observer/base"
        assert [e.key for e in fake_registry.list_entries(category="Behavioral")] == [
            fake_registry.resolve("behavioral", "observer", "base").key,
            fake_registry.resolve("BEHAVIORAL", "observer", "Improved").key,
        ]

    def test_register_normalizes_tokens(self) -> None:
        """Registration stores lower-case category and variant."""
        registry = PatternRegistry()
        key = registry.register_callable("Structural", "adapter", "Base", noop)
        assert key == PatternKey(category="structural", name="adapter", variant="base")

    def test_resolve_missing(self, fake_registry: PatternRegistry) -> None:
        """Unregistered keys raise NotFoundError."""
        with pytest.raises(NotFoundError):
            fake_registry.resolve("behavioral", "nonexistent", "base")

    def test_resolve_invalid_tokens(self, fake_registry: PatternRegistry) -> None:
        """Unknown category or variant tokens count as not found."""
        with pytest.raises(NotFoundError):
            fake_registry.resolve("gastronomic", "singleton", "base")
        with pytest.raises(NotFoundError):
            fake_registry.resolve("creational", "singleton", "deluxe")
        with pytest.raises(NotFoundError):
            fake_registry.resolve("creational", "", "base")

    def test_not_found_is_lookup_error(self, fake_registry: PatternRegistry) -> None:
        """NotFoundError is a LookupError."""
        with pytest.raises(LookupError):
            fake_registry.resolve("creational", "builder", "base")


class TestListing:
    """Tests for list_patterns and list_entries."""

    def test_lexicographic_order(self) -> None:
        """Keys sort by category, then name, then variant."""
        registry = PatternRegistry()
        registry.register_callable("structural", "proxy", "improved", noop)
        registry.register_callable("behavioral", "visitor", "base", noop)
        registry.register_callable("structural", "adapter", "improved", noop)
        registry.register_callable("structural", "adapter", "base", noop)
        registry.register_callable("creational", "builder", "base", noop)

        assert [str(k) for k in registry.list_patterns()] == [
            "behavioral/visitor/base",
            "creational/builder/base",
            "structural/adapter/base",
            "structural/adapter/improved",
            "structural/proxy/improved",
        ]

    def test_listing_is_deterministic(self, fake_registry: PatternRegistry) -> None:
        """Same filters, same output."""
        assert fake_registry.list_patterns() == fake_registry.list_patterns()
        assert fake_registry.list_patterns("behavioral") == fake_registry.list_patterns(
            "behavioral"
        )

    def test_filter_by_category(self, fake_registry: PatternRegistry) -> None:
        """Category filter keeps only that category."""
        keys = fake_registry.list_patterns(category="behavioral")
        assert len(keys) == 2
        assert all(k.category == Category.BEHAVIORAL for k in keys)

    def test_filter_by_name(self, fake_registry: PatternRegistry) -> None:
        """Name filter matches normalized names."""
        keys = fake_registry.list_patterns(name="Singleton")
        assert [k.variant for k in keys] == [Variant.BASE, Variant.IMPROVED]

    def test_unknown_filters_match_nothing(self, fake_registry: PatternRegistry) -> None:
        """Unknown filter values give an empty list, not an error."""
        assert fake_registry.list_patterns(category="gastronomic") == []
        assert fake_registry.list_patterns(name="no such pattern!") == []

    def test_list_entries_matches_keys(self, fake_registry: PatternRegistry) -> None:
        """Entries come back in key order."""
        entries = fake_registry.list_entries()
        assert [e.key for e in entries] == fake_registry.list_patterns()

    def test_categories(self, fake_registry: PatternRegistry) -> None:
        """Categories present in the registry, sorted by value."""
        assert fake_registry.categories() == [Category.BEHAVIORAL, Category.CREATIONAL]


class TestPairing:
    """Tests for base/improved pairing checks."""

    def test_no_missing_pairs(self, fake_registry: PatternRegistry) -> None:
        """A fully paired catalog reports nothing."""
        assert fake_registry.missing_pairs() == []

    def test_missing_pairs_reported(self) -> None:
        """Missing siblings are reported, not enforced."""
        registry = PatternRegistry()
        registry.register_callable("structural", "bridge", "base", noop)
        registry.register_callable("behavioral", "state", "improved", noop)

        missing = [str(k) for k in registry.missing_pairs()]
        assert missing == ["behavioral/state/base", "structural/bridge/improved"]


class TestBuildRegistry:
    """Tests for the single initialization phase."""

    def test_populators_run_then_freeze(self) -> None:
        """build_registry runs every populator and freezes."""

        def populate_a(registry: PatternRegistry) -> None:
            registry.register_callable("creational", "builder", "base", noop)

        def populate_b(registry: PatternRegistry) -> None:
            registry.register_callable("creational", "builder", "improved", noop)

        registry = build_registry(populate_a, populate_b)
        assert len(registry) == 2
        assert registry.frozen

    def test_independent_registries(self) -> None:
        """Registries do not share state."""
        first = build_registry(
            lambda r: r.register_callable("creational", "builder", "base", noop)
        )
        second = build_registry()
        assert len(first) == 1
        assert len(second) == 0
