"""
Tests for the built-in pattern catalog.

Every shipped pattern must have both variants and run cleanly; a few
patterns also get their output checked line by line.
"""

import pytest

from gof_harness.catalog import entries_from_module, iter_pattern_modules, load_catalog
from gof_harness.constants import Category, Variant
from gof_harness.harness import DemoHarness
from gof_harness.registry import PatternRegistry

GOF_PATTERNS = {
    Category.CREATIONAL: [
        "abstract-factory",
        "builder",
        "factory-method",
        "prototype",
        "singleton",
    ],
    Category.STRUCTURAL: [
        "adapter",
        "bridge",
        "composite",
        "decorator",
        "facade",
        "flyweight",
        "proxy",
    ],
    Category.BEHAVIORAL: [
        "chain-of-responsibility",
        "command",
        "interpreter",
        "iterator",
        "mediator",
        "memento",
        "observer",
        "state",
        "strategy",
        "template-method",
        "visitor",
    ],
}


@pytest.fixture(scope="module")
def catalog_harness(catalog_registry: PatternRegistry) -> DemoHarness:
    """Harness over the full catalog."""
    return DemoHarness(catalog_registry)


class TestCatalogContents:
    """Tests for what the catalog registers."""

    def test_all_gof_patterns_present(self, catalog_registry: PatternRegistry) -> None:
        """All 23 GoF patterns are registered."""
        total = 0
        for category, names in GOF_PATTERNS.items():
            registered = sorted({k.name for k in catalog_registry.list_patterns(category)})
            assert registered == names
            total += len(names)
        assert total == 23

    def test_case_studies_and_additional(self, catalog_registry: PatternRegistry) -> None:
        """Case studies and additional patterns are registered."""
        case_studies = {k.name for k in catalog_registry.list_patterns("casestudy")}
        additional = {k.name for k in catalog_registry.list_patterns("additional")}
        assert case_studies == {"document-editor", "order-pipeline"}
        assert additional == {"null-object", "object-pool"}

    def test_every_pattern_is_paired(self, catalog_registry: PatternRegistry) -> None:
        """Every base has an improved and vice versa."""
        assert catalog_registry.missing_pairs() == []

    def test_registry_is_frozen(self, catalog_registry: PatternRegistry) -> None:
        """The catalog registry is read-only."""
        assert catalog_registry.frozen

    def test_entries_have_summaries_and_sources(
        self, catalog_registry: PatternRegistry
    ) -> None:
        """Every entry carries a summary and its module."""
        for entry in catalog_registry.list_entries():
            assert entry.summary
            assert entry.source and entry.source.startswith("gof_harness.catalog.")

    def test_load_subset_of_categories(self) -> None:
        """load_catalog can be limited to some categories."""
        registry = PatternRegistry()
        count = load_catalog(registry, [Category.CREATIONAL])
        assert count == 10
        assert registry.categories() == [Category.CREATIONAL]

    def test_loading_twice_is_a_duplicate(self) -> None:
        """Catalog keys collide if loaded twice into one registry."""
        registry = PatternRegistry()
        load_catalog(registry, [Category.ADDITIONAL])
        with pytest.raises(ValueError):
            load_catalog(registry, [Category.ADDITIONAL])

    def test_module_discovery(self) -> None:
        """Modules are discovered in name order."""
        modules = iter_pattern_modules(Category.CASESTUDY)
        names = [m.__name__.rsplit(".", 1)[-1] for m in modules]
        assert names == ["document_editor", "order_pipeline"]

    def test_entries_from_module(self) -> None:
        """A module yields one entry per variant function."""
        module = iter_pattern_modules(Category.ADDITIONAL)[0]
        entries = entries_from_module(Category.ADDITIONAL, module)
        assert [e.variant for e in entries] == [Variant.BASE, Variant.IMPROVED]
        assert entries[0].name == "null-object"


class TestCatalogRuns:
    """Every catalog example runs cleanly and deterministically."""

    def test_run_all_ok(self, catalog_harness: DemoHarness) -> None:
        """No catalog example faults."""
        results = catalog_harness.run_all()
        failures = {r.selection: r.error for r in results if not r.ok}
        assert failures == {}
        assert len(results) == 54
        assert all(r.output for r in results)

    def test_runs_are_deterministic(self, catalog_harness: DemoHarness) -> None:
        """Two batch runs produce identical output."""
        first = [r.output for r in catalog_harness.run_all()]
        second = [r.output for r in catalog_harness.run_all()]
        assert first == second


class TestCatalogOutput:
    """Spot checks of catalog output."""

    def test_singleton(self, catalog_harness: DemoHarness) -> None:
        """Improved singleton shares one instance."""
        base = catalog_harness.run("creational", "singleton", "base")
        improved = catalog_harness.run("creational", "singleton", "improved")
        assert base.output[-1] == "same instance: False"
        assert improved.output == [
            "instance created",
            "instance reused",
            "second theme: dark",
            "same instance: True",
        ]

    def test_observer(self, catalog_harness: DemoHarness) -> None:
        """Observers are notified and can unsubscribe."""
        result = catalog_harness.run("behavioral", "observer", "improved")
        assert result.output == [
            "current: 20.0C",
            "average: 20.0C",
            "alert: fine",
            "current: 22.0C",
            "average: 21.0C",
            "alert: hot",
            "current: 24.0C",
            "average: 22.0C",
        ]

    def test_command_undo(self, catalog_harness: DemoHarness) -> None:
        """Commands undo in reverse order."""
        result = catalog_harness.run("behavioral", "command", "improved")
        assert result.output == [
            "text: 'Hello, world'",
            "after undo: 'Hello'",
            "after undo: ''",
            "undo on empty history: False",
        ]

    def test_chain_of_responsibility(self, catalog_harness: DemoHarness) -> None:
        """Base and improved route tickets the same way."""
        comparison = catalog_harness.compare("behavioral", "chain-of-responsibility")
        assert comparison.base.output == comparison.improved.output
        assert comparison.improved.output[-1] == "nobody handles 'alien invasion'"

    def test_factory_method(self, catalog_harness: DemoHarness) -> None:
        """The base switch cannot handle air; the improved version can."""
        comparison = catalog_harness.compare("creational", "factory-method")
        assert comparison.base.output[-1] == "planning failed: unsupported delivery mode: air"
        assert comparison.improved.output[-1] == "drone delivers parcels by air"

    def test_decorator_costs(self, catalog_harness: DemoHarness) -> None:
        """Decorators stack prices."""
        result = catalog_harness.run("structural", "decorator", "improved")
        assert "coffee, milk, sugar, whip: 3.50" in result.output

    def test_flyweight_shares_types(self, catalog_harness: DemoHarness) -> None:
        """The flyweight version needs only three type objects."""
        comparison = catalog_harness.compare("structural", "flyweight")
        assert comparison.base.output[1] == "type objects: 100"
        assert comparison.improved.output[1] == "type objects: 3"

    def test_proxy_loads_lazily(self, catalog_harness: DemoHarness) -> None:
        """The proxy loads once, on first display."""
        comparison = catalog_harness.compare("structural", "proxy")
        assert comparison.base.output[-1] == "loads: 3"
        assert comparison.improved.output[-1] == "loads: 1"

    def test_interpreter(self, catalog_harness: DemoHarness) -> None:
        """The expression tree evaluates and rejects undefined variables."""
        result = catalog_harness.run("behavioral", "interpreter", "improved")
        assert result.output == [
            "((x + y) - z) = 11",
            "((x - 2) + w) rejected: undefined variable 'w'",
        ]

    def test_state(self, catalog_harness: DemoHarness) -> None:
        """Order states allow only legal transitions."""
        result = catalog_harness.run("behavioral", "state", "improved")
        assert result.output == [
            "cannot ship when new",
            "paid",
            "shipped",
            "cannot pay when shipped",
            "final state: shipped",
        ]

    def test_document_editor(self, catalog_harness: DemoHarness) -> None:
        """The case study undoes the last edit."""
        result = catalog_harness.run("casestudy", "document-editor", "improved")
        assert result.output == [
            "word count: 7",
            "# Report",
            "  # Intro",
            "    Patterns help.",
            "word count: 4",
        ]

    def test_order_pipeline_matches_monolith(self, catalog_harness: DemoHarness) -> None:
        """The refactored pipeline keeps the monolith's behavior."""
        comparison = catalog_harness.compare("casestudy", "order-pipeline")
        assert comparison.improved.output[: len(comparison.base.output)] == comparison.base.output
        assert comparison.improved.output[-1] == "card charged 50.00 for S-1"

    def test_object_pool(self, catalog_harness: DemoHarness) -> None:
        """The pool reuses connections and enforces its size."""
        result = catalog_harness.run("additional", "object-pool", "improved")
        assert result.output[:4] == [f"conn-1: select {i}" for i in range(1, 5)]
        assert result.output[-2:] == ["third checkout: pool exhausted", "connections opened: 2"]
