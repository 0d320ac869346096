"""
Pytest configuration and shared fixtures.
"""

import tempfile
from collections.abc import Iterator
from pathlib import Path

import pytest

from gof_harness.catalog import build_catalog_registry
from gof_harness.harness import DemoHarness
from gof_harness.registry import PatternRegistry


def singleton_improved() -> list[str]:
    return ["instance created", "instance reused"]


def singleton_base() -> list[str]:
    return ["two instances"]


def observer_base() -> Iterator[str]:
    yield "polling"


def observer_improved() -> Iterator[str]:
    yield "notified"


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def fake_registry() -> PatternRegistry:
    """A small hand-built catalog, not frozen."""
    registry = PatternRegistry()
    registry.register_callable("creational", "singleton", "base", singleton_base)
    registry.register_callable(
        "creational", "singleton", "improved", singleton_improved, summary="One instance"
    )
    registry.register_callable("behavioral", "observer", "base", observer_base)
    registry.register_callable("behavioral", "observer", "improved", observer_improved)
    return registry


@pytest.fixture
def harness(fake_registry: PatternRegistry) -> DemoHarness:
    """Harness over the fake catalog."""
    return DemoHarness(fake_registry)


@pytest.fixture(scope="session")
def catalog_registry() -> PatternRegistry:
    """The full built-in catalog."""
    return build_catalog_registry()
