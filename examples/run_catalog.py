#!/usr/bin/env python3
"""
Example: Running the Built-in Catalog.

Lists every registered pattern, runs them all, and writes the results
to a YAML report.

Usage:
    python examples/run_catalog.py
"""

import tempfile
from pathlib import Path

from gof_harness.catalog import build_catalog_registry
from gof_harness.harness import DemoHarness, render_yaml


def main() -> None:
    """Run every catalog example."""
    print("GoF Pattern Catalog")
    print("=" * 40)
    print()

    registry = build_catalog_registry()
    for category in registry.categories():
        names = sorted({key.name for key in registry.list_patterns(category=category)})
        print(f"{category.value} ({len(names)}):")
        for name in names:
            print(f"  {name}")
    print()

    harness = DemoHarness(registry, timeout_seconds=5)
    results = harness.run_all()
    failed = [r for r in results if not r.ok]
    print(f"Ran {len(results)} examples, {len(failed)} failed")
    for result in failed:
        print(f"  {result.selection}: {result.error}")

    with tempfile.TemporaryDirectory() as tmp:
        report = Path(tmp) / "report.yaml"
        report.write_text(render_yaml(results))
        print(f"Report written: {report.stat().st_size} bytes")


if __name__ == "__main__":
    main()
