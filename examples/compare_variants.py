#!/usr/bin/env python3
"""
Example: Comparing Base and Improved Variants.

This runs the naive and the pattern-based version of a few catalog
entries side by side, so the difference each pattern makes is visible
in the output.

Usage:
    python examples/compare_variants.py
"""

from gof_harness.catalog import build_catalog_registry
from gof_harness.constants import Variant
from gof_harness.harness import DemoHarness, render_comparison_text


def main() -> None:
    """Compare a handful of patterns."""
    print("GoF Pattern Comparison Demo")
    print("=" * 40)
    print()

    registry = build_catalog_registry()
    harness = DemoHarness(registry)

    for category, name in [
        ("creational", "singleton"),
        ("structural", "flyweight"),
        ("behavioral", "command"),
        ("casestudy", "document-editor"),
    ]:
        comparison = harness.compare(category, name)
        print(render_comparison_text(comparison))
        print()

    # Whole categories can be compared too
    print("Behavioral patterns:")
    for key in registry.list_patterns(category="behavioral"):
        if key.variant != Variant.BASE:
            continue
        comparison = harness.compare(key.category, key.name)
        base_lines = len(comparison.base.output)
        improved_lines = len(comparison.improved.output)
        print(f"  {key.name:<24} base: {base_lines} lines, improved: {improved_lines} lines")


if __name__ == "__main__":
    main()
