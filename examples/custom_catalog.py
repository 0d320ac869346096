#!/usr/bin/env python3
"""
Example: Registering Your Own Examples.

The harness works with any registry, not only the built-in catalog.
This builds a small registry by hand, including one example that fails
and one that runs too long, and shows how the harness reports them.

Usage:
    python examples/custom_catalog.py
"""

import time
from collections.abc import Iterator

from gof_harness.harness import DemoHarness, render_text
from gof_harness.registry import PatternRegistry, build_registry


def strategy_base() -> Iterator[str]:
    for kind in ("standard", "express"):
        if kind == "standard":
            yield "standard shipping: 5.00"
        else:
            yield "express shipping: 15.00"


def strategy_improved() -> Iterator[str]:
    rates = {"standard": lambda w: 5.0, "express": lambda w: 10.0 + w}
    for kind, rate in rates.items():
        yield f"{kind} shipping: {rate(5.0):.2f}"


def broken_improved() -> Iterator[str]:
    yield "half done"
    raise RuntimeError("forgot to handle this case")


def slow_base() -> Iterator[str]:
    yield "starting a long job"
    time.sleep(2)
    yield "finished"


def populate(registry: PatternRegistry) -> None:
    registry.register_callable(
        "behavioral", "strategy", "base", strategy_base, summary="Shipping rates"
    )
    registry.register_callable(
        "behavioral", "strategy", "improved", strategy_improved, summary="Shipping rates"
    )
    registry.register_callable("additional", "broken", "improved", broken_improved)
    registry.register_callable("additional", "slow", "base", slow_base)


def main() -> None:
    """Run a hand-built catalog."""
    print("Custom Catalog Demo")
    print("=" * 40)
    print()

    registry = build_registry(populate)
    print(f"Registered {len(registry)} entries")
    for key in registry.missing_pairs():
        print(f"  missing: {key}")
    print()

    harness = DemoHarness(registry, timeout_seconds=0.5)
    print(render_text(harness.run_all()))


if __name__ == "__main__":
    main()
