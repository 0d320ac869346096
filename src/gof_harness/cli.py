#!/usr/bin/env python3
"""
Command-line entry point for the pattern harness.

Examples:
    gof-harness list behavioral
    gof-harness run behavioral observer improved
    gof-harness compare creational singleton --format yaml
    gof-harness run-all --timeout 5
    gof-harness check

Exit codes: 0 when everything ran ok, 1 when any run failed (or pairs
are missing for ``check``), 2 for usage and configuration errors.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from gof_harness.config import HarnessConfig, load_config
from gof_harness.constants import Category, OutputFormat, Variant
from gof_harness.harness import (
    DemoHarness,
    render_comparison_text,
    render_entries_text,
    render_result_text,
    render_structured,
    render_text,
)
from gof_harness.registry import PatternRegistry

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--format",
        choices=[f.value for f in OutputFormat],
        default=None,
        help="Output format (default: text, or from config)",
    )
    common.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Wall-clock limit per run, in seconds",
    )
    common.add_argument("--config", type=Path, default=None, help="YAML config file")
    common.add_argument("--debug", action="store_true", help="Enable debug logging")

    parser = argparse.ArgumentParser(
        prog="gof-harness",
        description="List, run and compare GoF design-pattern examples",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    list_cmd = commands.add_parser("list", parents=[common], help="List registered patterns")
    list_cmd.add_argument("category", nargs="?", default=None)
    list_cmd.add_argument("name", nargs="?", default=None)

    run_cmd = commands.add_parser("run", parents=[common], help="Run one pattern variant")
    run_cmd.add_argument("category", choices=[c.value for c in Category])
    run_cmd.add_argument("name")
    run_cmd.add_argument("variant", choices=[v.value for v in Variant])

    run_all_cmd = commands.add_parser(
        "run-all", parents=[common], help="Run every matching pattern variant"
    )
    run_all_cmd.add_argument("category", nargs="?", default=None)
    run_all_cmd.add_argument("name", nargs="?", default=None)

    compare_cmd = commands.add_parser(
        "compare", parents=[common], help="Run base and improved side by side"
    )
    compare_cmd.add_argument("category", choices=[c.value for c in Category])
    compare_cmd.add_argument("name")

    commands.add_parser("check", parents=[common], help="Report missing base/improved pairs")

    return parser


def main(
    argv: Sequence[str] | None = None,
    registry: PatternRegistry | None = None,
) -> int:
    """
    Run the CLI.

    Args:
        argv: Arguments (defaults to sys.argv[1:])
        registry: Registry to use (defaults to the built-in catalog)

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config).with_overrides(
            timeout_seconds=args.timeout,
            output_format=args.format,
            log_level="DEBUG" if args.debug else None,
        )
    except (OSError, ValidationError, ValueError, yaml.YAMLError) as e:
        print(f"gof-harness: invalid configuration: {e}", file=sys.stderr)
        return EXIT_USAGE

    logging.basicConfig(level=config.log_level)
    logging.getLogger().setLevel(config.log_level)

    if registry is None:
        # Import here so --help stays fast
        from gof_harness.catalog import build_catalog_registry

        registry = build_catalog_registry()

    harness = DemoHarness(registry, timeout_seconds=config.timeout_seconds)
    handler = COMMANDS[args.command]
    return handler(args, harness, config)


def _emit(data: Any, config: HarnessConfig, text: Callable[[Any], str]) -> None:
    if config.output_format == OutputFormat.TEXT:
        print(text(data))
    else:
        print(render_structured(data, config.output_format).rstrip("\n"))


def _cmd_list(args: argparse.Namespace, harness: DemoHarness, config: HarnessConfig) -> int:
    entries = harness.registry.list_entries(category=args.category, name=args.name)
    _emit(entries, config, render_entries_text)
    return EXIT_OK


def _cmd_run(args: argparse.Namespace, harness: DemoHarness, config: HarnessConfig) -> int:
    result = harness.run(args.category, args.name, args.variant)
    _emit(result, config, render_result_text)
    return EXIT_OK if result.ok else EXIT_FAILED


def _cmd_run_all(args: argparse.Namespace, harness: DemoHarness, config: HarnessConfig) -> int:
    results = harness.run_all(category=args.category, name=args.name)
    if not results:
        print("gof-harness: no patterns match", file=sys.stderr)
        return EXIT_FAILED
    _emit(results, config, render_text)
    return EXIT_OK if all(r.ok for r in results) else EXIT_FAILED


def _cmd_compare(args: argparse.Namespace, harness: DemoHarness, config: HarnessConfig) -> int:
    comparison = harness.compare(args.category, args.name)
    _emit(comparison, config, render_comparison_text)
    return EXIT_OK if comparison.ok else EXIT_FAILED


def _cmd_check(args: argparse.Namespace, harness: DemoHarness, config: HarnessConfig) -> int:
    missing = harness.registry.missing_pairs()
    if config.output_format == OutputFormat.TEXT:
        if missing:
            print("\n".join(f"missing: {key}" for key in missing))
        else:
            print(f"all {len(harness.registry)} entries are paired")
    else:
        print(render_structured([str(key) for key in missing], config.output_format).rstrip("\n"))
    return EXIT_FAILED if missing else EXIT_OK


COMMANDS: dict[
    str, Callable[[argparse.Namespace, DemoHarness, HarnessConfig], int]
] = {
    "list": _cmd_list,
    "run": _cmd_run,
    "run-all": _cmd_run_all,
    "compare": _cmd_compare,
    "check": _cmd_check,
}


if __name__ == "__main__":
    sys.exit(main())
