"""
Pattern tools - MCP tools for listing, running and comparing patterns.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from gof_harness.constants import Variant
from gof_harness.errors import NotFoundError
from gof_harness.harness import DemoHarness
from gof_harness.registry import PatternRegistry

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_pattern_tools(
    mcp: ChukMCPServer,
    registry: PatternRegistry,
    harness: DemoHarness,
) -> dict[str, Any]:
    """
    Register pattern tools with the MCP server.

    Args:
        mcp: The MCP server instance
        registry: The pattern registry
        harness: Harness bound to the same registry

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def patterns_list(
        category: str | None = None,
        name: str | None = None,
    ) -> str:
        """
        List registered pattern examples.

        Args:
            category: Optional filter ('creational', 'structural', 'behavioral',
                'casestudy', 'additional')
            name: Optional filter by pattern name

        Returns:
            JSON string with the matching keys

        Example:
            patterns_list(category="behavioral")
        """
        try:
            entries = registry.list_entries(category=category, name=name)
            return json.dumps(
                {
                    "status": "success",
                    "patterns": [
                        {
                            "id": str(e.key),
                            "category": e.category.value,
                            "name": e.name,
                            "variant": e.variant.value,
                            "summary": e.summary,
                        }
                        for e in entries
                    ],
                    "count": len(entries),
                }
            )
        except Exception as e:
            logger.exception("Failed to list patterns")
            return json.dumps({"status": "error", "message": str(e)})

    tools["patterns_list"] = patterns_list

    @mcp.tool  # type: ignore[arg-type]
    async def patterns_describe(category: str, name: str) -> str:
        """
        Describe one pattern: its summary and which variants exist.

        Args:
            category: Pattern category
            name: Pattern name (e.g., 'observer', 'factory-method')

        Returns:
            JSON string with pattern details

        Example:
            patterns_describe(category="creational", name="builder")
        """
        try:
            variants = {}
            for variant in Variant:
                try:
                    entry = registry.resolve(category, name, variant)
                except NotFoundError:
                    continue
                variants[variant.value] = {"id": str(entry.key), "source": entry.source}

            if not variants:
                return json.dumps(
                    {"status": "error", "message": f"Pattern not found: {category}/{name}"}
                )

            summary = registry.list_entries(category=category, name=name)[0].summary
            return json.dumps(
                {
                    "status": "success",
                    "pattern": {
                        "category": category,
                        "name": name,
                        "summary": summary,
                        "variants": variants,
                        "paired": len(variants) == len(Variant),
                    },
                }
            )
        except Exception as e:
            logger.exception("Failed to describe pattern")
            return json.dumps({"status": "error", "message": str(e)})

    tools["patterns_describe"] = patterns_describe

    @mcp.tool  # type: ignore[arg-type]
    async def patterns_run(category: str, name: str, variant: str) -> str:
        """
        Run one pattern variant and return its output.

        Args:
            category: Pattern category
            name: Pattern name
            variant: 'base' or 'improved'

        Returns:
            JSON string with the run result

        Example:
            patterns_run(category="behavioral", name="observer", variant="improved")
        """
        result = harness.run(category, name, variant)
        return json.dumps(
            {
                "status": "success" if result.ok else "error",
                "result": result.to_dict(),
                **({} if result.ok else {"message": result.error}),
            }
        )

    tools["patterns_run"] = patterns_run

    @mcp.tool  # type: ignore[arg-type]
    async def patterns_run_all(
        category: str | None = None,
        name: str | None = None,
    ) -> str:
        """
        Run every matching pattern variant.

        One failing example does not stop the others; every result is
        reported.

        Args:
            category: Optional category filter
            name: Optional pattern name filter

        Returns:
            JSON string with all results and counts

        Example:
            patterns_run_all(category="structural")
        """
        results = harness.run_all(category=category, name=name)
        failed = [r.selection for r in results if not r.ok]
        return json.dumps(
            {
                "status": "success" if not failed else "error",
                "results": [r.to_dict() for r in results],
                "count": len(results),
                "failed": failed,
            }
        )

    tools["patterns_run_all"] = patterns_run_all

    @mcp.tool  # type: ignore[arg-type]
    async def patterns_compare(category: str, name: str) -> str:
        """
        Run the base and improved variants of a pattern side by side.

        Args:
            category: Pattern category
            name: Pattern name

        Returns:
            JSON string with both results

        Example:
            patterns_compare(category="structural", name="decorator")
        """
        comparison = harness.compare(category, name)
        return json.dumps(
            {
                "status": "success" if comparison.ok else "error",
                "comparison": comparison.to_dict(),
            }
        )

    tools["patterns_compare"] = patterns_compare

    return tools
