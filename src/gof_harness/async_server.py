#!/usr/bin/env python3
"""
Async MCP server for the pattern harness, using chuk-mcp-server.

The server exposes the pattern catalog as MCP tools:
- Listing and describing registered patterns
- Running one variant, or every matching variant
- Comparing the base and improved variants of a pattern
"""

from __future__ import annotations

import logging

from chuk_mcp_server import ChukMCPServer

from gof_harness.catalog import build_catalog_registry
from gof_harness.config import HarnessConfig
from gof_harness.harness import DemoHarness
from gof_harness.registry import PatternRegistry
from gof_harness.tools import register_pattern_tools

logger = logging.getLogger(__name__)

SERVER_NAME = "gof-pattern-harness"


def create_server(
    config: HarnessConfig | None = None,
    registry: PatternRegistry | None = None,
) -> ChukMCPServer:
    """
    Build an MCP server with the pattern tools registered.

    Args:
        config: Harness settings (defaults apply when omitted)
        registry: Registry to serve (defaults to the built-in catalog)

    Returns:
        The configured server, ready for ``run_stdio``
    """
    config = config or HarnessConfig()
    registry = registry if registry is not None else build_catalog_registry()
    harness = DemoHarness(registry, timeout_seconds=config.timeout_seconds)

    mcp = ChukMCPServer(SERVER_NAME)
    tools = register_pattern_tools(mcp, registry, harness)

    logger.info("Pattern harness MCP server initialized")
    logger.info("  Patterns registered: %d", len(registry))
    logger.info("  Tools: %s", ", ".join(sorted(tools)))
    logger.info("  Timeout: %s", config.timeout_seconds or "none")
    return mcp
