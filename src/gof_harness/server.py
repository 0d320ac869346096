#!/usr/bin/env python3
"""
Entry point for the pattern harness MCP server.

Settings are read like the CLI's: an optional YAML file, then
``GOF_HARNESS_*`` environment variables, then flags. The server speaks MCP
over stdio only, so logs go to stderr.
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

import yaml
from pydantic import ValidationError

from gof_harness.config import load_config

logger = logging.getLogger(__name__)


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="GoF Pattern Harness MCP Server")
    parser.add_argument("--config", type=Path, default=None, help="YAML config file")
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Wall-clock limit per run, in seconds",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    args = parser.parse_args()

    try:
        config = load_config(args.config).with_overrides(
            timeout_seconds=args.timeout,
            log_level="DEBUG" if args.debug else None,
        )
    except (OSError, ValidationError, ValueError, yaml.YAMLError) as e:
        parser.exit(2, f"gof-harness-mcp: invalid configuration: {e}\n")

    logging.basicConfig(level=config.log_level, stream=sys.stderr)

    # Import after configuration so the catalog loads with logging in place
    from gof_harness.async_server import create_server

    mcp = create_server(config)
    logger.info("Starting GoF Pattern Harness MCP Server (stdio)")
    asyncio.run(mcp.run_stdio())


if __name__ == "__main__":
    main()
