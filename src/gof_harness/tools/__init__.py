"""
MCP tool implementations.

- patterns - listing, running and comparing pattern examples
"""

from gof_harness.tools.patterns import register_pattern_tools

__all__ = [
    "register_pattern_tools",
]
