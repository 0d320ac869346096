"""
Demonstration harness - runs registered examples and reports outcomes.
"""

from gof_harness.harness.context import ExecutionContext
from gof_harness.harness.report import (
    render_comparison_text,
    render_entries_text,
    render_json,
    render_result_text,
    render_structured,
    render_text,
    render_yaml,
)
from gof_harness.harness.runner import DemoHarness

__all__ = [
    "DemoHarness",
    "ExecutionContext",
    "render_comparison_text",
    "render_entries_text",
    "render_json",
    "render_result_text",
    "render_structured",
    "render_text",
    "render_yaml",
]
