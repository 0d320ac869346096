"""
Report rendering - turns results into text, JSON or YAML.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

import yaml
from pydantic import BaseModel

from gof_harness.constants import OutputFormat
from gof_harness.models.entry import PatternEntry
from gof_harness.models.result import PatternComparison, RunResult

_RULE = "-" * 60


def render_result_text(result: RunResult) -> str:
    """Render one result as a block of text."""
    lines = [f"== {result.selection} [{result.status.value}]"]
    lines.extend(f"  {line}" for line in result.output)
    if result.error:
        lines.append(f"  ! {result.error}")
    return "\n".join(lines)


def render_text(results: Sequence[RunResult]) -> str:
    """Render a batch of results followed by a summary line."""
    blocks = [render_result_text(r) for r in results]
    failed = sum(1 for r in results if not r.ok)
    blocks.append(f"{len(results)} run, {len(results) - failed} ok, {failed} failed")
    return "\n\n".join(blocks)


def render_comparison_text(comparison: PatternComparison) -> str:
    """Render base and improved runs one after the other."""
    title = f"{comparison.category}/{comparison.name}"
    return "\n".join(
        [
            title,
            "=" * len(title),
            render_result_text(comparison.base),
            _RULE,
            render_result_text(comparison.improved),
        ]
    )


def render_entries_text(entries: Sequence[PatternEntry]) -> str:
    """Render a listing of registered entries."""
    if not entries:
        return "No patterns registered."
    width = max(len(str(e.key)) for e in entries)
    return "\n".join(f"{str(e.key):<{width}}  {e.summary}".rstrip() for e in entries)


def render_json(data: Any) -> str:
    """Render models (or lists of models) as JSON."""
    return json.dumps(_plain(data), indent=2)


def render_yaml(data: Any) -> str:
    """Render models (or lists of models) as YAML."""
    return yaml.safe_dump(_plain(data), default_flow_style=False, sort_keys=False)


def render_structured(data: Any, output_format: OutputFormat) -> str:
    """
    Render in a structured format (JSON or YAML).

    Raises:
        ValueError: For formats that need a specific text renderer
    """
    if output_format == OutputFormat.JSON:
        return render_json(data)
    if output_format == OutputFormat.YAML:
        return render_yaml(data)
    raise ValueError(f"Not a structured format: {output_format.value}")


def _plain(data: Any) -> Any:
    """Convert models into JSON-safe structures."""
    if isinstance(data, PatternEntry):
        return {
            "key": str(data.key),
            "category": data.category.value,
            "name": data.name,
            "variant": data.variant.value,
            "summary": data.summary,
            "source": data.source,
        }
    if isinstance(data, BaseModel):
        return data.model_dump(mode="json")
    if isinstance(data, (list, tuple)):
        return [_plain(d) for d in data]
    if isinstance(data, dict):
        return {k: _plain(v) for k, v in data.items()}
    return data
