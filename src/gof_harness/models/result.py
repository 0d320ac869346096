"""
Run result models - what the harness hands back.

A RunResult is created per invocation and owned by the caller.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from gof_harness.constants import FaultKind, RunState, RunStatus
from gof_harness.models.entry import PatternKey


class RunResult(BaseModel):
    """
    Outcome of running one pattern variant.

    On failure ``output`` still holds every line emitted before the fault.
    """

    selection: str = Field(..., description="Requested key as category/name/variant")
    key: PatternKey | None = Field(
        None, description="Resolved key, None if the tokens were invalid"
    )
    status: RunStatus = Field(..., description="ok or failed")
    state: RunState = Field(..., description="Terminal state reached")
    output: list[str] = Field(default_factory=list, description="Captured output lines")
    error: str | None = Field(None, description="Fault description when failed")
    fault_kind: FaultKind | None = Field(None, description="Category of failure")
    duration_ms: float = Field(0.0, ge=0, description="Wall-clock run time")

    @property
    def ok(self) -> bool:
        """True when the run completed without a fault."""
        return self.status == RunStatus.OK

    def to_dict(self) -> dict[str, Any]:
        """JSON-safe dict form."""
        return self.model_dump(mode="json")


class PatternComparison(BaseModel):
    """Base and improved runs of the same pattern, side by side."""

    category: str = Field(..., description="Pattern category")
    name: str = Field(..., description="Pattern name")
    base: RunResult = Field(..., description="Result of the base variant")
    improved: RunResult = Field(..., description="Result of the improved variant")

    @property
    def ok(self) -> bool:
        """True when both variants ran cleanly."""
        return self.base.ok and self.improved.ok

    def to_dict(self) -> dict[str, Any]:
        """JSON-safe dict form."""
        return self.model_dump(mode="json")
