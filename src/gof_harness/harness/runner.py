"""
Demonstration Harness - runs registered pattern examples uniformly.

The harness resolves a selection through the registry, runs it inside a
fresh ExecutionContext and always returns a RunResult. It never raises:
lookup failures and faults raised by example code become failed results.
"""

from __future__ import annotations

import logging
import threading
import time

from gof_harness.constants import (
    Category,
    ErrorMessages,
    FaultKind,
    RunState,
    RunStatus,
    Variant,
)
from gof_harness.errors import NotFoundError, TimeoutFault
from gof_harness.harness.context import ExecutionContext
from gof_harness.models.entry import PatternEntry, PatternKey, normalize_token
from gof_harness.models.result import PatternComparison, RunResult
from gof_harness.registry import PatternRegistry

logger = logging.getLogger(__name__)


class DemoHarness:
    """
    Runs pattern examples from a registry and reports outcomes.

    Each run gets its own ExecutionContext, so concurrent callers never
    share captured output.
    """

    def __init__(self, registry: PatternRegistry, timeout_seconds: float | None = None):
        """
        Initialize the harness.

        Args:
            registry: The registry to resolve patterns from
            timeout_seconds: Optional wall-clock bound per run
        """
        if timeout_seconds is not None and timeout_seconds <= 0:
            raise ValueError(f"timeout_seconds must be positive, got {timeout_seconds}")
        self.registry = registry
        self.timeout_seconds = timeout_seconds

    def run(
        self,
        category: Category | str,
        name: str,
        variant: Variant | str,
    ) -> RunResult:
        """
        Run one pattern variant.

        Args:
            category: Pattern category
            name: Pattern name
            variant: 'base' or 'improved'

        Returns:
            RunResult with status ok, or failed with an error description
        """
        started = time.perf_counter()
        context = ExecutionContext(
            _valid_key(category, name, variant),
            selection=f"{_token(category)}/{name}/{_token(variant)}",
        )
        context.transition(RunState.RESOLVING)
        try:
            entry = self.registry.resolve(category, name, variant)
        except NotFoundError as e:
            logger.warning("Cannot run %s: %s", context.selection, e)
            context.fail(e)
            return self._result_from_context(context, [], started)

        return self._execute(context, entry, started)

    def run_entry(self, entry: PatternEntry, started: float | None = None) -> RunResult:
        """Run an entry that has already been resolved."""
        context = ExecutionContext(entry.key)
        context.transition(RunState.RESOLVING)
        return self._execute(
            context, entry, time.perf_counter() if started is None else started
        )

    def run_all(
        self,
        category: Category | str | None = None,
        name: str | None = None,
    ) -> list[RunResult]:
        """
        Run every registered variant that matches the filters.

        Failures are collected, never fatal: one faulting example does
        not stop the batch.

        Returns:
            One result per listed key, in listing order
        """
        results = []
        for key in self.registry.list_patterns(category=category, name=name):
            results.append(self.run(key.category, key.name, key.variant))

        failed = sum(1 for r in results if not r.ok)
        logger.info("Ran %d patterns, %d failed", len(results), failed)
        return results

    def compare(self, category: Category | str, name: str) -> PatternComparison:
        """
        Run the base and improved variants of one pattern.

        Returns:
            Both results side by side
        """
        base = self.run(category, name, Variant.BASE)
        improved = self.run(category, name, Variant.IMPROVED)
        return PatternComparison(
            category=_token(category),
            name=improved.key.name if improved.key else name,
            base=base,
            improved=improved,
        )

    def _execute(
        self,
        context: ExecutionContext,
        entry: PatternEntry,
        started: float,
    ) -> RunResult:
        context.transition(RunState.EXECUTING)
        logger.debug("Running %s", entry.key)

        if self.timeout_seconds is None:
            context.execute(entry.run)
            lines = context.snapshot()
        else:
            lines = self._execute_with_timeout(context, entry)

        result = self._result_from_context(context, lines, started)
        if result.ok:
            logger.debug("%s completed with %d lines", entry.key, len(result.output))
        else:
            logger.warning("%s faulted: %s", entry.key, result.error)
        return result

    def _execute_with_timeout(self, context: ExecutionContext, entry: PatternEntry) -> list[str]:
        """Run on a one-shot daemon thread, giving up after the bound."""
        assert self.timeout_seconds is not None
        # A daemon worker that overruns is abandoned and cannot block exit
        worker = threading.Thread(
            target=context.execute,
            args=(entry.run,),
            name="gof-harness-run",
            daemon=True,
        )
        worker.start()
        worker.join(timeout=self.timeout_seconds)
        if worker.is_alive():
            context.fail(TimeoutFault(entry.key, self.timeout_seconds))
        return context.snapshot()

    def _result_from_context(
        self,
        context: ExecutionContext,
        lines: list[str],
        started: float,
    ) -> RunResult:
        fault = context.fault
        if fault is None:
            return RunResult(
                selection=context.selection,
                key=context.key,
                status=RunStatus.OK,
                state=RunState.COMPLETED,
                output=lines,
                duration_ms=_elapsed_ms(started),
            )

        if isinstance(fault, NotFoundError):
            error, kind = ErrorMessages.PATTERN_NOT_FOUND, FaultKind.NOT_FOUND
        elif isinstance(fault, TimeoutFault):
            error, kind = str(fault), FaultKind.TIMEOUT
        else:
            error, kind = str(fault), FaultKind.EXECUTION

        return RunResult(
            selection=context.selection,
            key=context.key,
            status=RunStatus.FAILED,
            state=RunState.FAULTED,
            output=lines,
            error=error,
            fault_kind=kind,
            duration_ms=_elapsed_ms(started),
        )


def _elapsed_ms(started: float) -> float:
    return (time.perf_counter() - started) * 1000.0


def _token(value: Category | Variant | str) -> str:
    return value.value if isinstance(value, (Category, Variant)) else normalize_token(str(value))


def _valid_key(
    category: Category | str,
    name: str,
    variant: Variant | str,
) -> PatternKey | None:
    """Key for a request, or None when the tokens are not valid."""
    try:
        return PatternKey(category=category, name=name, variant=variant)
    except ValueError:
        return None
