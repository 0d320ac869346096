"""
Execution context - one per harness run.

The context owns the captured output for a single invocation, so two runs
never share a buffer. It also records the run's state transitions and
turns anything the example raises into an ExecutionFault.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable
from typing import Any

from gof_harness.constants import RunState
from gof_harness.errors import ExecutionFault, PatternHarnessError
from gof_harness.models.entry import PatternKey

logger = logging.getLogger(__name__)

# Legal state transitions
_TRANSITIONS: dict[RunState, tuple[RunState, ...]] = {
    RunState.PENDING: (RunState.RESOLVING,),
    RunState.RESOLVING: (RunState.EXECUTING, RunState.FAULTED),
    RunState.EXECUTING: (RunState.COMPLETED, RunState.FAULTED),
    RunState.COMPLETED: (),
    RunState.FAULTED: (),
}


class ExecutionContext:
    """Captured lines, state and fault for one run."""

    def __init__(self, key: PatternKey | None, selection: str | None = None):
        """
        Args:
            key: The requested key, or None when the request is not a valid key
            selection: The request as typed, used when there is no key
        """
        self.key = key
        self.selection = str(key) if key is not None else (selection or "")
        self.state = RunState.PENDING
        self.lines: list[str] = []
        self.fault: PatternHarnessError | None = None
        self._lock = threading.Lock()

    def transition(self, state: RunState) -> None:
        """
        Move to a new state.

        Raises:
            RuntimeError: If the transition is not allowed
        """
        if state not in _TRANSITIONS[self.state]:
            raise RuntimeError(f"Illegal run transition {self.state.value} -> {state.value}")
        logger.debug("%s: %s -> %s", self.selection, self.state.value, state.value)
        self.state = state

    def emit(self, line: Any) -> None:
        """Capture one output line."""
        self.lines.append(str(line))

    def snapshot(self) -> list[str]:
        """Copy of the lines captured so far."""
        return list(self.lines)

    def fail(self, fault: PatternHarnessError) -> bool:
        """
        Record a fault and enter the faulted state.

        Returns:
            False if the run had already finished
        """
        with self._lock:
            if self.state.terminal:
                return False
            self.fault = fault
            self.transition(RunState.FAULTED)
            return True

    def complete(self) -> bool:
        """Enter the completed state unless the run already finished."""
        with self._lock:
            if self.state.terminal:
                return False
            self.transition(RunState.COMPLETED)
            return True

    def execute(self, run: Callable[[], Any]) -> None:
        """
        Call a run callable and capture what it produces.

        The context must already be in the executing state. Lines from a
        generator are captured as they are yielded, so a fault partway
        through keeps everything emitted before it. SystemExit raised by
        example code is a fault like any other.
        """
        try:
            produced = run()
            if produced is not None:
                self._consume(produced)
        except (Exception, SystemExit) as e:
            self.fail(ExecutionFault.from_exception(self.key, e))
            return

        self.complete()

    def _consume(self, produced: Any) -> None:
        if isinstance(produced, str):
            for line in produced.splitlines():
                self.emit(line)
            return

        if not isinstance(produced, Iterable):
            raise TypeError(
                f"run callable must produce lines, got {type(produced).__name__}"
            )

        for line in produced:
            # A timed-out run keeps going on its worker thread; stop capturing
            if self.state.terminal:
                return
            self.emit(line)
