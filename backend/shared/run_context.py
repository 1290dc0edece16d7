"""
Cancellation and deadline context for a single fetch run.

The context is passed through adapter fetches, classifier calls and email
dispatch. Each of those calls ``check()`` before blocking on the network and
uses ``timeout()`` to clip its HTTP timeout to whatever is left of the run's
deadline.
"""

import threading
import time


class RunCancelledError(Exception):
    """Raised when a run was cancelled or its deadline passed."""

    def __init__(self, stage: str, reason: str):
        self.stage = stage
        self.reason = reason
        super().__init__(f"Run {reason} before {stage}")


class RunContext:
    def __init__(
        self,
        deadline_seconds: float | None = None,
        cancel_event: threading.Event | None = None,
    ):
        self._cancel_event = cancel_event or threading.Event()
        self._deadline = (
            time.monotonic() + deadline_seconds
            if deadline_seconds is not None
            else None
        )

    def cancel(self) -> None:
        self._cancel_event.set()

    @property
    def cancelled(self) -> bool:
        return self._cancel_event.is_set() or self._deadline_passed()

    def remaining(self) -> float | None:
        """Seconds left before the deadline, or None without a deadline."""
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - time.monotonic())

    def check(self, stage: str) -> None:
        """Raise RunCancelledError if the run must stop before ``stage``."""
        if self._cancel_event.is_set():
            raise RunCancelledError(stage, "cancelled")
        if self._deadline_passed():
            raise RunCancelledError(stage, "exceeded its deadline")

    def timeout(self, default: float) -> float:
        """HTTP timeout for the next call, never past the deadline."""
        remaining = self.remaining()
        if remaining is None:
            return default
        return min(default, remaining)

    def _deadline_passed(self) -> bool:
        return self._deadline is not None and time.monotonic() >= self._deadline
