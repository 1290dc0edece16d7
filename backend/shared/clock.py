"""Injected time source.

Components that stamp audit fields take a ``Clock`` instead of calling
``datetime.now()`` so runs can be replayed deterministically in tests.
"""

from datetime import datetime, timezone
from typing import Protocol


class Clock(Protocol):
    def now(self) -> datetime: ...


class SystemClock:
    """Wall clock in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)
