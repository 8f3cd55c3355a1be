"""Clocks used for bewit expiry checks."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Protocol


class Clock(Protocol):
    """Source of the current time."""

    def now(self) -> datetime:
        """Return the current timezone-aware time."""
        ...


class SystemClock:
    """Wall clock in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock:
    """
    Deterministic clock for tests and prototyping.

    Time only moves when ``fast_forward`` is called.
    """

    def __init__(self, seed: datetime | None = None) -> None:
        if seed is None:
            seed = datetime.now(timezone.utc)
        elif seed.tzinfo is None:
            seed = seed.replace(tzinfo=timezone.utc)
        self.seed = seed

    def now(self) -> datetime:
        return self.seed

    def fast_forward(self, duration: timedelta) -> None:
        """Advance the clock by ``duration``."""
        self.seed = self.seed + duration
