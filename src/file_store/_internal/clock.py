"""Clock abstraction for testable expiry logic."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Protocol


class Clock(Protocol):
    """Protocol for getting the current time.  Inject a fake in tests."""

    def now(self) -> datetime: ...


class SystemClock:
    """Default clock backed by the real system time."""

    def now(self) -> datetime:
        return datetime.now(UTC)


def unix_seconds(clock: Clock) -> int:
    """Current time of *clock* as whole seconds since the epoch."""
    return int(clock.now().timestamp())
