# numbergate/core/clock.py
"""
Clock abstraction.

Handlers never read the system time directly; they receive a ``Clock``
so tests can pin the instant a number is derived from.
"""

from datetime import datetime, timezone
from typing import Protocol


class Clock(Protocol):
    """Source of the current time."""

    def now(self) -> datetime:
        """Return the current instant as an aware datetime in server local time."""
        ...


class SystemClock:
    """Reads the host clock in the server's local time zone."""

    def now(self) -> datetime:
        return datetime.now().astimezone()


class FixedClock:
    """Always returns the same instant. Naive datetimes are taken as local time."""

    def __init__(self, instant: datetime):
        self._instant = instant if instant.tzinfo is not None else instant.astimezone()

    def now(self) -> datetime:
        return self._instant


def isoformat_utc(moment: datetime) -> str:
    """Render ``moment`` as UTC ISO-8601 with milliseconds, e.g. ``2024-01-01T14:05:30.000Z``."""
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
