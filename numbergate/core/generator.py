# numbergate/core/generator.py
"""
Time-derived number generation and prediction checking.

The number is ``(hour + minute + second) % 100`` over the server's local
wall-clock time. Nothing is cached: every call takes a fresh sample.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from numbergate.core.clock import Clock
from numbergate.core.constants import FORMULA, NUMBER_MAX, NUMBER_MIN
from numbergate.core.exceptions import PredictionValidationError


def compute_number(hour: int, minute: int, second: int) -> int:
    """Return ``(hour + minute + second) % 100``."""
    return (hour + minute + second) % 100


@dataclass(frozen=True)
class TimeSample:
    """Components of one clock reading and the number derived from them."""

    taken_at: datetime
    hour: int
    minute: int
    second: int
    number: int

    @property
    def components(self) -> dict[str, int]:
        return {"hour": self.hour, "minute": self.minute, "second": self.second}

    @property
    def formula(self) -> str:
        return FORMULA


def take_sample(clock: Clock) -> TimeSample:
    """Read ``clock`` once and derive every component from that instant."""
    now = clock.now()
    return TimeSample(
        taken_at=now,
        hour=now.hour,
        minute=now.minute,
        second=now.second,
        number=compute_number(now.hour, now.minute, now.second),
    )


def validate_prediction(value: Any) -> int:
    """
    Return ``value`` if it is an integer in [0, 99].

    JSON booleans, floats and numeric strings are rejected.

    Raises:
        PredictionValidationError: when the value is missing, not an int or out of range
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise PredictionValidationError(value=value)
    if value < NUMBER_MIN or value > NUMBER_MAX:
        raise PredictionValidationError(value=value)
    return value


@dataclass(frozen=True)
class PredictionOutcome:
    """Result of comparing one prediction against a fresh sample."""

    predicted: int
    sample: TimeSample

    @property
    def actual(self) -> int:
        return self.sample.number

    @property
    def correct(self) -> bool:
        return self.predicted == self.sample.number


def check_prediction(value: Any, clock: Clock) -> PredictionOutcome:
    """Validate ``value`` then compare it with the number at this instant."""
    predicted = validate_prediction(value)
    return PredictionOutcome(predicted=predicted, sample=take_sample(clock))
