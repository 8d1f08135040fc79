# numbergate/core/runtime.py
"""
Server Runtime Identity

Generates a UUID4 at import time that identifies this server run and
records when the process started. Every restart produces a new ID.
"""

import time
import uuid

RUNTIME_ID: str = str(uuid.uuid4())

# Monotonic reference so wall-clock adjustments never make uptime negative.
_START_MONOTONIC: float = time.monotonic()


def uptime_seconds() -> float:
    """Seconds elapsed since the process imported this module."""
    return max(0.0, time.monotonic() - _START_MONOTONIC)
