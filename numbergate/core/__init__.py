# numbergate/core/__init__.py
"""Core module for NumberGate."""

from numbergate.core.clock import Clock, FixedClock, SystemClock
from numbergate.core.exceptions import (
    EndpointError,
    NumberGateException,
    OriginRejectedError,
    PredictionValidationError,
    RequestBodyError,
)
from numbergate.core.generator import TimeSample, check_prediction, compute_number, take_sample

__all__ = [
    "Clock",
    "FixedClock",
    "SystemClock",
    "TimeSample",
    "check_prediction",
    "compute_number",
    "take_sample",
    "NumberGateException",
    "PredictionValidationError",
    "RequestBodyError",
    "OriginRejectedError",
    "EndpointError",
]
