# numbergate/api/models/__init__.py
"""API models."""

from numbergate.api.models.requests import AccessLogRequest, PredictRequest
from numbergate.api.models.responses import (
    AccessLogResponse,
    CurrentNumberResponse,
    ErrorResponse,
    HealthResponse,
    PredictionResponse,
    RootResponse,
    SystemInfoResponse,
)

__all__ = [
    "PredictRequest",
    "AccessLogRequest",
    "RootResponse",
    "CurrentNumberResponse",
    "PredictionResponse",
    "SystemInfoResponse",
    "AccessLogResponse",
    "HealthResponse",
    "ErrorResponse",
]
