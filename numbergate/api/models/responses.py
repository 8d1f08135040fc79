# numbergate/api/models/responses.py
"""API Response Models.

Field names follow the JSON contract (camelCase) through aliases; FastAPI
serialises response models by alias.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class ErrorResponse(_WireModel):
    """Standard error response."""

    success: bool = False
    error: str = Field(..., description="Error message")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "success": False,
                "error": "Prediction must be a number between 0 and 99",
            }
        }
    )


class RootResponse(_WireModel):
    """Response model for GET /."""

    success: bool = True
    message: str
    version: str
    endpoints: dict[str, str]
    documentation: str


class NumberComponents(_WireModel):
    hour: int = Field(..., ge=0, le=23)
    minute: int = Field(..., ge=0, le=59)
    second: int = Field(..., ge=0, le=59)


class CurrentNumberData(_WireModel):
    number: int = Field(..., ge=0, le=99)
    timestamp: str = Field(..., description="ISO-8601 UTC instant the number was derived from")
    formula: str
    components: NumberComponents


class CurrentNumberResponse(_WireModel):
    """Response model for GET /api/current-number."""

    success: bool = True
    data: CurrentNumberData


class PredictionData(_WireModel):
    predicted: int
    actual: int
    correct: bool
    timestamp: str
    session_id: Optional[Any] = Field(None, alias="sessionId")


class PredictionResponse(_WireModel):
    """Response model for POST /api/predict."""

    success: bool = True
    data: PredictionData

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "success": True,
                "data": {
                    "predicted": 49,
                    "actual": 49,
                    "correct": True,
                    "timestamp": "2024-01-01T14:05:30.000Z",
                    "sessionId": "abc",
                },
            }
        }
    )


class SystemInfoData(_WireModel):
    algorithm: str
    formula: str
    range: str
    update_frequency: str = Field(..., alias="updateFrequency")
    max_attempts: int = Field(..., alias="maxAttempts")
    required_correct: int = Field(..., alias="requiredCorrect")
    server_time: str = Field(..., alias="serverTime")


class SystemInfoResponse(_WireModel):
    """Response model for GET /api/system-info."""

    success: bool = True
    data: SystemInfoData


class AccessLogResponse(_WireModel):
    """Response model for POST /api/log-access."""

    success: bool = True
    message: str = "Access logged successfully"
    data: dict[str, Any]


class HealthResponse(_WireModel):
    """Response model for GET /api/health."""

    success: bool = True
    message: str
    timestamp: str
    uptime: float = Field(..., ge=0)
