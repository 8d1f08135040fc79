# numbergate/api/models/requests.py
"""API Request Models.

Both bodies are loosely typed on purpose: the prediction is validated by
the generator, and access reports are echoed back as submitted.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class PredictRequest(BaseModel):
    """Body of POST /api/predict."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        json_schema_extra={
            "example": {
                "prediction": 49,
                "sessionId": "abc",
            }
        },
    )

    prediction: Any = Field(None, description="Predicted number, an integer between 0 and 99")
    session_id: Optional[Any] = Field(None, alias="sessionId", description="Opaque client session id")

    @classmethod
    def from_payload(cls, payload: Any) -> "PredictRequest":
        """Build from any decoded JSON value; non-objects become an empty request."""
        return cls.model_validate(payload if isinstance(payload, dict) else {})


class AccessLogRequest(BaseModel):
    """Body of POST /api/log-access. Unknown fields are kept."""

    # No populate_by_name: a client "session_id" key stays an extra field
    # and is echoed under its own name.
    model_config = ConfigDict(
        extra="allow",
        json_schema_extra={
            "example": {
                "sessionId": "abc",
                "attempts": 3,
                "userAgent": "Mozilla/5.0",
                "predictions": [49, 50, 51],
            }
        },
    )

    session_id: Any = Field(None, alias="sessionId")
    attempts: Any = None
    user_agent: Any = Field(None, alias="userAgent")
    predictions: Any = None

    @classmethod
    def from_payload(cls, payload: Any) -> "AccessLogRequest":
        """Build from any decoded JSON value; non-objects become an empty record."""
        return cls.model_validate(payload if isinstance(payload, dict) else {})

    def to_record(self) -> dict[str, Any]:
        """Return the submitted fields under their wire names."""
        return self.model_dump(by_alias=True)
