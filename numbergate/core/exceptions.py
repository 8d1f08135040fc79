# numbergate/core/exceptions.py
"""
Exception Hierarchy for NumberGate

Every exception here renders to the public response envelope
``{"success": false, "error": ...}`` through ``to_dict``.
"""

from typing import Any, Optional


class NumberGateException(Exception):
    """
    Base exception for all NumberGate errors.

    Attributes:
        message: Human-readable error message, safe to show to clients
        code: Error code for programmatic handling and logs
        status_code: HTTP status the API layer answers with
        context: Additional context about the error (logged, never returned)
    """

    def __init__(
        self,
        message: str,
        code: str = "NUMBERGATE_ERROR",
        status_code: int = 500,
        context: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.context = context or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to the response envelope."""
        return {
            "success": False,
            "error": self.message,
        }

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


# ============================================
# Client Errors
# ============================================
class PredictionValidationError(NumberGateException):
    """Raised when a submitted prediction is not an integer in range."""

    def __init__(
        self,
        message: str = "Prediction must be a number between 0 and 99",
        value: Any = None,
        **kwargs: Any,
    ):
        context = kwargs.pop("context", {})
        context["value"] = repr(value)
        super().__init__(message, code="PREDICTION_INVALID", status_code=400, context=context, **kwargs)
        self.value = value


class RequestBodyError(NumberGateException):
    """Raised when the request body cannot be decoded."""

    def __init__(self, message: str = "Request body must be valid JSON", **kwargs: Any):
        super().__init__(message, code="REQUEST_BODY_INVALID", status_code=400, **kwargs)


class OriginRejectedError(NumberGateException):
    """Raised when a cross-origin request comes from an unknown origin."""

    def __init__(self, origin: str, **kwargs: Any):
        context = kwargs.pop("context", {})
        context["origin"] = origin
        super().__init__("Not allowed by CORS", code="ORIGIN_REJECTED", status_code=403, context=context, **kwargs)
        self.origin = origin


# ============================================
# Server Errors
# ============================================
class EndpointError(NumberGateException):
    """
    Raised by a route when its work fails unexpectedly.

    The message is the endpoint's public failure text; the original
    exception is kept as ``__cause__`` for the server log.
    """

    def __init__(self, message: str, endpoint: Optional[str] = None, **kwargs: Any):
        context = kwargs.pop("context", {})
        if endpoint:
            context["endpoint"] = endpoint
        super().__init__(message, code="ENDPOINT_ERROR", status_code=500, context=context, **kwargs)
