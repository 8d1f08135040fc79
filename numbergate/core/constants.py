# numbergate/core/constants.py
"""
Constants for NumberGate

Static values exposed through the informational endpoints.
"""

from typing import Final

# ============================================
# Algorithm
# ============================================
NUMBER_MIN: Final[int] = 0
NUMBER_MAX: Final[int] = 99
FORMULA: Final[str] = "(hour + minute + second) % 100"
ALGORITHM_NAME: Final[str] = "Time-Based Pattern"
NUMBER_RANGE: Final[str] = f"{NUMBER_MIN} - {NUMBER_MAX}"
UPDATE_FREQUENCY: Final[str] = "Every second"


# ============================================
# Routes
# ============================================
API_PREFIX: Final[str] = "/api"

ENDPOINTS: Final[dict[str, str]] = {
    "GET /api/current-number": "Get the current time-based random number",
    "POST /api/predict": "Submit a prediction",
    "GET /api/system-info": "Get algorithm and game information",
    "POST /api/log-access": "Log frontend access",
    "GET /api/health": "Health check endpoint",
}


# ============================================
# Error Messages
# ============================================
class ErrorMessages:
    """Public error texts, one per failure surface."""

    INTERNAL = "Internal server error"
    NOT_FOUND = "Not found"
    CURRENT_NUMBER = "Failed to generate random number"
    PREDICT = "Failed to process prediction"
    SYSTEM_INFO = "Failed to get system information"
    LOG_ACCESS = "Failed to log access"
