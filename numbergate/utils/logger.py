# numbergate/utils/logger.py
"""
Centralized Logging System for NumberGate

Uses loguru for logging with:
- Console output with colors
- Optional file rotation
- Structured event lines (``[EVENT] {json}``)
"""

import json
import sys
from pathlib import Path
from typing import Any, Optional

from loguru import logger as _loguru_logger

# Export the logger instance directly
logger = _loguru_logger

# Remove default handler
logger.remove()

_current_level = "INFO"


def setup_logger(
    level: str = "INFO",
    log_file: Optional[str] = None,
    rotation: str = "10 MB",
    retention: str = "1 week",
) -> None:
    """
    Setup the logging system.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to the main log file
        rotation: When to rotate log files
        retention: How long to keep old logs
    """
    global _current_level

    # Clear existing handlers
    logger.remove()

    _current_level = level.upper()

    logger.add(
        sys.stderr,
        level=_current_level,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>",
        colorize=True,
        backtrace=False,
        diagnose=False,
    )

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            str(log_path),
            level=_current_level,
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}",
            rotation=rotation,
            retention=retention,
            compression="zip",
            backtrace=True,
            # Request bodies end up in locals; keep them out of tracebacks.
            diagnose=False,
        )

    logger.info(f"Logging initialized at level {_current_level}")


def log_event(event_type: str, data: dict[str, Any], level: str = "INFO") -> None:
    """
    Log a structured event as ``[EVENT_TYPE] {json}``.

    Args:
        event_type: Type of the event
        data: Event data, serialised with ``str`` as fallback
        level: Log level
    """
    log_func = getattr(logger, level.lower())
    log_func(f"[{event_type.upper()}] {json.dumps(data, default=str)}")


def log_prediction(session_id: Any, predicted: int, actual: int, correct: bool) -> None:
    """
    Log a prediction attempt.

    Args:
        session_id: Client supplied session id (may be None)
        predicted: Value submitted by the client
        actual: Number recomputed at handling time
        correct: Whether both match
    """
    logger.info(
        f"Prediction attempt - Session: {session_id}, Predicted: {predicted}, "
        f"Actual: {actual}, Correct: {correct}"
    )


def log_access(record: dict[str, Any]) -> None:
    """Log an access record reported by the frontend."""
    log_event("access_granted", record)
