# numbergate/utils/__init__.py
"""Utility modules for NumberGate."""

from numbergate.utils.logger import log_access, log_event, log_prediction, logger, setup_logger

__all__ = ["logger", "setup_logger", "log_event", "log_prediction", "log_access"]
