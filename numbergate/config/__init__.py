# numbergate/config/__init__.py
"""Configuration module for NumberGate."""

from numbergate.config.settings import Settings, get_settings, reload_settings

__all__ = ["Settings", "get_settings", "reload_settings"]
