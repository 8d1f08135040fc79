# numbergate/config/settings.py
"""
NumberGate Configuration Settings

Manages all configuration using Pydantic Settings with YAML file support.

Resolution order (highest first):
1. Platform variables ``PORT`` and ``FRONTEND_URL``
2. ``NUMBERGATE_*`` environment variables (``__`` separates nested keys)
3. YAML configuration file
4. Default values

A ``.env`` file in the working directory is loaded into the environment
before any of the above is read.
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from numbergate import __version__


class APIConfig(BaseModel):
    """API server configuration."""

    host: str = "0.0.0.0"
    port: int = 5000
    # Behind a reverse proxy the peer address is the proxy itself.
    trust_forwarded_for: bool = False


class CORSConfig(BaseModel):
    """Cross-origin configuration."""

    local_origins: list[str] = Field(default_factory=lambda: ["http://localhost:3000"])
    frontend_url: Optional[str] = None
    # Any origin whose host ends with one of these is accepted.
    platform_suffixes: list[str] = Field(default_factory=lambda: [".vercel.app", ".vercel.com"])


class GameConfig(BaseModel):
    """Rules advertised to the frontend through /api/system-info."""

    max_attempts: int = Field(3, ge=1)
    required_correct: int = Field(3, ge=1)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    file: Optional[str] = None
    rotation: str = "10 MB"
    retention: str = "1 week"


class AppConfig(BaseModel):
    """Application configuration."""

    name: str = "Random Number Backend API"
    version: str = __version__


class Settings(BaseSettings):
    """
    Main settings class for NumberGate.

    Loads configuration from environment variables first, then the YAML
    file passed as init arguments, then defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="NUMBERGATE_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    app: AppConfig = Field(default_factory=AppConfig)
    api: APIConfig = Field(default_factory=APIConfig)
    cors: CORSConfig = Field(default_factory=CORSConfig)
    game: GameConfig = Field(default_factory=GameConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        # Environment beats the YAML file, which arrives as init kwargs.
        return env_settings, init_settings, file_secret_settings

    @classmethod
    def from_yaml(cls, path: Path | str) -> "Settings":
        """
        Load settings from a YAML file.

        Args:
            path: Path to the YAML configuration file

        Returns:
            Settings instance with values from the file
        """
        path = Path(path)
        if not path.exists():
            return cls()

        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        return cls(**data)

    def apply_platform_env(self) -> "Settings":
        """Apply the unprefixed variables hosting platforms inject."""
        port = os.getenv("PORT")
        if port:
            self.api.port = int(port)

        frontend_url = os.getenv("FRONTEND_URL")
        if frontend_url:
            self.cors.frontend_url = frontend_url

        return self


def get_config_path() -> Path:
    """
    Return the path to the active settings.yaml file.

    ``NUMBERGATE_CONFIG`` wins when set; otherwise the file shipped next to
    this module is used. A missing file means defaults.
    """
    explicit = os.getenv("NUMBERGATE_CONFIG")
    if explicit:
        return Path(explicit)
    return Path(__file__).parent / "settings.yaml"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings instance loaded from configuration
    """
    load_dotenv(override=False)
    return Settings.from_yaml(get_config_path()).apply_platform_env()


def reload_settings() -> Settings:
    """
    Reload settings from configuration file.

    Returns:
        Fresh Settings instance
    """
    get_settings.cache_clear()
    return get_settings()
