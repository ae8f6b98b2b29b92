"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for the display strings
and logging setup used by the navigator front-ends.

Configuration can be overridden via environment variables:
- MAPNAV_DISPLAY_SEPARATOR=" => "
- MAPNAV_DISPLAY_NO_PATH_MESSAGE="Unreachable."
- MAPNAV_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .domain.errors import ConfigurationError


class DisplayConfig(BaseSettings):
    """Strings used when rendering path results.

    Environment variables prefixed with MAPNAV_DISPLAY_.
    """

    model_config = SettingsConfigDict(env_prefix="MAPNAV_DISPLAY_")

    path_prefix: str = "Shortest Path: "
    separator: str = " -> "
    no_path_message: str = "No path found."
    invalid_nodes_message: str = "Invalid nodes. Please check the node names."


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with MAPNAV_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="MAPNAV_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @field_validator("level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        return value.strip().upper()


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.display.separator)
        print(config.observability.level)

    Environment variables prefixed with MAPNAV_.
    """

    model_config = SettingsConfigDict(env_prefix="MAPNAV_")

    display: DisplayConfig = Field(default_factory=DisplayConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()


def configure_logging(config: Optional[ObservabilityConfig] = None) -> int:
    """Apply the observability settings to the root logger.

    Only entry points call this; library modules just create loggers.

    Returns:
        The numeric log level that was applied.

    Raises:
        ConfigurationError: If the configured level is not a known level name.
    """
    config = config or get_config().observability
    level = logging.getLevelName(config.level)
    if not isinstance(level, int):
        raise ConfigurationError(
            f"Unknown log level: {config.level}",
            setting_name="MAPNAV_LOG_LEVEL",
            expected_type="one of DEBUG, INFO, WARNING, ERROR, CRITICAL",
        )

    logging.basicConfig(level=level, format=config.format, force=True)
    return level
