"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- CM_GRAPH_LOAD_SEED=false
- CM_DISPLAY_FARE_UNIT=EUR
- CM_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class GraphConfig(BaseSettings):
    """Graph engine configuration.

    Environment variables prefixed with CM_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="CM_GRAPH_")

    load_seed: bool = True


class DisplayConfig(BaseSettings):
    """Console presentation configuration.

    Environment variables prefixed with CM_DISPLAY_.
    """

    model_config = SettingsConfigDict(env_prefix="CM_DISPLAY_")

    app_name: str = "City Metro"
    welcome_message: str = "Welcome to City Metro!"
    distance_unit: str = "km"
    fare_unit: str = "Rs"


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with CM_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="CM_LOG_")

    # The console shares stdout with log output, keep it quiet by default
    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @field_validator("level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"log level must be one of {sorted(_LOG_LEVELS)}, got {value!r}"
            )
        return level


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.graph.load_seed)
        print(config.display.fare_unit)

    Environment variables prefixed with CM_.
    """

    model_config = SettingsConfigDict(env_prefix="CM_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
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


def configure_logging(config: Optional[ObservabilityConfig] = None) -> None:
    """Apply the observability settings to the root logger."""
    config = config or get_config().observability
    logging.basicConfig(level=config.level, format=config.format)
