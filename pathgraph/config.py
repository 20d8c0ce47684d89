"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- PATHGRAPH_SEARCH_TIE_BREAK=lifo
- PATHGRAPH_SEARCH_SKIP_STALE_ENTRIES=false
- PATHGRAPH_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SearchConfig(BaseSettings):
    """A* search configuration.

    Environment variables prefixed with PATHGRAPH_SEARCH_.
    """

    model_config = SettingsConfigDict(env_prefix="PATHGRAPH_SEARCH_")

    tie_break: Literal["fifo", "lifo"] = "fifo"
    skip_stale_entries: bool = True


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with PATHGRAPH_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="PATHGRAPH_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main configuration aggregating all sub-configs.

        config = get_config()
        print(config.search.tie_break)

    Environment variables prefixed with PATHGRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="PATHGRAPH_")

    search: SearchConfig = Field(default_factory=SearchConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()


def configure_logging(config: Optional[ObservabilityConfig] = None) -> None:
    """Apply the logging settings to the root logger.

    The library never calls this itself; applications do, once, at startup.
    """
    config = config or get_config().observability
    logging.basicConfig(level=config.level.upper(), format=config.format)
