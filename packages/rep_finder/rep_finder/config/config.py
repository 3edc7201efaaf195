"""Centralized configuration management for rep_finder.

Values come from defaults, a ``.env`` file, or environment variables
prefixed with ``REP_FINDER_`` (nested fields use ``__``, e.g.
``REP_FINDER_CACHE__TTL_SECONDS=300``).
"""

from __future__ import annotations

from datetime import timedelta
from functools import lru_cache

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from rep_finder.domain.exceptions import ConfigurationError
from rep_finder.infrastructure.logging import LoggingConfig


class CacheConfig(BaseModel):
    """Representative cache configuration."""

    ttl_seconds: float = Field(
        default=3600.0, gt=0, le=7 * 86400, description="How long a lookup result is served"
    )

    sweep_interval_seconds: float = Field(
        default=600.0,
        ge=0,
        le=86400,
        description="Interval between background expiration sweeps, 0 disables sweeping",
    )


class MonitoringConfig(BaseModel):
    """Metrics configuration."""

    metrics_enabled: bool = Field(
        default=True, description="Record Prometheus metrics for cache activity"
    )


class FinderConfig(BaseSettings):
    """Main rep_finder configuration."""

    model_config = SettingsConfigDict(
        env_prefix="REP_FINDER_",
        env_nested_delimiter="__",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    cache: CacheConfig = Field(default_factory=CacheConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    monitoring: MonitoringConfig = Field(default_factory=MonitoringConfig)

    @property
    def cache_ttl(self) -> timedelta:
        """Get the cache TTL as timedelta."""
        return timedelta(seconds=self.cache.ttl_seconds)

    @property
    def sweep_interval(self) -> timedelta:
        """Get the sweep interval as timedelta."""
        return timedelta(seconds=self.cache.sweep_interval_seconds)


@lru_cache(maxsize=1)
def get_config() -> FinderConfig:
    """Get the shared configuration instance.

    Returns:
        FinderConfig: The configuration instance

    Raises:
        ConfigurationError: If a configured value fails validation
    """
    try:
        return FinderConfig()
    except PydanticValidationError as e:
        first = e.errors()[0]
        config_key = ".".join(str(part) for part in first["loc"]) or "settings"
        raise ConfigurationError(
            config_key,
            first["msg"],
            details={"error_count": e.error_count()},
        ) from e


def reload_config() -> FinderConfig:
    """Reload configuration from environment.

    Returns:
        FinderConfig: The new configuration instance
    """
    get_config.cache_clear()
    return get_config()
