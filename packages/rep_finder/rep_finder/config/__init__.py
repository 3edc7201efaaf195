"""Configuration package for rep_finder."""

from .config import CacheConfig, FinderConfig, MonitoringConfig, get_config, reload_config

__all__ = ["CacheConfig", "FinderConfig", "MonitoringConfig", "get_config", "reload_config"]
