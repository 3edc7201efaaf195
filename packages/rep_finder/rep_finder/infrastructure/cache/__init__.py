"""Cache infrastructure for rep_finder."""

from __future__ import annotations

from .ttl_cache import CacheEntry, TTLCache

__all__ = [
    "CacheEntry",
    "TTLCache",
]
