"""Monitoring infrastructure for rep_finder."""

from __future__ import annotations

from .metrics import CacheMetricsCollector

__all__ = ["CacheMetricsCollector"]
