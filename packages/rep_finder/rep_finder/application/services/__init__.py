"""Application services for rep_finder."""

from __future__ import annotations

from .caching_rep_finder import CachedReps, CachingRepFinder

__all__ = ["CachedReps", "CachingRepFinder"]
