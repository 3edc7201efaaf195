"""Domain interfaces for rep_finder.

This module contains the abstract contract implemented both by remote
finders and by the caching layer that wraps them.
"""

from __future__ import annotations

from .rep_finder import RepFinder

__all__ = ["RepFinder"]
