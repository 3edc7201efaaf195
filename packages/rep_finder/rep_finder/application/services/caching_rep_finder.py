"""Caching layer on top of a delegate representative finder.

Successful lookups are kept for a fixed TTL under the exact address string
the caller supplied. Failures are never cached and reach the caller as the
delegate raised them.
"""

from __future__ import annotations

import copy
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta
from types import TracebackType
from typing import Any

from rep_finder.config import get_config
from rep_finder.domain.entities import Address, LocalReps
from rep_finder.domain.exceptions import ValidationError
from rep_finder.domain.interfaces import RepFinder
from rep_finder.infrastructure.cache import TTLCache
from rep_finder.infrastructure.logging import get_logger
from rep_finder.infrastructure.monitoring import CacheMetricsCollector

logger = get_logger(__name__)


@dataclass(frozen=True)
class CachedReps:
    """A successful lookup as held in the cache."""

    reps: LocalReps
    address: Address


class CachingRepFinder(RepFinder):
    """RepFinder decorator that caches successful lookups.

    Behaves exactly like the delegate except that a repeated address within
    the TTL is answered from memory. Concurrent misses for the same address
    may each call the delegate; only the store itself is locked, never the
    delegate call.

    Example:
        async with CachingRepFinder(remote, ttl=timedelta(hours=1)) as finder:
            reps, address = await finder.get_reps("1600 Pennsylvania Ave")
    """

    def __init__(
        self,
        delegate: RepFinder,
        ttl: timedelta | float | None = None,
        sweep_interval: timedelta | float | None = None,
        cache: TTLCache[CachedReps] | None = None,
        metrics: CacheMetricsCollector | None = None,
        name: str = "reps",
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the caching finder.

        Args:
            delegate: Finder consulted on cache misses
            ttl: Entry lifetime (defaults to config value)
            sweep_interval: Background sweep period, zero disables it
                (defaults to config value)
            cache: Preconfigured store to use instead of building one
            metrics: Metrics collector (defaults to one named after the cache)
            name: Cache name used in logs and metric labels
            clock: Source of the current UTC time

        Raises:
            ValidationError: If cache is combined with ttl, sweep_interval or clock
        """
        if cache is not None:
            conflicting = [
                option
                for option, value in (
                    ("ttl", ttl),
                    ("sweep_interval", sweep_interval),
                    ("clock", clock),
                )
                if value is not None
            ]
            if conflicting:
                raise ValidationError(
                    f"Cannot combine a preconfigured cache with {', '.join(conflicting)}",
                    field="cache",
                    details={"conflicting": conflicting},
                )

        config = get_config()

        self._delegate = delegate
        self._name = name
        self._metrics = metrics or CacheMetricsCollector(
            name, enabled=config.monitoring.metrics_enabled
        )
        self._cache: TTLCache[CachedReps]
        if cache is not None:
            self._cache = cache
        else:
            self._cache = TTLCache(
                ttl=ttl if ttl is not None else config.cache_ttl,
                sweep_interval=(
                    sweep_interval if sweep_interval is not None else config.sweep_interval
                ),
                clock=clock,
                metrics=self._metrics,
            )
        self._delegate_calls = 0
        self._delegate_failures = 0

        logger.info(
            "Initialized CachingRepFinder",
            extra={
                "cache": name,
                "delegate": type(delegate).__name__,
                "ttl_seconds": self._cache.ttl.total_seconds(),
                "sweep_interval_seconds": self._cache.sweep_interval.total_seconds(),
            },
        )

    async def start(self) -> None:
        """Start background expiration sweeping."""
        await self._cache.start()

    async def stop(self) -> None:
        """Stop background expiration sweeping."""
        await self._cache.stop()

    async def __aenter__(self) -> CachingRepFinder:
        await self.start()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.stop()

    async def get_reps(self, address: str) -> tuple[LocalReps, Address]:
        """Return representatives for an address, from cache when possible.

        Args:
            address: Free-form address, used verbatim as the cache key

        Returns:
            The representatives and canonical address. Cached results are
            returned as fresh copies.

        Raises:
            Exception: Whatever the delegate raised, unchanged
        """
        cached = await self._cache.get(address)
        if cached is not None:
            self._metrics.record_hit()
            return copy.deepcopy(cached.reps), copy.deepcopy(cached.address)

        self._metrics.record_miss()
        self._delegate_calls += 1
        try:
            reps, canonical = await self._delegate.get_reps(address)
        except Exception as e:
            self._delegate_failures += 1
            self._metrics.record_delegate_failure(e)
            logger.warning(
                "Delegate lookup failed, not caching",
                extra={"cache": self._name, "address": address, "error": str(e)},
            )
            raise

        await self._cache.set(
            address,
            CachedReps(reps=copy.deepcopy(reps), address=copy.deepcopy(canonical)),
        )
        return reps, canonical

    @property
    def delegate(self) -> RepFinder:
        """Get the wrapped finder."""
        return self._delegate

    @property
    def cache(self) -> TTLCache[CachedReps]:
        """Get the underlying store."""
        return self._cache

    @property
    def stats(self) -> dict[str, Any]:
        """Get cache and delegate statistics."""
        return {
            **self._cache.stats,
            "name": self._name,
            "delegate_calls": self._delegate_calls,
            "delegate_failures": self._delegate_failures,
        }
