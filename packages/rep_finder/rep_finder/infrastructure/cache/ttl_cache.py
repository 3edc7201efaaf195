"""In-memory TTL cache with a background expiration sweep."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from rep_finder.domain.exceptions import ValidationError
from rep_finder.infrastructure.logging import get_logger

if TYPE_CHECKING:
    from asyncio import Task

    from rep_finder.infrastructure.monitoring import CacheMetricsCollector

logger = get_logger(__name__)

T = TypeVar("T")


def _utc_now() -> datetime:
    return datetime.now(UTC)


def _as_timedelta(value: timedelta | float) -> timedelta:
    if isinstance(value, timedelta):
        return value
    return timedelta(seconds=value)


class CacheEntry(Generic[T]):
    """A cached value and its expiration deadline.

    Entries are never updated in place; storing a key again replaces the
    whole entry.
    """

    __slots__ = ("key", "value", "created_at", "expires_at")

    def __init__(self, key: str, value: T, created_at: datetime, ttl: timedelta) -> None:
        """Initialize cache entry.

        Args:
            key: Cache key
            value: Cached value
            created_at: Insertion time
            ttl: Time to live
        """
        self.key = key
        self.value = value
        self.created_at = created_at
        self.expires_at = created_at + ttl

    def is_expired(self, now: datetime) -> bool:
        """Check if the entry's deadline has passed."""
        return now >= self.expires_at


class TTLCache(Generic[T]):
    """Async key/value store whose entries expire after a fixed TTL.

    Liveness is checked on every read, so an expired entry is never
    returned. The optional sweep task only reclaims memory held by entries
    nobody reads again.

    All access to the entry map happens under a single ``asyncio.Lock``.
    """

    def __init__(
        self,
        ttl: timedelta | float,
        sweep_interval: timedelta | float = 0,
        clock: Callable[[], datetime] | None = None,
        metrics: CacheMetricsCollector | None = None,
    ) -> None:
        """Initialize the cache.

        Args:
            ttl: How long an entry stays eligible to be served
            sweep_interval: Period of the background sweep; zero disables it
            clock: Source of the current UTC time
            metrics: Optional collector for expiration and size metrics

        Raises:
            ValidationError: If ttl is not positive or sweep_interval is negative
        """
        self._ttl = _as_timedelta(ttl)
        self._sweep_interval = _as_timedelta(sweep_interval)
        if self._ttl <= timedelta(0):
            raise ValidationError(f"TTL must be positive, got {self._ttl}", field="ttl")
        if self._sweep_interval < timedelta(0):
            raise ValidationError(
                f"Sweep interval must not be negative, got {self._sweep_interval}",
                field="sweep_interval",
            )

        self._clock = clock or _utc_now
        self._metrics = metrics
        self._entries: dict[str, CacheEntry[T]] = {}
        self._lock = asyncio.Lock()
        self._sweep_task: Task[None] | None = None
        self._running = False

        self._hits = 0
        self._misses = 0
        self._expirations = 0

    async def start(self) -> None:
        """Start the background sweep task."""
        if self._sweep_interval == timedelta(0):
            logger.debug("Cache sweep disabled, relying on read-time expiration")
            return
        if self._running:
            logger.warning("Cache sweep already running")
            return

        self._running = True
        self._sweep_task = asyncio.create_task(self._sweep_loop())
        logger.info(
            "Started cache sweep task",
            extra={"sweep_interval_seconds": self._sweep_interval.total_seconds()},
        )

    async def stop(self) -> None:
        """Stop the background sweep task.

        Raises:
            asyncio.CancelledError: If the task calling stop is itself cancelled
        """
        self._running = False
        task, self._sweep_task = self._sweep_task, None
        if task and not task.done():
            task.cancel()
            try:
                await task
            except asyncio.CancelledError:
                current = asyncio.current_task()
                if current is not None and current.cancelling():
                    raise
        logger.info("Stopped cache sweep task")

    async def get(self, key: str) -> T | None:
        """Get a live value from the cache.

        Args:
            key: Cache key

        Returns:
            Cached value, or None if absent or expired
        """
        async with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                self._misses += 1
                logger.debug("Cache miss", extra={"key": key})
                return None

            if entry.is_expired(self._clock()):
                del self._entries[key]
                self._misses += 1
                self._expirations += 1
                size = len(self._entries)
                logger.debug(
                    "Cache entry expired",
                    extra={
                        "key": key,
                        "created_at": entry.created_at.isoformat(),
                        "expires_at": entry.expires_at.isoformat(),
                    },
                )
                if self._metrics:
                    self._metrics.record_expirations(1, "read")
                    self._metrics.set_size(size)
                return None

            self._hits += 1
            logger.debug("Cache hit", extra={"key": key})
            return entry.value

    async def set(self, key: str, value: T) -> None:
        """Store a value, replacing any existing entry for the key.

        Args:
            key: Cache key
            value: Value to cache
        """
        async with self._lock:
            self._entries[key] = CacheEntry(key, value, self._clock(), self._ttl)
            size = len(self._entries)

        logger.debug(
            "Cache put",
            extra={"key": key, "ttl_seconds": self._ttl.total_seconds(), "cache_size": size},
        )
        if self._metrics:
            self._metrics.set_size(size)

    async def cleanup_expired(self) -> int:
        """Remove all expired entries.

        Returns:
            Number of entries removed
        """
        async with self._lock:
            now = self._clock()
            expired_keys = [key for key, entry in self._entries.items() if entry.is_expired(now)]
            for key in expired_keys:
                del self._entries[key]
            self._expirations += len(expired_keys)
            size = len(self._entries)

        if expired_keys:
            logger.info(
                "Cleaned up expired entries",
                extra={"count": len(expired_keys), "cache_size": size},
            )
        if self._metrics:
            self._metrics.record_expirations(len(expired_keys), "sweep")
            self._metrics.set_size(size)

        return len(expired_keys)

    async def keys(self) -> list[str]:
        """Get the keys currently held, live or not yet swept."""
        async with self._lock:
            return list(self._entries)

    async def _sweep_loop(self) -> None:
        """Periodically remove expired entries until stopped."""
        interval = self._sweep_interval.total_seconds()
        while self._running:
            try:
                await asyncio.sleep(interval)
                await self.cleanup_expired()
            except Exception as e:
                logger.error("Error in cache sweep loop", exc_info=e)

    @property
    def ttl(self) -> timedelta:
        """Get the entry TTL."""
        return self._ttl

    @property
    def sweep_interval(self) -> timedelta:
        """Get the sweep interval."""
        return self._sweep_interval

    @property
    def running(self) -> bool:
        """Whether the sweep task is active."""
        return self._running

    @property
    def size(self) -> int:
        """Get the number of stored entries, including expired ones not yet removed."""
        return len(self._entries)

    @property
    def stats(self) -> dict[str, Any]:
        """Get cache statistics."""
        return {
            "size": self.size,
            "hits": self._hits,
            "misses": self._misses,
            "expirations": self._expirations,
            "ttl_seconds": self._ttl.total_seconds(),
            "sweep_interval_seconds": self._sweep_interval.total_seconds(),
        }
