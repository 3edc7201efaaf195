"""Prometheus metrics for the representative cache."""

from __future__ import annotations

from prometheus_client import Counter, Gauge


cache_requests_total = Counter(
    "rep_finder_cache_requests_total",
    "Total number of lookups served through the cache",
    ["cache", "result"],
)

delegate_failures_total = Counter(
    "rep_finder_delegate_failures_total",
    "Total number of failed delegate lookups",
    ["cache", "error_type"],
)

cache_expirations_total = Counter(
    "rep_finder_cache_expirations_total",
    "Total number of expired entries removed",
    ["cache", "reason"],
)

cache_size = Gauge(
    "rep_finder_cache_size",
    "Current number of entries in the cache",
    ["cache"],
)


class CacheMetricsCollector:
    """Records cache activity under a single ``cache`` label."""

    def __init__(self, cache_name: str, enabled: bool = True) -> None:
        """Initialize metrics collector.

        Args:
            cache_name: Value of the ``cache`` label
            enabled: When False every record call is a no-op
        """
        self.cache_name = cache_name
        self.enabled = enabled

    def record_hit(self) -> None:
        """Record a lookup answered from the cache."""
        if self.enabled:
            cache_requests_total.labels(cache=self.cache_name, result="hit").inc()

    def record_miss(self) -> None:
        """Record a lookup that went to the delegate."""
        if self.enabled:
            cache_requests_total.labels(cache=self.cache_name, result="miss").inc()

    def record_delegate_failure(self, error: BaseException) -> None:
        """Record a delegate failure.

        Args:
            error: The exception the delegate raised
        """
        if self.enabled:
            delegate_failures_total.labels(
                cache=self.cache_name,
                error_type=type(error).__name__,
            ).inc()

    def record_expirations(self, count: int, reason: str) -> None:
        """Record removed expired entries.

        Args:
            count: Number of entries removed
            reason: "read" for read-time checks, "sweep" for the background sweep
        """
        if self.enabled and count > 0:
            cache_expirations_total.labels(cache=self.cache_name, reason=reason).inc(count)

    def set_size(self, size: int) -> None:
        """Publish the current number of cached entries."""
        if self.enabled:
            cache_size.labels(cache=self.cache_name).set(size)
