"""Metrics hook protocol and no-op default implementation.

cloudup emits counters and timings around requests, uploads, tracking and
retention.  By default a :class:`NoopMetricsHook` is used; supply any
object satisfying :class:`MetricsHook` through ``ServiceConfig.metrics``
to route data points to StatsD, Prometheus, Datadog, etc.

Emitted metric names:

* ``cloudup.requests_total``           -- counter
* ``cloudup.request_duration_ms``      -- timing
* ``cloudup.upload_success_total``     -- counter
* ``cloudup.upload_failure_total``     -- counter
* ``cloudup.upload_simulated_total``   -- counter
* ``cloudup.tracking_failure_total``   -- counter
* ``cloudup.files_deleted_total``      -- counter
* ``cloudup.files_kept_total``         -- counter
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class MetricsHook(Protocol):
    """Protocol that any metrics backend must satisfy.

    *tags* are string key-value pairs; implementations translate them into
    whatever tagging mechanism their backend supports.
    """

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Increment a counter metric."""
        ...

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Record a duration in milliseconds."""
        ...


class NoopMetricsHook:
    """Default metrics implementation that discards all data points."""

    __slots__ = ()

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass
