# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Call metrics for synthesized endpoints.

This module provides:
1. EndpointMetrics - Dataclass tracking per-endpoint call counters
2. PrometheusEndpointMetrics - Optional Prometheus-style metrics

Usage:
    metrics = EndpointMetrics()
    metrics.record_call("get_user", duration_seconds=0.12, error=None, response_bytes=42)
    stats = metrics.get_stats()

Endpoint names are the attribute names of descriptor fields, so the label
cardinality is bounded by the number of declared endpoints.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

logger = logging.getLogger(__name__)

# Type declarations for optional prometheus_client imports
if TYPE_CHECKING:
    from prometheus_client import Counter as CounterType, Histogram as HistogramType
else:
    CounterType = object
    HistogramType = object

# Try to import prometheus_client for optional Prometheus metrics
try:
    from prometheus_client import Counter as _Counter, Histogram as _Histogram

    Counter: type[CounterType] | None = _Counter
    Histogram: type[HistogramType] | None = _Histogram
    PROMETHEUS_AVAILABLE = True
except ImportError:
    Counter = None
    Histogram = None
    PROMETHEUS_AVAILABLE = False


@dataclass
class EndpointStats:
    """Counters for a single endpoint."""

    calls: int = 0
    errors: int = 0
    response_bytes: int = 0
    total_duration: float = 0.0
    errors_by_type: dict[str, int] = field(default_factory=dict)

    @property
    def average_duration(self) -> float:
        return self.total_duration / self.calls if self.calls else 0.0


@dataclass
class EndpointMetrics:
    """
    Per-endpoint call metrics.

    Thread Safety:
        Synthesized stubs may be called from many threads at once; every
        update takes the internal lock.

    Example:
        >>> metrics = EndpointMetrics()
        >>> metrics.record_call("get_user", 0.05, None, 128)
        >>> metrics.get_stats()["get_user"]["calls"]
        1
    """

    _endpoints: dict[str, EndpointStats] = field(default_factory=dict, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def record_call(
        self,
        endpoint: str,
        duration_seconds: float,
        error: BaseException | None,
        response_bytes: int = 0,
    ) -> None:
        """
        Record one completed stub invocation.

        Args:
            endpoint: Descriptor field name
            duration_seconds: Wall time of the call
            error: Failure placed in (or discarded from) the result, if any
            response_bytes: Size of the response body
        """
        with self._lock:
            stats = self._endpoints.setdefault(endpoint, EndpointStats())
            stats.calls += 1
            stats.total_duration += duration_seconds
            stats.response_bytes += response_bytes
            if error is not None:
                stats.errors += 1
                name = type(error).__name__
                stats.errors_by_type[name] = stats.errors_by_type.get(name, 0) + 1

        prom = get_prometheus_metrics()
        if prom is not None:
            prom.observe_call(endpoint, duration_seconds, error)

    def get_endpoint(self, endpoint: str) -> EndpointStats | None:
        with self._lock:
            return self._endpoints.get(endpoint)

    def get_stats(self) -> dict[str, Any]:
        """Snapshot of all counters, suitable for JSON serialization."""
        with self._lock:
            return {
                name: {
                    "calls": stats.calls,
                    "errors": stats.errors,
                    "response_bytes": stats.response_bytes,
                    "average_duration": stats.average_duration,
                    "errors_by_type": dict(stats.errors_by_type),
                }
                for name, stats in self._endpoints.items()
            }

    def reset(self) -> None:
        with self._lock:
            self._endpoints.clear()


class PrometheusEndpointMetrics:
    """
    Optional Prometheus metrics for endpoint calls.

    Only instantiated if prometheus_client is available.

    Metrics:
        - restub_calls_total: Counter of calls by endpoint and outcome
        - restub_errors_total: Counter of errors by endpoint and error type
        - restub_call_duration_seconds: Histogram of call durations
    """

    def __init__(self, registry: Any | None = None) -> None:
        """
        Initialize Prometheus endpoint metrics.

        Args:
            registry: Optional CollectorRegistry. If None, uses the default registry.

        Raises:
            ImportError: If prometheus_client is not available.
        """
        if not PROMETHEUS_AVAILABLE or Counter is None or Histogram is None:
            raise ImportError(
                "prometheus_client is not available. "
                "Install with: pip install restub[metrics]"
            )

        self.calls = Counter(
            "restub_calls_total",
            "Total endpoint calls",
            ["endpoint", "outcome"],  # Values: ok, error
            registry=registry,
        )
        self.errors = Counter(
            "restub_errors_total",
            "Endpoint calls that ended with an error",
            ["endpoint", "error_type"],
            registry=registry,
        )
        self.duration_seconds = Histogram(
            "restub_call_duration_seconds",
            "Duration of endpoint calls",
            ["endpoint"],
            buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1, 2.5, 5, 10, 30],
            registry=registry,
        )

        logger.info("Prometheus endpoint metrics initialized")

    def observe_call(
        self, endpoint: str, duration_seconds: float, error: BaseException | None
    ) -> None:
        outcome = "ok" if error is None else "error"
        self.calls.labels(endpoint=endpoint, outcome=outcome).inc()
        self.duration_seconds.labels(endpoint=endpoint).observe(duration_seconds)
        if error is not None:
            self.errors.labels(endpoint=endpoint, error_type=type(error).__name__).inc()


# Module-level singleton for Prometheus metrics (optional)
_prometheus_metrics: PrometheusEndpointMetrics | None = None
# Set once initialization has failed; cleared by reset_prometheus_metrics()
_prometheus_disabled = False
_prometheus_lock = threading.Lock()


def get_prometheus_metrics() -> PrometheusEndpointMetrics | None:
    """
    Get or create the Prometheus metrics singleton.

    Double-checked locking keeps prometheus_client from seeing duplicate
    registrations when several threads make their first call together.
    A failed initialization is remembered, so it is attempted (and logged)
    only once until reset_prometheus_metrics() is called.

    Returns:
        PrometheusEndpointMetrics instance if prometheus_client is available
        and initialization succeeded, None otherwise.
    """
    global _prometheus_metrics, _prometheus_disabled

    if not PROMETHEUS_AVAILABLE or _prometheus_disabled:
        return None

    if _prometheus_metrics is None:
        with _prometheus_lock:
            if _prometheus_metrics is None and not _prometheus_disabled:
                try:
                    _prometheus_metrics = PrometheusEndpointMetrics()
                except ValueError as e:
                    # Duplicated timeseries in the default registry
                    _prometheus_disabled = True
                    logger.warning(
                        f"Failed to initialize Prometheus endpoint metrics: {e}; "
                        "Prometheus export disabled"
                    )

    return _prometheus_metrics


def reset_prometheus_metrics() -> None:
    """Reset the Prometheus metrics singleton (mainly for testing)."""
    global _prometheus_metrics, _prometheus_disabled
    with _prometheus_lock:
        _prometheus_metrics = None
        _prometheus_disabled = False


__all__ = [
    "PROMETHEUS_AVAILABLE",
    "EndpointMetrics",
    "EndpointStats",
    "PrometheusEndpointMetrics",
    "get_prometheus_metrics",
    "reset_prometheus_metrics",
]
