# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Observability for restub clients.

Exported:
    EndpointMetrics: Thread-safe per-endpoint call counters.
    EndpointStats: Counters for one endpoint.
    PrometheusEndpointMetrics: Optional Prometheus counters and histogram.
    get_prometheus_metrics: Get or create the Prometheus metrics singleton.
    reset_prometheus_metrics: Reset the Prometheus metrics singleton.
    PROMETHEUS_AVAILABLE: Whether prometheus_client is available.
"""

from .metrics import (
    PROMETHEUS_AVAILABLE,
    EndpointMetrics,
    EndpointStats,
    PrometheusEndpointMetrics,
    get_prometheus_metrics,
    reset_prometheus_metrics,
)

__all__ = [
    "PROMETHEUS_AVAILABLE",
    "EndpointMetrics",
    "EndpointStats",
    "PrometheusEndpointMetrics",
    "get_prometheus_metrics",
    "reset_prometheus_metrics",
]
