"""
Prometheus metrics for the Syscoin DA client.

Instruments:
- syscoin_da_rpc_requests_total{method,outcome}: RPC calls by outcome
- syscoin_da_rpc_duration_seconds{method}: wall time per RPC call
- syscoin_da_blob_bytes_total{direction}: blob payload bytes submitted ("out")
  and retrieved ("in")

Outcomes: "ok", "not_found", "transport_error", "remote_error",
"decode_error".

Typical usage:

    from syscoin_da.metrics import get_metrics

    METRICS = get_metrics()

    with METRICS.time_rpc(method="createblob") as obs:
        ...
        obs.set_outcome("ok")

Tests pass their own CollectorRegistry to `ClientMetrics(registry=...)` so
instruments do not collide in the global registry.
"""

from __future__ import annotations

import time
from contextlib import contextmanager
from typing import Iterator, Optional

from prometheus_client import REGISTRY, CollectorRegistry, Counter, Histogram


class _Observer:
    outcome: str = "transport_error"

    def set_outcome(self, outcome: str) -> None:
        self.outcome = outcome


class ClientMetrics:
    """
    Concrete metrics backed by prometheus_client.
    """

    def __init__(self, registry: Optional[CollectorRegistry] = None) -> None:
        reg = registry if registry is not None else REGISTRY
        self.registry = reg
        self.requests_total = Counter(
            "syscoin_da_rpc_requests_total",
            "Total JSON-RPC calls issued by the DA client",
            ["method", "outcome"],
            registry=reg,
        )
        self.request_duration = Histogram(
            "syscoin_da_rpc_duration_seconds",
            "JSON-RPC call duration in seconds",
            ["method"],
            registry=reg,
            buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0, 60.0),
        )
        self.blob_bytes_total = Counter(
            "syscoin_da_blob_bytes_total",
            "Blob payload bytes moved by the DA client",
            ["direction"],
            registry=reg,
        )

    @contextmanager
    def time_rpc(self, *, method: str) -> Iterator[_Observer]:
        """
        Record one RPC call. The outcome defaults to "transport_error" unless
        the caller sets it, so an exception escaping the block counts as a
        failure.
        """
        start = time.perf_counter()
        obs = _Observer()
        try:
            yield obs
        finally:
            dur = max(0.0, time.perf_counter() - start)
            self.requests_total.labels(method, obs.outcome).inc()
            self.request_duration.labels(method).observe(dur)

    def note_submitted(self, size_bytes: int) -> None:
        if size_bytes > 0:
            self.blob_bytes_total.labels("out").inc(size_bytes)

    def note_retrieved(self, size_bytes: int) -> None:
        if size_bytes > 0:
            self.blob_bytes_total.labels("in").inc(size_bytes)


_METRICS_SINGLETON: Optional[ClientMetrics] = None


def get_metrics() -> ClientMetrics:
    """
    Return the process-wide ClientMetrics registered in the default registry.
    """
    global _METRICS_SINGLETON
    if _METRICS_SINGLETON is None:
        _METRICS_SINGLETON = ClientMetrics()
    return _METRICS_SINGLETON


__all__ = ["ClientMetrics", "get_metrics"]
