"""
Prometheus metrics registration and helpers.

Exports:
- observe_request(...): record HTTP request metrics
- register_request_metrics(app): time every request through before/after hooks
- metrics_latest(): return text exposition from correct registry (handles multiprocess)
- CONTENT_TYPE_LATEST: correct Prometheus content type
"""

import os
import time
from flask import g, request
from prometheus_client import Counter, Histogram, CollectorRegistry, generate_latest, CONTENT_TYPE_LATEST
from prometheus_client import multiprocess


REQUEST_COUNTER = Counter(
    'students_http_requests_total', 'Total HTTP requests', ['endpoint', 'method', 'status']
)

REQUEST_LATENCY = Histogram(
    'students_http_request_latency_seconds', 'HTTP request latency seconds', ['endpoint']
)


def observe_request(endpoint: str, method: str, status: int, latency_seconds: float) -> None:
    REQUEST_COUNTER.labels(endpoint=endpoint, method=method, status=str(status)).inc()
    REQUEST_LATENCY.labels(endpoint=endpoint).observe(latency_seconds)


def register_request_metrics(app) -> None:
    """Record count and latency for every request served by `app`."""

    @app.before_request
    def _start_timer():
        g.request_started_at = time.perf_counter()

    @app.after_request
    def _record_request(response):
        started = g.pop('request_started_at', None)
        if started is not None:
            # Unmatched URLs have no endpoint; keep label cardinality bounded
            endpoint = request.endpoint or 'unmatched'
            observe_request(endpoint, request.method, response.status_code, time.perf_counter() - started)
        return response


def metrics_latest() -> bytes:
    """Return the Prometheus text exposition, multiprocess-aware if configured."""
    prom_mp_dir = os.getenv('PROMETHEUS_MULTIPROC_DIR')
    if prom_mp_dir:
        registry = CollectorRegistry()
        multiprocess.MultiProcessCollector(registry)
        return generate_latest(registry)
    # Default registry
    return generate_latest()
