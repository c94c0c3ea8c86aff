# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import time

from flask import Flask, Response, g, request
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

REQUEST_LATENCY = Histogram(
    "xsslab_request_latency_seconds",
    "Request latency",
    labelnames=("method",),
    buckets=(0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1, 2, 5),
)
REQUEST_COUNTER = Counter(
    "xsslab_requests_total",
    "Number of processed requests",
    labelnames=("endpoint", "status"),
)


def record_request(method: str, endpoint: str, status: int, duration: float) -> None:
    REQUEST_LATENCY.labels(method=method).observe(duration)
    REQUEST_COUNTER.labels(endpoint=endpoint, status=str(status)).inc()


def configure_metrics(app: Flask, *, enabled: bool) -> None:
    """Count requests per route rule and expose them on ``GET /metrics``."""
    if not enabled:
        return

    @app.before_request
    def _start_timer() -> None:
        g.metrics_started = time.perf_counter()

    @app.after_request
    def _observe(response: Response) -> Response:
        started = g.get("metrics_started")
        if started is not None:
            # Label by rule, not raw path, so post ids do not explode cardinality.
            endpoint = request.url_rule.rule if request.url_rule else "unmatched"
            record_request(
                request.method, endpoint, response.status_code, time.perf_counter() - started
            )
        return response

    def metrics() -> Response:
        return Response(generate_latest(), mimetype=CONTENT_TYPE_LATEST)

    app.add_url_rule("/metrics", "metrics", metrics, methods=["GET"])


__all__ = ["REQUEST_COUNTER", "REQUEST_LATENCY", "configure_metrics", "record_request"]
