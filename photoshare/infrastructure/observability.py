# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import time

from flask import Flask, Response, g, request
from prometheus_client import CONTENT_TYPE_LATEST, CollectorRegistry, Counter, Histogram, generate_latest

from photoshare.shared.config import ObservabilityConfig

METRICS_PATH = "/metrics"


class RequestMetrics:
    """Request counters kept in a registry owned by one application."""

    def __init__(self, service_name: str, registry: CollectorRegistry | None = None) -> None:
        self.registry = registry or CollectorRegistry()
        prefix = service_name.replace("-", "_")
        self.latency = Histogram(
            f"{prefix}_request_latency_seconds",
            "Request latency",
            labelnames=("endpoint",),
            buckets=(0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1, 2, 5),
            registry=self.registry,
        )
        self.requests = Counter(
            f"{prefix}_requests_total",
            "Number of processed requests",
            labelnames=("endpoint", "status"),
            registry=self.registry,
        )

    def observe(self, endpoint: str, status: int, duration: float) -> None:
        self.latency.labels(endpoint=endpoint).observe(duration)
        self.requests.labels(endpoint=endpoint, status=str(status)).inc()

    def render(self) -> Response:
        return Response(generate_latest(self.registry), mimetype=CONTENT_TYPE_LATEST)


def configure_metrics(app: Flask, config: ObservabilityConfig) -> RequestMetrics | None:
    if not config.metrics_enabled:
        return None

    metrics = RequestMetrics(config.service_name)

    @app.before_request
    def _start_timer() -> None:
        g.metrics_start = time.perf_counter()

    @app.after_request
    def _record(response: Response) -> Response:
        if request.path != METRICS_PATH:
            start = getattr(g, "metrics_start", None)
            duration = time.perf_counter() - start if start is not None else 0.0
            # Label by route template, never the raw path.
            endpoint = request.url_rule.rule if request.url_rule else "unmatched"
            metrics.observe(endpoint, response.status_code, duration)
        return response

    app.add_url_rule(METRICS_PATH, "metrics", metrics.render, methods=["GET"])
    return metrics


__all__ = ["METRICS_PATH", "RequestMetrics", "configure_metrics"]
