from __future__ import annotations

from flask import Flask

from photoshare.infrastructure.observability import RequestMetrics, configure_metrics
from photoshare.shared.config import ObservabilityConfig


def test_metrics_disabled_registers_nothing() -> None:
    app = Flask(__name__)

    assert configure_metrics(app, ObservabilityConfig(metrics_enabled=False)) is None
    with app.test_client() as client:
        assert client.get("/metrics").status_code == 404


def test_each_app_gets_its_own_registry() -> None:
    first = RequestMetrics("photoshare")
    second = RequestMetrics("photoshare")

    first.observe("/api/photos", 200, 0.01)

    assert first.registry.get_sample_value(
        "photoshare_requests_total", {"endpoint": "/api/photos", "status": "200"}
    ) == 1.0
    assert second.registry.get_sample_value(
        "photoshare_requests_total", {"endpoint": "/api/photos", "status": "200"}
    ) is None
