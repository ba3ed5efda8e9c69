import pytest
from pydantic import ValidationError

from salesboard.core import config


def test_healthz(client):
    resp = client.get("/healthz")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_metrics_endpoint_exposes_report_counters(client):
    client.get("/dashboard/revenue/2024")
    resp = client.get("/metrics")
    assert resp.status_code == 200
    text = resp.text
    assert 'dashboard_reports_total{report="monthly_revenue"}' in text
    assert "dashboard_report_seconds_bucket" in text
    assert "dashboard_amount_anomalies_total" in text


def test_projection_markup_must_be_positive():
    with pytest.raises(ValidationError):
        config.TestSettings(PROJECTION_MARKUP=0)


def test_postgres_scheme_is_normalised():
    cfg = config.TestSettings(DATABASE_URL="postgres://u:p@db/sales")
    assert cfg.DATABASE_URL == "postgresql://u:p@db/sales"


def test_json_formatter_includes_extra_fields():
    import json
    import logging

    from salesboard.core.logger import JsonFormatter

    record = logging.LogRecord("salesboard.test", logging.WARNING, __file__, 1, "hello %s", ("world",), None)
    record.report = "monthly_revenue"
    payload = json.loads(JsonFormatter().format(record))

    assert payload["message"] == "hello world"
    assert payload["level"] == "WARNING"
    assert payload["extra"] == {"report": "monthly_revenue"}
