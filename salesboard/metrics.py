"""Metrics facade.

Service code should ONLY call the semantic helpers here so the backend can
change freely.

Metrics:
- dashboard_reports_total          Reports served, by kind
- dashboard_report_seconds         Time spent building a report, by kind
- dashboard_amount_anomalies_total Stored amounts that could not be parsed
"""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from typing import Iterator

from prometheus_client import Counter, Histogram

logger = logging.getLogger("metrics")

_REPORTS_SERVED = Counter("dashboard_reports_total", "Dashboard reports served", ["report"])
_REPORT_LATENCY = Histogram(
    "dashboard_report_seconds",
    "Time spent building a dashboard report",
    ["report"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1, 2.5, 5),
)
_AMOUNT_ANOMALIES = Counter(
    "dashboard_amount_anomalies_total", "Stored amounts that could not be parsed and counted as 0"
)


@contextmanager
def report_timer(report: str) -> Iterator[None]:
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed = time.perf_counter() - start
        _REPORTS_SERVED.labels(report=report).inc()
        _REPORT_LATENCY.labels(report=report).observe(elapsed)
        logger.debug("report=%s built in %.4fs", report, elapsed)


def amount_anomalies(count: int) -> None:
    if count > 0:
        _AMOUNT_ANOMALIES.inc(count)
