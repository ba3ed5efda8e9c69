"""Revenue per department ("service")."""
from __future__ import annotations

import logging
from decimal import Decimal

from salesboard.models.schemas import (
    ServiceBreakdown,
    ServiceShare,
    YearlyServiceBreakdown,
    YearlyServiceMonth,
)

from .amounts import ZERO, coerce_amount, percentage
from .period_utils import month_name, month_range, year_range
from .store import SaleRow, TransactionStore

logger = logging.getLogger(__name__)


def build_service_breakdown(year: int, month: int, rows: list[SaleRow]) -> ServiceBreakdown:
    """Group one month's sale rows by department.

    Departments without sales in the month do not appear. Percentages are
    shares of the month total to one decimal, all 0 when the total is 0.
    """
    totals: dict[int, Decimal] = {}
    names: dict[int, str] = {}
    anomalies = 0
    for row in rows:
        value, anomalous = coerce_amount(row.amount)
        anomalies += anomalous
        totals[row.department_id] = totals.get(row.department_id, ZERO) + value
        names[row.department_id] = row.department_name

    total_revenue = sum(totals.values(), ZERO)
    breakdown = [
        ServiceShare(
            department_id=dept_id,
            department_name=names[dept_id],
            revenue=float(revenue),
            percentage=percentage(revenue, total_revenue),
        )
        for dept_id, revenue in totals.items()
    ]
    breakdown.sort(key=lambda s: (s.department_name, s.department_id))

    if anomalies:
        logger.warning("Service breakdown %s-%02d: %d unparseable amounts counted as 0", year, month, anomalies)
    return ServiceBreakdown(
        year=year,
        month=month,
        breakdown=breakdown,
        total_revenue=float(total_revenue),
        anomaly_count=anomalies,
    )


def aggregate_service_breakdown(
    store: TransactionStore,
    year: int,
    month: int,
    department_id: int | None = None,
) -> ServiceBreakdown:
    period = month_range(year, month)
    rows = store.sale_rows(period.start, period.end, department_id=department_id)
    return build_service_breakdown(year, month, rows)


def aggregate_yearly_service_breakdown(store: TransactionStore, year: int) -> YearlyServiceBreakdown:
    """Revenue per department for every month of ``year``.

    Every known department appears in every month, zero-filled.
    """
    period = year_range(year)
    department_names = [d.name for d in store.departments()]
    services = {m: {name: ZERO for name in department_names} for m in range(1, 13)}

    for row in store.sale_rows(period.start, period.end):
        if row.date.year != year:
            continue
        value, _ = coerce_amount(row.amount)
        bucket = services[row.date.month]
        bucket[row.department_name] = bucket.get(row.department_name, ZERO) + value

    months = [
        YearlyServiceMonth(
            month=m,
            month_name=month_name(m),
            total=float(sum(services[m].values(), ZERO)),
            services={name: float(amount) for name, amount in services[m].items()},
        )
        for m in range(1, 13)
    ]
    return YearlyServiceBreakdown(year=year, months=months, departments=department_names)
