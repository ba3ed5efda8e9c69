"""Monthly revenue, expense and income series.

Every series has all twelve months. Months are initialised to zero before
any row is folded in, and each row lands in the calendar month of its own
stored date.
"""
from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, Iterable

from salesboard.core.exceptions import InvalidArgumentError
from salesboard.models.schemas import IncomeMonth, IncomeSeries, MonthlySeries, MonthTotal

from .amounts import ZERO, coerce_amount
from .period_utils import month_name, validate_year, year_range
from .store import TransactionStore

logger = logging.getLogger(__name__)


def build_monthly_series(year: int, rows: Iterable[tuple[Any, Any]]) -> MonthlySeries:
    """Fold (date, raw_amount) pairs into a 12-month series for ``year``.

    Rows dated outside ``year`` are ignored.
    """
    validate_year(year)
    buckets: dict[int, Decimal] = {m: ZERO for m in range(1, 13)}
    anomalies = 0
    for day, raw in rows:
        if day.year != year:
            continue
        value, anomalous = coerce_amount(raw)
        if anomalous:
            anomalies += 1
        buckets[day.month] += value

    months = [
        MonthTotal(month=m, month_name=month_name(m), total=float(buckets[m]))
        for m in range(1, 13)
    ]
    # Summing the rounded month totals keeps year_total == sum(months)
    year_total = sum(m.total for m in months)
    return MonthlySeries(year=year, months=months, year_total=year_total, anomaly_count=anomalies)


def _log_anomalies(kind: str, series: MonthlySeries) -> None:
    if series.anomaly_count:
        logger.warning(
            "%s series for %s: %d rows with unparseable amounts counted as 0",
            kind, series.year, series.anomaly_count,
        )


def aggregate_monthly_revenue(
    store: TransactionStore,
    year: int,
    department_id: int | None = None,
) -> MonthlySeries:
    """Sales revenue per calendar month. NOI is never part of revenue."""
    period = year_range(year)
    rows = store.sale_rows(period.start, period.end, department_id=department_id)
    series = build_monthly_series(year, ((r.date, r.amount) for r in rows))
    _log_anomalies("Revenue", series)
    return series


def aggregate_monthly_expenses(
    store: TransactionStore,
    year: int,
    category: str | None = None,
) -> MonthlySeries:
    period = year_range(year)
    rows = store.expense_rows(period.start, period.end, category=category)
    series = build_monthly_series(year, ((r.date, r.amount) for r in rows))
    _log_anomalies("Expense", series)
    return series


def calculate_monthly_income(
    revenue: MonthlySeries,
    expenses: MonthlySeries,
    noi_by_month: dict[int, Any] | None = None,
) -> IncomeSeries:
    """Per-month income = revenue - expenses.

    Months are matched by month number, never by list position. NOI is
    reported alongside as ``adjusted_income = income + noi``.
    """
    if revenue.year != expenses.year:
        raise InvalidArgumentError(
            "expenses", expenses.year, f"series year does not match revenue year {revenue.year}"
        )
    revenue_by_month = revenue.by_month()
    expenses_by_month = expenses.by_month()
    noi_by_month = noi_by_month or {}

    months: list[IncomeMonth] = []
    for m in range(1, 13):
        rev = revenue_by_month[m].total
        exp = expenses_by_month[m].total
        noi = float(coerce_amount(noi_by_month[m])[0]) if m in noi_by_month else 0.0
        income = rev - exp
        months.append(
            IncomeMonth(
                month=m,
                month_name=month_name(m),
                revenue=rev,
                expenses=exp,
                income=income,
                noi=noi,
                adjusted_income=income + noi,
            )
        )

    return IncomeSeries(
        year=revenue.year,
        months=months,
        year_total=sum(m.income for m in months),
        noi_total=sum(m.noi for m in months),
        adjusted_year_total=sum(m.adjusted_income for m in months),
    )


def aggregate_monthly_income(store: TransactionStore, year: int) -> IncomeSeries:
    revenue = aggregate_monthly_revenue(store, year)
    expenses = aggregate_monthly_expenses(store, year)
    return calculate_monthly_income(revenue, expenses, store.noi_by_month(year))
