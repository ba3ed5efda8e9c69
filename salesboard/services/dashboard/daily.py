"""Day-by-day sales for one department against a daily target line."""
from __future__ import annotations

import logging
from decimal import Decimal

from salesboard.core.exceptions import DepartmentNotFoundError
from salesboard.models.schemas import DailyEntry, DailyStats, ServiceDailyReport

from .amounts import ZERO, coerce_amount, percentage
from .period_utils import days_in_month, month_range
from .store import TransactionStore
from .targets import NoTarget, TargetResolution

logger = logging.getLogger(__name__)


def _sum_rows(rows) -> Decimal:
    return sum((coerce_amount(r.amount)[0] for r in rows), ZERO)


def aggregate_service_daily(
    store: TransactionStore,
    department_id: int,
    display_year: int,
    display_month: int,
    target_year: int | None = None,
    target_month: int | None = None,
) -> ServiceDailyReport:
    """Chart a display month's daily sales against a target month's basis.

    The target month defaults to the display month. Its basis is the
    resolved target (explicit monthly, then department default). With no
    target on record the basis falls back to the target month's actual
    sales and ``target_source`` stays ``"none"``.

    The basis is spread evenly over the days of the target month; that
    daily figure is then drawn across every day of the display month.

    Raises DepartmentNotFoundError for an unknown ``department_id``.
    """
    if target_year is None:
        target_year = display_year
    if target_month is None:
        target_month = display_month

    display_days = days_in_month(display_year, display_month)
    target_days = days_in_month(target_year, target_month)

    display_period = month_range(display_year, display_month)
    display_rows = store.sale_rows(display_period.start, display_period.end, department_id=department_id)

    by_day: dict[int, Decimal] = {d: ZERO for d in range(1, display_days + 1)}
    department_name: str | None = None
    for row in display_rows:
        department_name = row.department_name
        value, _ = coerce_amount(row.amount)
        by_day[row.date.day] += value

    resolution: TargetResolution = store.resolve_target(department_id, target_year, target_month)
    if isinstance(resolution, NoTarget):
        target_period = month_range(target_year, target_month)
        target_rows = store.sale_rows(target_period.start, target_period.end, department_id=department_id)
        target_total = _sum_rows(target_rows)
        logger.info(
            "No target on record for department=%s %s-%02d; using actual sales %s as basis",
            department_id, target_year, target_month, target_total,
        )
    else:
        target_total = resolution.amount

    if department_name is None:
        department_name = next((d.name for d in store.departments() if d.id == department_id), None)
        if department_name is None:
            raise DepartmentNotFoundError(department_id)

    daily_target = float(target_total) / target_days
    breakdown: list[DailyEntry] = []
    cumulative_sales = 0.0
    cumulative_target = 0.0
    for day in range(1, display_days + 1):
        sales = float(by_day[day])
        cumulative_sales += sales
        cumulative_target += daily_target
        breakdown.append(
            DailyEntry(
                day=day,
                sales=sales,
                target=daily_target,
                variance=sales - daily_target,
                cumulative_sales=cumulative_sales,
                cumulative_target=cumulative_target,
            )
        )

    total_sales = sum(e.sales for e in breakdown)
    target = float(target_total)
    stats = DailyStats(
        total_sales=total_sales,
        target=target,
        percent_of_target=percentage(total_sales, target),
        difference=total_sales - target,
    )
    return ServiceDailyReport(
        department_id=department_id,
        department_name=department_name,
        display_year=display_year,
        display_month=display_month,
        target_year=target_year,
        target_month=target_month,
        target_source=resolution.source,
        daily_target=daily_target,
        stats=stats,
        daily_breakdown=breakdown,
    )
