"""Monthly projection report.

Two independent sources are reported side by side and never merged:

- estimated figures, derived from actual revenue. ``avg_monthly`` is the
  department's share of the year's revenue applied to the average monthly
  revenue through the selected month; ``monthly_target`` is actual revenue
  times a fixed markup (``PROJECTION_MARKUP``, 1.35 by default).
- stored figures, typed in by users and kept in ``monthly_projections``.

Whether the markup is business policy or a placeholder for the stored
figures is undecided, so neither path overrides the other.
"""
from __future__ import annotations

from salesboard.models.schemas import (
    MonthlySeries,
    ProjectionReport,
    ProjectionRow,
    ProjectionTotals,
    ServiceBreakdown,
)

from .amounts import coerce_amount
from .period_utils import validate_month
from .store import ProjectionRecord


def estimate_projection(
    revenue: float,
    year_revenue: MonthlySeries,
    month: int,
    markup: float,
) -> tuple[float, float]:
    """(avg_monthly, monthly_target) for one department's month revenue."""
    validate_month(month)
    by_month = year_revenue.by_month()
    average_revenue = sum(by_month[m].total for m in range(1, month + 1)) / month
    if year_revenue.year_total:
        avg_monthly = revenue / year_revenue.year_total * average_revenue
    else:
        avg_monthly = 0.0
    return avg_monthly, revenue * markup


def build_projection_report(
    breakdown: ServiceBreakdown,
    year_revenue: MonthlySeries,
    stored: list[ProjectionRecord],
    departments: dict[int, str],
    markup: float,
) -> ProjectionReport:
    """Combine estimated and stored projections for one month.

    Rows cover every department that has sales in the month or a stored
    projection, ordered by department name.
    """
    actual_by_dept = {s.department_id: s.revenue for s in breakdown.breakdown}
    names = {s.department_id: s.department_name for s in breakdown.breakdown}
    stored_by_dept = {p.department_id: p for p in stored}
    for dept_id in stored_by_dept:
        names.setdefault(dept_id, departments.get(dept_id, f"Department {dept_id}"))

    rows: list[ProjectionRow] = []
    for dept_id in sorted(names, key=lambda d: (names[d], d)):
        actual = actual_by_dept.get(dept_id, 0.0)
        avg_monthly, monthly_target = estimate_projection(actual, year_revenue, breakdown.month, markup)
        record = stored_by_dept.get(dept_id)
        rows.append(
            ProjectionRow(
                department_id=dept_id,
                department_name=names[dept_id],
                actual=actual,
                estimated_avg_monthly=avg_monthly,
                estimated_monthly_target=monthly_target,
                stored_avg_monthly=float(coerce_amount(record.avg_monthly)[0]) if record else None,
                stored_monthly_target=float(coerce_amount(record.monthly_target)[0]) if record else None,
            )
        )

    totals = ProjectionTotals(
        actual=sum(r.actual for r in rows),
        estimated_avg_monthly=sum(r.estimated_avg_monthly for r in rows),
        estimated_monthly_target=sum(r.estimated_monthly_target for r in rows),
        stored_avg_monthly=sum(r.stored_avg_monthly or 0.0 for r in rows),
        stored_monthly_target=sum(r.stored_monthly_target or 0.0 for r in rows),
    )
    return ProjectionReport(
        year=breakdown.year,
        month=breakdown.month,
        markup=markup,
        rows=rows,
        totals=totals,
    )
