"""Month-to-month and year-to-date comparisons."""
from __future__ import annotations

from salesboard.core.exceptions import InvalidArgumentError
from salesboard.models.schemas import (
    ComparisonRow,
    IncomeSeries,
    MonthlySeries,
    MonthToMonthComparison,
    PeriodRef,
    ServiceBreakdown,
    YTDComparison,
    YTDComparisonRow,
    YTDIncomeComparison,
    YTDIncomeRow,
)

from .amounts import percent_change
from .period_utils import validate_month


def comparison_row(label: str, previous: float, current: float) -> ComparisonRow:
    return ComparisonRow(
        label=label,
        previous_value=previous,
        current_value=current,
        difference=current - previous,
        percent_change=percent_change(previous, current),
    )


def compare_month_to_month(current: ServiceBreakdown, previous: ServiceBreakdown) -> MonthToMonthComparison:
    """Compare two service breakdowns department by department.

    Departments are matched by name, and every name seen in either month
    gets a row. Rows are ordered by current revenue, highest first. The
    totals row computes its percent change from the summed totals.
    """
    current_by_name: dict[str, float] = {}
    for share in current.breakdown:
        current_by_name[share.department_name] = current_by_name.get(share.department_name, 0.0) + share.revenue
    previous_by_name: dict[str, float] = {}
    for share in previous.breakdown:
        previous_by_name[share.department_name] = previous_by_name.get(share.department_name, 0.0) + share.revenue

    names = sorted(set(current_by_name) | set(previous_by_name))
    rows = [
        comparison_row(name, previous_by_name.get(name, 0.0), current_by_name.get(name, 0.0))
        for name in names
    ]
    rows.sort(key=lambda r: r.current_value, reverse=True)

    totals = comparison_row(
        "Total",
        sum(r.previous_value for r in rows),
        sum(r.current_value for r in rows),
    )
    return MonthToMonthComparison(
        current_period=PeriodRef(year=current.year, month=current.month),
        previous_period=PeriodRef(year=previous.year, month=previous.month),
        rows=rows,
        totals=totals,
    )


def _through(through_month: int | None) -> int:
    if through_month is None:
        return 12
    return validate_month(through_month)


def compare_year_to_date(
    current: MonthlySeries,
    previous: MonthlySeries,
    through_month: int | None = None,
) -> YTDComparison:
    """Month-by-month comparison of two yearly series.

    With ``through_month`` set only months 1..N are compared and totalled,
    so a partial current year is measured against the same span last year.
    """
    if previous.year >= current.year:
        raise InvalidArgumentError("previous", previous.year, f"must precede {current.year}")
    last = _through(through_month)
    current_by_month = current.by_month()
    previous_by_month = previous.by_month()

    rows: list[YTDComparisonRow] = []
    for m in range(1, last + 1):
        cur = current_by_month[m]
        prev = previous_by_month[m]
        base = comparison_row(cur.month_name, prev.total, cur.total)
        rows.append(YTDComparisonRow(month=m, month_name=cur.month_name, **base.model_dump()))

    current_total = sum(r.current_value for r in rows)
    previous_total = sum(r.previous_value for r in rows)
    return YTDComparison(
        year=current.year,
        through_month=last,
        rows=rows,
        current_year_total=current_total,
        previous_year_total=previous_total,
        variance=current_total - previous_total,
        percent_change=percent_change(previous_total, current_total),
    )


def compare_income_year_to_date(
    current: IncomeSeries,
    previous: IncomeSeries,
    through_month: int | None = None,
) -> YTDIncomeComparison:
    """Year-to-date comparison of income, with NOI reported beside it."""
    if previous.year >= current.year:
        raise InvalidArgumentError("previous", previous.year, f"must precede {current.year}")
    last = _through(through_month)
    current_by_month = current.by_month()
    previous_by_month = previous.by_month()

    rows: list[YTDIncomeRow] = []
    for m in range(1, last + 1):
        cur = current_by_month[m]
        prev = previous_by_month[m]
        base = comparison_row(cur.month_name, prev.income, cur.income)
        rows.append(
            YTDIncomeRow(
                month=m,
                month_name=cur.month_name,
                current_noi=cur.noi,
                previous_noi=prev.noi,
                noi_variance=cur.noi - prev.noi,
                **base.model_dump(),
            )
        )

    current_total = sum(r.current_value for r in rows)
    previous_total = sum(r.previous_value for r in rows)
    current_noi = sum(r.current_noi for r in rows)
    previous_noi = sum(r.previous_noi for r in rows)
    return YTDIncomeComparison(
        year=current.year,
        through_month=last,
        rows=rows,
        current_year_total=current_total,
        previous_year_total=previous_total,
        variance=current_total - previous_total,
        percent_change=percent_change(previous_total, current_total),
        current_year_total_noi=current_noi,
        previous_year_total_noi=previous_noi,
        total_noi_variance=current_noi - previous_noi,
    )
