"""Dashboard report schemas.

Every series is fully shaped: monthly series always carry 12 months and
daily breakdowns one entry per calendar day, so chart code never needs to
guard against missing periods.
"""
from __future__ import annotations

import datetime as dt
from typing import Literal

from pydantic import BaseModel, model_validator

TargetSourceType = Literal["monthly", "department", "none"]


class MonthTotal(BaseModel):
    """One calendar month of a yearly series."""
    month: int  # 1-12
    month_name: str
    total: float


class MonthlySeries(BaseModel):
    """Sales or expense totals for each month of a year."""
    year: int
    months: list[MonthTotal]
    year_total: float
    anomaly_count: int = 0  # Rows whose amount could not be parsed

    @model_validator(mode="after")
    def _every_month_once(self) -> MonthlySeries:
        if sorted(m.month for m in self.months) != list(range(1, 13)):
            raise ValueError("months must contain each of 1-12 exactly once")
        return self

    def by_month(self) -> dict[int, MonthTotal]:
        return {m.month: m for m in self.months}


class IncomeMonth(BaseModel):
    month: int
    month_name: str
    revenue: float
    expenses: float
    income: float  # revenue - expenses
    noi: float = 0.0
    adjusted_income: float  # income + noi


class IncomeSeries(BaseModel):
    year: int
    months: list[IncomeMonth]
    year_total: float
    noi_total: float = 0.0
    adjusted_year_total: float

    def by_month(self) -> dict[int, IncomeMonth]:
        return {m.month: m for m in self.months}


class ServiceShare(BaseModel):
    department_id: int
    department_name: str
    revenue: float
    percentage: float  # Share of total_revenue, one decimal


class ServiceBreakdown(BaseModel):
    """Revenue per department for one month. Departments without sales are omitted."""
    year: int
    month: int
    breakdown: list[ServiceShare]
    total_revenue: float
    anomaly_count: int = 0


class YearlyServiceMonth(BaseModel):
    month: int
    month_name: str
    total: float
    services: dict[str, float]  # department name -> revenue


class YearlyServiceBreakdown(BaseModel):
    year: int
    months: list[YearlyServiceMonth]
    departments: list[str]


class ComparisonRow(BaseModel):
    """Current vs previous period for a single label."""
    label: str
    previous_value: float
    current_value: float
    difference: float
    percent_change: float


class PeriodRef(BaseModel):
    year: int
    month: int


class MonthToMonthComparison(BaseModel):
    current_period: PeriodRef
    previous_period: PeriodRef
    rows: list[ComparisonRow]
    totals: ComparisonRow


class YTDComparisonRow(ComparisonRow):
    month: int
    month_name: str


class YTDComparison(BaseModel):
    year: int
    through_month: int
    rows: list[YTDComparisonRow]
    current_year_total: float
    previous_year_total: float
    variance: float
    percent_change: float


class YTDIncomeRow(YTDComparisonRow):
    current_noi: float
    previous_noi: float
    noi_variance: float


class YTDIncomeComparison(BaseModel):
    year: int
    through_month: int
    rows: list[YTDIncomeRow]
    current_year_total: float
    previous_year_total: float
    variance: float
    percent_change: float
    current_year_total_noi: float
    previous_year_total_noi: float
    total_noi_variance: float


class DailyEntry(BaseModel):
    day: int
    sales: float
    target: float
    variance: float  # sales - target
    cumulative_sales: float
    cumulative_target: float


class DailyStats(BaseModel):
    total_sales: float
    target: float
    percent_of_target: float
    difference: float


class ServiceDailyReport(BaseModel):
    department_id: int
    department_name: str
    display_year: int
    display_month: int
    target_year: int
    target_month: int
    # "none" means no explicit or default target exists; the basis is then the
    # target month's actual sales and the UI should say so.
    target_source: TargetSourceType
    daily_target: float
    stats: DailyStats
    daily_breakdown: list[DailyEntry]


class ProjectionRow(BaseModel):
    department_id: int
    department_name: str
    actual: float
    # Heuristic path: derived from actual revenue
    estimated_avg_monthly: float
    estimated_monthly_target: float
    # Stored path: user-edited figures, None when never saved
    stored_avg_monthly: float | None = None
    stored_monthly_target: float | None = None


class ProjectionTotals(BaseModel):
    actual: float
    estimated_avg_monthly: float
    estimated_monthly_target: float
    stored_avg_monthly: float
    stored_monthly_target: float


class ProjectionReport(BaseModel):
    year: int
    month: int
    markup: float
    rows: list[ProjectionRow]
    totals: ProjectionTotals


class MainDashboard(BaseModel):
    year: int
    month: int
    monthly_revenue: MonthlySeries
    monthly_income: IncomeSeries
    service_breakdown: ServiceBreakdown
    month_to_month: MonthToMonthComparison
    ytd_sales: YTDComparison
    ytd_income: YTDIncomeComparison
    last_updated: dt.datetime
