"""
Dashboard report endpoints.

Every endpoint recomputes from stored sales and expenses; nothing is cached.
"""
from __future__ import annotations

import logging

from fastapi import APIRouter, Path, Query

from salesboard.api.dependencies import DashboardDep
from salesboard.core.config import settings
from salesboard.models.schemas import (
    IncomeSeries,
    MainDashboard,
    MonthlySeries,
    MonthToMonthComparison,
    ProjectionReport,
    ServiceBreakdown,
    ServiceDailyReport,
    YearlyServiceBreakdown,
    YTDComparison,
    YTDIncomeComparison,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/dashboard", tags=["dashboard"])

YEAR_MIN = settings.REPORT_MIN_YEAR
YEAR_MAX = settings.REPORT_MAX_YEAR


@router.get("", response_model=MainDashboard)
def main_dashboard(
    service: DashboardDep,
    year: int | None = Query(None, ge=YEAR_MIN, le=YEAR_MAX, description="Defaults to current year"),
    month: int | None = Query(None, ge=1, le=12, description="Defaults to current month"),
):
    """Landing dashboard: series, breakdown and comparisons for one month."""
    return service.main_dashboard(year, month)


@router.get("/services", response_model=ServiceDailyReport)
def services_daily(
    service: DashboardDep,
    department_id: int = Query(..., ge=1),
    year: int = Query(..., ge=YEAR_MIN, le=YEAR_MAX, description="Display year"),
    month: int = Query(..., ge=1, le=12, description="Display month"),
    target_year: int | None = Query(None, ge=YEAR_MIN, le=YEAR_MAX),
    target_month: int | None = Query(None, ge=1, le=12),
):
    """
    Daily sales for one department against a daily target.

    The target month defaults to the display month. Passing a different
    target month compares this month against last month's basis, etc.
    """
    return service.service_daily(
        department_id,
        year,
        month,
        target_year=target_year,
        target_month=target_month,
    )


@router.get("/revenue/{year}", response_model=MonthlySeries)
def monthly_revenue(
    service: DashboardDep,
    year: int = Path(..., ge=YEAR_MIN, le=YEAR_MAX),
    department_id: int | None = Query(None, ge=1),
):
    return service.monthly_revenue(year, department_id=department_id)


@router.get("/expenses/{year}", response_model=MonthlySeries)
def monthly_expenses(
    service: DashboardDep,
    year: int = Path(..., ge=YEAR_MIN, le=YEAR_MAX),
    category: str | None = Query(None, description="Filter by category"),
):
    return service.monthly_expenses(year, category=category)


@router.get("/income/{year}", response_model=IncomeSeries)
def monthly_income(service: DashboardDep, year: int = Path(..., ge=YEAR_MIN, le=YEAR_MAX)):
    return service.monthly_income(year)


@router.get("/breakdown/{year}/{month}", response_model=ServiceBreakdown)
def service_breakdown(
    service: DashboardDep,
    year: int = Path(..., ge=YEAR_MIN, le=YEAR_MAX),
    month: int = Path(..., ge=1, le=12),
    department_id: int | None = Query(None, ge=1),
):
    return service.service_breakdown(year, month, department_id=department_id)


@router.get("/yearly-breakdown/{year}", response_model=YearlyServiceBreakdown)
def yearly_service_breakdown(service: DashboardDep, year: int = Path(..., ge=YEAR_MIN, le=YEAR_MAX)):
    return service.yearly_service_breakdown(year)


@router.get("/comparison/month-to-month", response_model=MonthToMonthComparison)
def month_to_month(
    service: DashboardDep,
    year: int = Query(..., ge=YEAR_MIN, le=YEAR_MAX),
    month: int = Query(..., ge=1, le=12),
):
    """Compare a month with the calendar month before it (January vs previous December)."""
    return service.month_to_month(year, month)


@router.get("/comparison/ytd-sales", response_model=YTDComparison)
def ytd_sales(
    service: DashboardDep,
    year: int = Query(..., ge=YEAR_MIN, le=YEAR_MAX),
    through_month: int | None = Query(None, ge=1, le=12),
):
    return service.ytd_sales(year, through_month=through_month)


@router.get("/comparison/ytd-income", response_model=YTDIncomeComparison)
def ytd_income(
    service: DashboardDep,
    year: int = Query(..., ge=YEAR_MIN, le=YEAR_MAX),
    through_month: int | None = Query(None, ge=1, le=12),
):
    return service.ytd_income(year, through_month=through_month)


@router.get("/projections/{year}/{month}", response_model=ProjectionReport)
def projection_report(
    service: DashboardDep,
    year: int = Path(..., ge=YEAR_MIN, le=YEAR_MAX),
    month: int = Path(..., ge=1, le=12),
):
    """Estimated projections next to the stored ones for the month."""
    return service.projection_report(year, month)
