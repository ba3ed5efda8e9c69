"""Dashboard Reporting Service.

Composes the aggregators into the reports served by the API. The service
holds no state beyond its store; every call recomputes from source rows.
"""
import logging
from datetime import date, datetime, timezone
from typing import Optional

from sqlalchemy.orm import Session

from salesboard import metrics
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

from .breakdown import aggregate_service_breakdown, aggregate_yearly_service_breakdown
from .comparison import compare_income_year_to_date, compare_month_to_month, compare_year_to_date
from .daily import aggregate_service_daily
from .monthly import aggregate_monthly_expenses, aggregate_monthly_income, aggregate_monthly_revenue
from .period_utils import previous_month
from .projection import build_projection_report
from .store import SqlAlchemyTransactionStore, TransactionStore

logger = logging.getLogger(__name__)


class DashboardService:
    """Service for building dashboard reports.

    Responsibilities:
    - Monthly revenue / expense / income series
    - Service breakdowns (monthly and yearly)
    - Month-to-month and year-to-date comparisons
    - Per-department daily performance
    - Projection report (estimated and stored)
    """

    def __init__(self, store: TransactionStore):
        self.store = store

    @classmethod
    def from_session(cls, db: Session) -> "DashboardService":
        return cls(SqlAlchemyTransactionStore(db))

    def monthly_revenue(self, year: int, department_id: Optional[int] = None) -> MonthlySeries:
        with metrics.report_timer("monthly_revenue"):
            series = aggregate_monthly_revenue(self.store, year, department_id=department_id)
        metrics.amount_anomalies(series.anomaly_count)
        return series

    def monthly_expenses(self, year: int, category: Optional[str] = None) -> MonthlySeries:
        with metrics.report_timer("monthly_expenses"):
            series = aggregate_monthly_expenses(self.store, year, category=category)
        metrics.amount_anomalies(series.anomaly_count)
        return series

    def monthly_income(self, year: int) -> IncomeSeries:
        with metrics.report_timer("monthly_income"):
            return aggregate_monthly_income(self.store, year)

    def service_breakdown(
        self,
        year: int,
        month: int,
        department_id: Optional[int] = None,
    ) -> ServiceBreakdown:
        with metrics.report_timer("service_breakdown"):
            breakdown = aggregate_service_breakdown(self.store, year, month, department_id=department_id)
        metrics.amount_anomalies(breakdown.anomaly_count)
        return breakdown

    def yearly_service_breakdown(self, year: int) -> YearlyServiceBreakdown:
        with metrics.report_timer("yearly_service_breakdown"):
            return aggregate_yearly_service_breakdown(self.store, year)

    def month_to_month(self, year: int, month: int) -> MonthToMonthComparison:
        """Compare a month with the calendar month before it."""
        prev_year, prev_month = previous_month(year, month)
        with metrics.report_timer("month_to_month"):
            current = aggregate_service_breakdown(self.store, year, month)
            previous = aggregate_service_breakdown(self.store, prev_year, prev_month)
            return compare_month_to_month(current, previous)

    def ytd_sales(self, year: int, through_month: Optional[int] = None) -> YTDComparison:
        with metrics.report_timer("ytd_sales"):
            current = aggregate_monthly_revenue(self.store, year)
            previous = aggregate_monthly_revenue(self.store, year - 1)
            return compare_year_to_date(current, previous, through_month=through_month)

    def ytd_income(self, year: int, through_month: Optional[int] = None) -> YTDIncomeComparison:
        with metrics.report_timer("ytd_income"):
            current = aggregate_monthly_income(self.store, year)
            previous = aggregate_monthly_income(self.store, year - 1)
            return compare_income_year_to_date(current, previous, through_month=through_month)

    def service_daily(
        self,
        department_id: int,
        display_year: int,
        display_month: int,
        target_year: Optional[int] = None,
        target_month: Optional[int] = None,
    ) -> ServiceDailyReport:
        with metrics.report_timer("service_daily"):
            report = aggregate_service_daily(
                self.store,
                department_id,
                display_year,
                display_month,
                target_year=target_year,
                target_month=target_month,
            )
        if report.target_source == "none":
            logger.info("Daily report for department=%s has no target on record", department_id)
        return report

    def projection_report(self, year: int, month: int, markup: Optional[float] = None) -> ProjectionReport:
        markup = settings.PROJECTION_MARKUP if markup is None else markup
        with metrics.report_timer("projection"):
            breakdown = aggregate_service_breakdown(self.store, year, month)
            year_revenue = aggregate_monthly_revenue(self.store, year)
            departments = {d.id: d.name for d in self.store.departments()}
            return build_projection_report(
                breakdown,
                year_revenue,
                self.store.projections(year, month),
                departments,
                markup,
            )

    def main_dashboard(self, year: Optional[int] = None, month: Optional[int] = None) -> MainDashboard:
        """Everything the landing dashboard shows, for ``year``/``month``.

        Defaults to today's month. YTD comparisons run through ``month``.
        """
        today = date.today()
        year = year or today.year
        month = month or today.month
        logger.info("Building main dashboard for %s-%02d", year, month)

        return MainDashboard(
            year=year,
            month=month,
            monthly_revenue=self.monthly_revenue(year),
            monthly_income=self.monthly_income(year),
            service_breakdown=self.service_breakdown(year, month),
            month_to_month=self.month_to_month(year, month),
            ytd_sales=self.ytd_sales(year, through_month=month),
            ytd_income=self.ytd_income(year, through_month=month),
            last_updated=datetime.now(timezone.utc),
        )
