"""Dashboard aggregation module.

Turns dated sale and expense rows into the series, breakdowns and
comparisons every report and chart is built from.

Sub-modules:
- period_utils: Month/year boundaries and calendar helpers
- amounts: Amount coercion and zero-safe ratios
- store: TransactionStore protocol and its SQLAlchemy implementation
- targets: Target resolution (explicit, department default, none)
- monthly: Revenue, expense and income series
- breakdown: Revenue per department
- comparison: Month-to-month and year-to-date comparisons
- daily: Per-department daily performance
- projection: Estimated and stored projections
- reporting_service: DashboardService composing the above
"""
from .amounts import coerce_amount, percent_change, percentage
from .breakdown import (
    aggregate_service_breakdown,
    aggregate_yearly_service_breakdown,
    build_service_breakdown,
)
from .comparison import (
    compare_income_year_to_date,
    compare_month_to_month,
    compare_year_to_date,
    comparison_row,
)
from .daily import aggregate_service_daily
from .monthly import (
    aggregate_monthly_expenses,
    aggregate_monthly_income,
    aggregate_monthly_revenue,
    build_monthly_series,
    calculate_monthly_income,
)
from .period_utils import (
    DateRange,
    days_in_month,
    month_name,
    month_range,
    previous_month,
    year_range,
)
from .projection import build_projection_report, estimate_projection
from .reporting_service import DashboardService
from .store import (
    DepartmentRow,
    ExpenseRow,
    ProjectionRecord,
    SaleRow,
    SqlAlchemyTransactionStore,
    TransactionStore,
)
from .targets import DepartmentDefaultTarget, ExplicitTarget, NoTarget, TargetResolution

__all__ = [
    # Calendar
    "DateRange",
    "days_in_month",
    "month_name",
    "month_range",
    "previous_month",
    "year_range",
    # Amounts
    "coerce_amount",
    "percent_change",
    "percentage",
    # Store
    "DepartmentRow",
    "ExpenseRow",
    "ProjectionRecord",
    "SaleRow",
    "SqlAlchemyTransactionStore",
    "TransactionStore",
    # Targets
    "DepartmentDefaultTarget",
    "ExplicitTarget",
    "NoTarget",
    "TargetResolution",
    # Aggregators
    "aggregate_monthly_expenses",
    "aggregate_monthly_income",
    "aggregate_monthly_revenue",
    "build_monthly_series",
    "calculate_monthly_income",
    "aggregate_service_breakdown",
    "aggregate_yearly_service_breakdown",
    "build_service_breakdown",
    "compare_income_year_to_date",
    "compare_month_to_month",
    "compare_year_to_date",
    "comparison_row",
    "aggregate_service_daily",
    "build_projection_report",
    "estimate_projection",
    # Service class
    "DashboardService",
]
