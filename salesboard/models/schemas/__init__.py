"""Pydantic schemas for API requests and responses.

Sub-modules:
- dashboard: Derived report structures (series, breakdowns, comparisons)
- records: Sales, expenses, departments, targets, projections, NOI
"""
# Dashboard schemas
from .dashboard import (
    MonthTotal,
    MonthlySeries,
    IncomeMonth,
    IncomeSeries,
    ServiceShare,
    ServiceBreakdown,
    YearlyServiceMonth,
    YearlyServiceBreakdown,
    ComparisonRow,
    PeriodRef,
    MonthToMonthComparison,
    YTDComparisonRow,
    YTDComparison,
    YTDIncomeRow,
    YTDIncomeComparison,
    DailyEntry,
    DailyStats,
    ServiceDailyReport,
    ProjectionRow,
    ProjectionTotals,
    ProjectionReport,
    MainDashboard,
)

# Record schemas
from .records import (
    SaleCreate,
    SaleUpdate,
    SaleOut,
    ExpenseCreate,
    ExpenseUpdate,
    ExpenseOut,
    DepartmentCreate,
    DepartmentOut,
    TargetUpsert,
    TargetMonthIn,
    TargetBulkUpsert,
    TargetOut,
    ProjectionUpsert,
    ProjectionDepartmentIn,
    ProjectionBulkUpsert,
    ProjectionOut,
    NOIUpsert,
    NOIOut,
    BulkResult,
)

__all__ = [
    # Dashboard
    "MonthTotal",
    "MonthlySeries",
    "IncomeMonth",
    "IncomeSeries",
    "ServiceShare",
    "ServiceBreakdown",
    "YearlyServiceMonth",
    "YearlyServiceBreakdown",
    "ComparisonRow",
    "PeriodRef",
    "MonthToMonthComparison",
    "YTDComparisonRow",
    "YTDComparison",
    "YTDIncomeRow",
    "YTDIncomeComparison",
    "DailyEntry",
    "DailyStats",
    "ServiceDailyReport",
    "ProjectionRow",
    "ProjectionTotals",
    "ProjectionReport",
    "MainDashboard",
    # Records
    "SaleCreate",
    "SaleUpdate",
    "SaleOut",
    "ExpenseCreate",
    "ExpenseUpdate",
    "ExpenseOut",
    "DepartmentCreate",
    "DepartmentOut",
    "TargetUpsert",
    "TargetMonthIn",
    "TargetBulkUpsert",
    "TargetOut",
    "ProjectionUpsert",
    "ProjectionDepartmentIn",
    "ProjectionBulkUpsert",
    "ProjectionOut",
    "NOIUpsert",
    "NOIOut",
    "BulkResult",
]
