"""Read-only access to transaction rows for the aggregators.

Aggregators only see the ``TransactionStore`` protocol; grouping by month,
day and department happens in Python so bucket assignment depends on each
row's stored date alone. ``SqlAlchemyTransactionStore`` is the production
implementation.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Protocol

from sqlalchemy import select
from sqlalchemy.orm import Session

from salesboard.models.models import NOI, Department, Expense, MonthlyProjection, MonthlyTarget, Sale

from .amounts import coerce_amount
from .targets import DepartmentDefaultTarget, ExplicitTarget, NoTarget, TargetResolution

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SaleRow:
    department_id: int
    department_name: str
    amount: Any  # raw stored value, coerced by the aggregator
    date: date


@dataclass(frozen=True)
class ExpenseRow:
    amount: Any
    date: date
    category: str


@dataclass(frozen=True)
class DepartmentRow:
    id: int
    name: str
    default_target: Any = None


@dataclass(frozen=True)
class ProjectionRecord:
    department_id: int
    avg_monthly: Any
    monthly_target: Any


class TransactionStore(Protocol):
    def sale_rows(self, start: date, end: date, department_id: int | None = None) -> list[SaleRow]:
        ...

    def expense_rows(self, start: date, end: date, category: str | None = None) -> list[ExpenseRow]:
        ...

    def departments(self) -> list[DepartmentRow]:
        ...

    def resolve_target(self, department_id: int, year: int, month: int) -> TargetResolution:
        ...

    def projections(self, year: int, month: int) -> list[ProjectionRecord]:
        ...

    def noi_by_month(self, year: int) -> dict[int, Any]:
        ...


class SqlAlchemyTransactionStore:
    """TransactionStore backed by a SQLAlchemy session."""

    def __init__(self, db: Session):
        self.db = db

    def sale_rows(self, start: date, end: date, department_id: int | None = None) -> list[SaleRow]:
        stmt = (
            select(Sale.department_id, Department.name, Sale.amount, Sale.date)
            .join(Department, Department.id == Sale.department_id)
            .where(Sale.date >= start, Sale.date <= end)
        )
        if department_id is not None:
            stmt = stmt.where(Sale.department_id == department_id)
        return [
            SaleRow(department_id=dept_id, department_name=name, amount=amount, date=day)
            for dept_id, name, amount, day in self.db.execute(stmt).all()
        ]

    def expense_rows(self, start: date, end: date, category: str | None = None) -> list[ExpenseRow]:
        stmt = select(Expense.amount, Expense.date, Expense.category).where(
            Expense.date >= start, Expense.date <= end
        )
        if category is not None:
            stmt = stmt.where(Expense.category == category)
        return [
            ExpenseRow(amount=amount, date=day, category=cat)
            for amount, day, cat in self.db.execute(stmt).all()
        ]

    def departments(self) -> list[DepartmentRow]:
        rows = self.db.execute(
            select(Department.id, Department.name, Department.target).order_by(Department.name)
        ).all()
        return [DepartmentRow(id=i, name=n, default_target=t) for i, n, t in rows]

    def resolve_target(self, department_id: int, year: int, month: int) -> TargetResolution:
        monthly = self.db.scalar(
            select(MonthlyTarget.target_amount).where(
                MonthlyTarget.department_id == department_id,
                MonthlyTarget.year == year,
                MonthlyTarget.month == month,
            )
        )
        if monthly is not None:
            amount, anomalous = coerce_amount(monthly)
            if not anomalous:
                return ExplicitTarget(amount)
            logger.warning("Ignoring unparseable monthly target department=%s %s-%02d", department_id, year, month)

        default = self.db.scalar(select(Department.target).where(Department.id == department_id))
        if default is not None:
            amount, anomalous = coerce_amount(default)
            if not anomalous:
                return DepartmentDefaultTarget(amount)
        return NoTarget()

    def projections(self, year: int, month: int) -> list[ProjectionRecord]:
        rows = self.db.execute(
            select(
                MonthlyProjection.department_id,
                MonthlyProjection.avg_monthly,
                MonthlyProjection.monthly_target,
            ).where(MonthlyProjection.year == year, MonthlyProjection.month == month)
        ).all()
        return [ProjectionRecord(department_id=d, avg_monthly=a, monthly_target=t) for d, a, t in rows]

    def noi_by_month(self, year: int) -> dict[int, Any]:
        rows = self.db.execute(select(NOI.month, NOI.noi_amount).where(NOI.year == year)).all()
        return {month: amount for month, amount in rows if 1 <= month <= 12}
