from __future__ import annotations

import os

os.environ.setdefault("APP_ENV", "test")

from datetime import date  # noqa: E402
from decimal import Decimal  # noqa: E402

import pytest  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from salesboard.core.config import settings  # noqa: E402
from salesboard.db import session as db_session_module  # noqa: E402
from salesboard.db.base_class import Base  # noqa: E402
from salesboard.db.session import SessionLocal  # noqa: E402
from salesboard.services.dashboard import (  # noqa: E402
    DepartmentDefaultTarget,
    DepartmentRow,
    ExpenseRow,
    ExplicitTarget,
    NoTarget,
    ProjectionRecord,
    SaleRow,
)

TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite:///:memory:")

test_engine = create_engine(
    TEST_DATABASE_URL,
    future=True,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

# Ensure application code uses the test engine
settings.DATABASE_URL = TEST_DATABASE_URL  # type: ignore[attr-defined]
db_session_module.engine = test_engine  # type: ignore[assignment]
SessionLocal.configure(bind=test_engine)


@pytest.fixture(autouse=True)
def _reset_database_state():
    """Ensure each test sees a fresh database schema."""
    Base.metadata.drop_all(bind=test_engine)
    Base.metadata.create_all(bind=test_engine)
    yield


@pytest.fixture
def db_session():
    session = SessionLocal()
    try:
        yield session
        session.commit()
    finally:
        session.close()


from fastapi.testclient import TestClient  # noqa: E402
from salesboard.api.main import app  # noqa: E402


@pytest.fixture
def client():
    return TestClient(app)


class FakeStore:
    """In-memory TransactionStore for exercising the aggregators without a database."""

    def __init__(self):
        self.sales: list[SaleRow] = []
        self.expenses: list[ExpenseRow] = []
        self.department_rows: dict[int, DepartmentRow] = {}
        self.targets: dict[tuple[int, int, int], Decimal] = {}
        self.stored_projections: dict[tuple[int, int], list[ProjectionRecord]] = {}
        self.noi: dict[int, dict[int, Decimal]] = {}

    # --- setup helpers ---
    def add_department(self, dept_id: int, name: str, default_target=None) -> None:
        self.department_rows[dept_id] = DepartmentRow(id=dept_id, name=name, default_target=default_target)

    def add_sale(self, dept_id: int, amount, day: date) -> None:
        name = self.department_rows[dept_id].name
        self.sales.append(SaleRow(department_id=dept_id, department_name=name, amount=amount, date=day))

    def add_expense(self, amount, day: date, category: str = "General") -> None:
        self.expenses.append(ExpenseRow(amount=amount, date=day, category=category))

    # --- TransactionStore ---
    def sale_rows(self, start, end, department_id=None):
        return [
            r for r in self.sales
            if start <= r.date <= end and (department_id is None or r.department_id == department_id)
        ]

    def expense_rows(self, start, end, category=None):
        return [r for r in self.expenses if start <= r.date <= end and (category is None or r.category == category)]

    def departments(self):
        return sorted(self.department_rows.values(), key=lambda d: d.name)

    def resolve_target(self, department_id, year, month):
        if (department_id, year, month) in self.targets:
            return ExplicitTarget(self.targets[(department_id, year, month)])
        dept = self.department_rows.get(department_id)
        if dept is not None and dept.default_target is not None:
            return DepartmentDefaultTarget(Decimal(str(dept.default_target)))
        return NoTarget()

    def projections(self, year, month):
        return list(self.stored_projections.get((year, month), []))

    def noi_by_month(self, year):
        return dict(self.noi.get(year, {}))


@pytest.fixture
def store() -> FakeStore:
    return FakeStore()


@pytest.fixture
def january_store(store) -> FakeStore:
    """Departments A and B with the January 2024 sales used across report tests."""
    store.add_department(1, "A")
    store.add_department(2, "B")
    store.add_sale(1, Decimal("1000"), date(2024, 1, 5))
    store.add_sale(1, Decimal("500"), date(2024, 1, 20))
    store.add_sale(2, Decimal("300"), date(2024, 1, 10))
    return store
