"""
Expense record endpoints.

Expenses feed the monthly expense and income series; they are not tied to a
department.
"""
from datetime import date, datetime, timezone

from fastapi import APIRouter, Query

from salesboard.api.dependencies import DbDep
from salesboard.core.exceptions import RecordNotFoundError
from salesboard.models.models import Expense, ExpenseCategory
from salesboard.models.schemas import ExpenseCreate, ExpenseOut, ExpenseUpdate

router = APIRouter(prefix="/expenses", tags=["expenses"])


def _get_expense_or_404(db, expense_id: int) -> Expense:
    expense = db.get(Expense, expense_id)
    if not expense:
        raise RecordNotFoundError("Expense", expense_id)
    return expense


@router.post("/", response_model=ExpenseOut, status_code=201)
def create_expense(data: ExpenseCreate, db: DbDep):
    expense = Expense(
        description=data.description,
        amount=data.amount,
        date=data.date,
        category=data.category.value,
    )
    db.add(expense)
    db.commit()
    db.refresh(expense)
    return expense


@router.get("/", response_model=list[ExpenseOut])
def list_expenses(
    db: DbDep,
    start_date: date | None = Query(None, description="Filter by start date (inclusive)"),
    end_date: date | None = Query(None, description="Filter by end date (inclusive)"),
    category: ExpenseCategory | None = Query(None, description="Filter by category"),
    limit: int = Query(100, ge=1, le=500, description="Max results to return"),
    offset: int = Query(0, ge=0, description="Number of results to skip"),
):
    """
    List expenses with optional filters.

    Returns expenses sorted by date (most recent first).
    """
    q = db.query(Expense)
    if start_date:
        q = q.filter(Expense.date >= start_date)
    if end_date:
        q = q.filter(Expense.date <= end_date)
    if category:
        q = q.filter(Expense.category == category.value)

    q = q.order_by(Expense.date.desc(), Expense.id.desc())
    return q.limit(limit).offset(offset).all()


@router.get("/{expense_id}", response_model=ExpenseOut)
def get_expense(expense_id: int, db: DbDep):
    return _get_expense_or_404(db, expense_id)


@router.put("/{expense_id}", response_model=ExpenseOut)
def update_expense(expense_id: int, data: ExpenseUpdate, db: DbDep):
    expense = _get_expense_or_404(db, expense_id)

    update_data = data.model_dump(exclude_unset=True)
    if update_data.get("category") is not None:
        update_data["category"] = update_data["category"].value
    for field, value in update_data.items():
        if value is not None:
            setattr(expense, field, value)
    expense.updated_at = datetime.now(timezone.utc)

    db.commit()
    db.refresh(expense)
    return expense


@router.delete("/{expense_id}", status_code=204)
def delete_expense(expense_id: int, db: DbDep):
    expense = _get_expense_or_404(db, expense_id)
    db.delete(expense)
    db.commit()
    return None
