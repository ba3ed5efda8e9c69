"""
Sale record endpoints.

Each sale belongs to one department and is bucketed by its stored date.
"""
from datetime import date, datetime, timezone

from fastapi import APIRouter, Query

from salesboard.api.dependencies import DbDep
from salesboard.core.exceptions import DepartmentNotFoundError, RecordNotFoundError
from salesboard.models.models import Department, Sale
from salesboard.models.schemas import SaleCreate, SaleOut, SaleUpdate

router = APIRouter(prefix="/sales", tags=["sales"])


def _require_department(db, department_id: int) -> None:
    if db.get(Department, department_id) is None:
        raise DepartmentNotFoundError(department_id)


def _get_sale_or_404(db, sale_id: int) -> Sale:
    sale = db.get(Sale, sale_id)
    if not sale:
        raise RecordNotFoundError("Sale", sale_id)
    return sale


@router.post("/", response_model=SaleOut, status_code=201)
def create_sale(data: SaleCreate, db: DbDep):
    _require_department(db, data.department_id)
    sale = Sale(department_id=data.department_id, amount=data.amount, date=data.date)
    db.add(sale)
    db.commit()
    db.refresh(sale)
    return sale


@router.get("/", response_model=list[SaleOut])
def list_sales(
    db: DbDep,
    start_date: date | None = Query(None, description="Filter by start date (inclusive)"),
    end_date: date | None = Query(None, description="Filter by end date (inclusive)"),
    department_id: int | None = Query(None, ge=1, description="Filter by department"),
    limit: int = Query(100, ge=1, le=500),
    offset: int = Query(0, ge=0),
):
    """List sales, most recent first."""
    q = db.query(Sale)
    if start_date:
        q = q.filter(Sale.date >= start_date)
    if end_date:
        q = q.filter(Sale.date <= end_date)
    if department_id:
        q = q.filter(Sale.department_id == department_id)

    q = q.order_by(Sale.date.desc(), Sale.id.desc())
    return q.limit(limit).offset(offset).all()


@router.get("/{sale_id}", response_model=SaleOut)
def get_sale(sale_id: int, db: DbDep):
    return _get_sale_or_404(db, sale_id)


@router.put("/{sale_id}", response_model=SaleOut)
def update_sale(sale_id: int, data: SaleUpdate, db: DbDep):
    sale = _get_sale_or_404(db, sale_id)

    update_data = {k: v for k, v in data.model_dump(exclude_unset=True).items() if v is not None}
    if "department_id" in update_data:
        _require_department(db, update_data["department_id"])
    for field, value in update_data.items():
        setattr(sale, field, value)
    sale.updated_at = datetime.now(timezone.utc)

    db.commit()
    db.refresh(sale)
    return sale


@router.delete("/{sale_id}", status_code=204)
def delete_sale(sale_id: int, db: DbDep):
    sale = _get_sale_or_404(db, sale_id)
    db.delete(sale)
    db.commit()
    return None
