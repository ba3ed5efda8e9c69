"""Department endpoints."""
import logging

from fastapi import APIRouter
from sqlalchemy import delete, func, select

from salesboard.api.dependencies import DbDep
from salesboard.core.exceptions import (
    DepartmentInUseError,
    DepartmentNotFoundError,
    DuplicateDepartmentError,
)
from salesboard.models.models import Department, MonthlyProjection, MonthlyTarget, Sale
from salesboard.models.schemas import DepartmentCreate, DepartmentOut

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/departments", tags=["departments"])


@router.post("/", response_model=DepartmentOut, status_code=201)
def create_department(data: DepartmentCreate, db: DbDep):
    if db.scalar(select(Department.id).where(Department.name == data.name)) is not None:
        raise DuplicateDepartmentError(data.name)

    department = Department(name=data.name, description=data.description, target=data.target)
    db.add(department)
    db.commit()
    db.refresh(department)
    logger.info("Created department id=%s name=%s", department.id, department.name)
    return department


@router.get("/", response_model=list[DepartmentOut])
def list_departments(db: DbDep):
    return db.scalars(select(Department).order_by(Department.name)).all()


@router.delete("/{department_id}", status_code=204)
def delete_department(department_id: int, db: DbDep):
    """Delete a department. Refused while any sale references it."""
    department = db.get(Department, department_id)
    if department is None:
        raise DepartmentNotFoundError(department_id)

    sale_count = db.scalar(select(func.count(Sale.id)).where(Sale.department_id == department_id)) or 0
    if sale_count:
        raise DepartmentInUseError(department_id, sale_count)

    db.execute(delete(MonthlyTarget).where(MonthlyTarget.department_id == department_id))
    db.execute(delete(MonthlyProjection).where(MonthlyProjection.department_id == department_id))
    db.delete(department)
    db.commit()
    logger.info("Deleted department id=%s", department_id)
    return None
