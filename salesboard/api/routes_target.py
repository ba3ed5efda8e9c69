"""
Monthly target endpoints.

A stored target for (department, year, month) takes precedence over the
department's default target in the daily performance report.
"""
import logging

from fastapi import APIRouter, Path
from sqlalchemy import select
from sqlalchemy.orm import Session

from salesboard.api.dependencies import DbDep
from salesboard.core.exceptions import DepartmentNotFoundError, RecordNotFoundError
from salesboard.models.models import Department, MonthlyTarget
from salesboard.models.schemas import BulkResult, TargetBulkUpsert, TargetOut, TargetUpsert

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/targets", tags=["targets"])


def _upsert_target(db: Session, department_id: int, year: int, month: int, amount) -> MonthlyTarget:
    target = db.scalar(
        select(MonthlyTarget).where(
            MonthlyTarget.department_id == department_id,
            MonthlyTarget.year == year,
            MonthlyTarget.month == month,
        )
    )
    if target is None:
        target = MonthlyTarget(department_id=department_id, year=year, month=month, target_amount=amount)
        db.add(target)
        # Later entries for the same month must find this row
        db.flush()
    else:
        target.target_amount = amount
    return target


@router.put("/", response_model=TargetOut)
def upsert_target(data: TargetUpsert, db: DbDep):
    """Create or replace the target for one department and month."""
    if db.get(Department, data.department_id) is None:
        raise DepartmentNotFoundError(data.department_id)
    target = _upsert_target(db, data.department_id, data.year, data.month, data.target_amount)
    db.commit()
    db.refresh(target)
    return target


@router.put("/bulk", response_model=BulkResult)
def bulk_upsert_targets(data: TargetBulkUpsert, db: DbDep):
    """Set several months of one department's targets in one transaction."""
    if db.get(Department, data.department_id) is None:
        raise DepartmentNotFoundError(data.department_id)
    for item in data.targets:
        _upsert_target(db, data.department_id, data.year, item.month, item.target_amount)
    db.commit()
    logger.info("Upserted %d targets for department=%s year=%s", len(data.targets), data.department_id, data.year)
    return BulkResult(count=len(data.targets))


@router.get("/{department_id}/{year}/{month}", response_model=TargetOut)
def get_target(
    db: DbDep,
    department_id: int = Path(..., ge=1),
    year: int = Path(..., ge=2000, le=2100),
    month: int = Path(..., ge=1, le=12),
):
    target = db.scalar(
        select(MonthlyTarget).where(
            MonthlyTarget.department_id == department_id,
            MonthlyTarget.year == year,
            MonthlyTarget.month == month,
        )
    )
    if target is None:
        raise RecordNotFoundError("MonthlyTarget", department_id)
    return target
