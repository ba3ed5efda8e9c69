"""
Stored projection endpoints.

These rows hold figures typed in by users. The estimated projection in the
dashboard report is computed separately and never written here.
"""
import logging

from fastapi import APIRouter, Path
from sqlalchemy import select
from sqlalchemy.orm import Session

from salesboard.api.dependencies import DbDep
from salesboard.core.exceptions import DepartmentNotFoundError
from salesboard.models.models import Department, MonthlyProjection
from salesboard.models.schemas import (
    BulkResult,
    ProjectionBulkUpsert,
    ProjectionOut,
    ProjectionUpsert,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/projections", tags=["projections"])


def _upsert_projection(db: Session, department_id: int, year: int, month: int, avg_monthly, monthly_target):
    if db.get(Department, department_id) is None:
        raise DepartmentNotFoundError(department_id)
    projection = db.scalar(
        select(MonthlyProjection).where(
            MonthlyProjection.department_id == department_id,
            MonthlyProjection.year == year,
            MonthlyProjection.month == month,
        )
    )
    if projection is None:
        projection = MonthlyProjection(
            department_id=department_id,
            year=year,
            month=month,
            avg_monthly=avg_monthly,
            monthly_target=monthly_target,
        )
        db.add(projection)
        db.flush()
    else:
        projection.avg_monthly = avg_monthly
        projection.monthly_target = monthly_target
    return projection


@router.put("/", response_model=ProjectionOut)
def upsert_projection(data: ProjectionUpsert, db: DbDep):
    projection = _upsert_projection(
        db, data.department_id, data.year, data.month, data.avg_monthly, data.monthly_target
    )
    db.commit()
    db.refresh(projection)
    return projection


@router.put("/bulk", response_model=BulkResult)
def bulk_upsert_projections(data: ProjectionBulkUpsert, db: DbDep):
    """Save every department's projection for one month; all or nothing."""
    try:
        for item in data.projections:
            _upsert_projection(db, item.department_id, data.year, data.month, item.avg_monthly, item.monthly_target)
    except DepartmentNotFoundError:
        db.rollback()
        raise
    db.commit()
    logger.info("Upserted %d projections for %s-%02d", len(data.projections), data.year, data.month)
    return BulkResult(count=len(data.projections))


@router.get("/{year}/{month}", response_model=list[ProjectionOut])
def list_projections(
    db: DbDep,
    year: int = Path(..., ge=2000, le=2100),
    month: int = Path(..., ge=1, le=12),
):
    return db.scalars(
        select(MonthlyProjection)
        .where(MonthlyProjection.year == year, MonthlyProjection.month == month)
        .order_by(MonthlyProjection.department_id)
    ).all()
