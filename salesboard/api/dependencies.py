"""Common request dependencies."""
from typing import Annotated, TypeAlias

from fastapi import Depends
from sqlalchemy.orm import Session

from salesboard.db.session import get_db
from salesboard.services.dashboard import DashboardService

DbDep: TypeAlias = Annotated[Session, Depends(get_db)]


def get_dashboard_service(db: DbDep) -> DashboardService:
    return DashboardService.from_session(db)


DashboardDep: TypeAlias = Annotated[DashboardService, Depends(get_dashboard_service)]
