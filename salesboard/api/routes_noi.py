"""Non-operating income (NOI) endpoints."""
from fastapi import APIRouter, Path
from sqlalchemy import select

from salesboard.api.dependencies import DbDep
from salesboard.models.models import NOI
from salesboard.models.schemas import NOIOut, NOIUpsert

router = APIRouter(prefix="/noi", tags=["noi"])


@router.put("/", response_model=NOIOut)
def upsert_noi(data: NOIUpsert, db: DbDep):
    """Create or replace NOI for a calendar month."""
    noi = db.scalar(select(NOI).where(NOI.year == data.year, NOI.month == data.month))
    if noi is None:
        noi = NOI(year=data.year, month=data.month, noi_amount=data.noi_amount)
        db.add(noi)
    else:
        noi.noi_amount = data.noi_amount
    db.commit()
    db.refresh(noi)
    return noi


@router.get("/{year}", response_model=list[NOIOut])
def list_noi(db: DbDep, year: int = Path(..., ge=2000, le=2100)):
    return db.scalars(select(NOI).where(NOI.year == year).order_by(NOI.month)).all()
