"""
Pydantic schemas for the record-keeping endpoints.

Sales, expenses, departments, targets, projections and NOI.
"""
from __future__ import annotations

import datetime as dt
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from salesboard.models.models import ExpenseCategory

# Numeric(20, 2) columns hold 18 integer digits
AMOUNT_MAX = Decimal("999999999999999999.99")


class SaleBase(BaseModel):
    department_id: int = Field(..., ge=1)
    amount: Decimal = Field(..., ge=0, le=AMOUNT_MAX, description="Sale amount")
    date: dt.date


class SaleCreate(SaleBase):
    @field_validator("amount")
    @classmethod
    def round_amount(cls, v: Decimal) -> Decimal:
        return round(v, 2)


class SaleUpdate(BaseModel):
    department_id: int | None = Field(None, ge=1)
    amount: Decimal | None = Field(None, ge=0, le=AMOUNT_MAX)
    date: dt.date | None = None


class SaleOut(SaleBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: dt.datetime | None = None


class ExpenseBase(BaseModel):
    description: str = Field(..., min_length=1, max_length=255)
    amount: Decimal = Field(..., ge=0, le=AMOUNT_MAX)
    date: dt.date
    category: ExpenseCategory = ExpenseCategory.GENERAL


class ExpenseCreate(ExpenseBase):
    @field_validator("amount")
    @classmethod
    def round_amount(cls, v: Decimal) -> Decimal:
        return round(v, 2)


class ExpenseUpdate(BaseModel):
    description: str | None = Field(None, min_length=1, max_length=255)
    amount: Decimal | None = Field(None, ge=0, le=AMOUNT_MAX)
    date: dt.date | None = None
    category: ExpenseCategory | None = None


class ExpenseOut(ExpenseBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: dt.datetime | None = None


class DepartmentCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    target: Decimal | None = Field(None, ge=0, description="Default monthly target")

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Department name is required")
        return v


class DepartmentOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str | None = None
    target: Decimal | None = None


class TargetUpsert(BaseModel):
    department_id: int = Field(..., ge=1)
    year: int = Field(..., ge=2000, le=2100)
    month: int = Field(..., ge=1, le=12)
    target_amount: Decimal = Field(..., ge=0)


class TargetMonthIn(BaseModel):
    month: int = Field(..., ge=1, le=12)
    target_amount: Decimal = Field(..., ge=0)


class TargetBulkUpsert(BaseModel):
    department_id: int = Field(..., ge=1)
    year: int = Field(..., ge=2000, le=2100)
    targets: list[TargetMonthIn]


class TargetOut(TargetUpsert):
    model_config = ConfigDict(from_attributes=True)

    id: int


class ProjectionUpsert(BaseModel):
    department_id: int = Field(..., ge=1)
    year: int = Field(..., ge=2000, le=2100)
    month: int = Field(..., ge=1, le=12)
    avg_monthly: Decimal = Field(Decimal("0"), ge=0)
    monthly_target: Decimal = Field(Decimal("0"), ge=0)


class ProjectionDepartmentIn(BaseModel):
    department_id: int = Field(..., ge=1)
    avg_monthly: Decimal = Field(Decimal("0"), ge=0)
    monthly_target: Decimal = Field(Decimal("0"), ge=0)


class ProjectionBulkUpsert(BaseModel):
    year: int = Field(..., ge=2000, le=2100)
    month: int = Field(..., ge=1, le=12)
    projections: list[ProjectionDepartmentIn]


class ProjectionOut(ProjectionUpsert):
    model_config = ConfigDict(from_attributes=True)

    id: int


class NOIUpsert(BaseModel):
    year: int = Field(..., ge=2000, le=2100)
    month: int = Field(..., ge=1, le=12)
    noi_amount: Decimal


class NOIOut(NOIUpsert):
    model_config = ConfigDict(from_attributes=True)

    id: int


class BulkResult(BaseModel):
    count: int
