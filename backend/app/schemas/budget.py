"""
Budget Pydantic schemas for request/response validation.
"""

from pydantic import BaseModel, Field, model_validator
from typing import Optional, List
from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from app.models.budget import BudgetPeriod
from app.schemas.common import PartialUpdate


class BudgetBase(BaseModel):
    """Base budget schema with common fields."""
    client_id: UUID
    name: str = Field(..., min_length=1, max_length=255)
    amount: Decimal = Field(..., gt=0)
    period: BudgetPeriod = BudgetPeriod.MONTHLY
    start_date: date
    end_date: date
    category: Optional[str] = Field(None, max_length=100)
    description: Optional[str] = None


class BudgetCreate(BudgetBase):
    """Schema for creating a budget."""

    @model_validator(mode="after")
    def check_date_range(self):
        if self.end_date < self.start_date:
            raise ValueError("end_date must be on or after start_date")
        return self


class BudgetUpdate(PartialUpdate):
    """Schema for updating a budget (all fields optional)."""
    non_nullable = ("client_id", "name", "amount", "period", "start_date", "end_date", "spent_amount")

    client_id: Optional[UUID] = None
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    amount: Optional[Decimal] = Field(None, gt=0)
    period: Optional[BudgetPeriod] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    category: Optional[str] = Field(None, max_length=100)
    description: Optional[str] = None
    spent_amount: Optional[Decimal] = Field(None, ge=0)


class BudgetResponse(BudgetBase):
    """Schema for budget response."""
    id: UUID
    spent_amount: Decimal = Decimal("0")
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class BudgetListResponse(BaseModel):
    """Schema for budget list response."""
    items: List[BudgetResponse]
    total: int
