"""
Expense Pydantic schemas for request/response validation.
"""

from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from app.models.expense import ExpenseStatus
from app.schemas.common import PartialUpdate


class ExpenseBase(BaseModel):
    """Base expense schema with common fields."""
    client_id: UUID
    budget_id: Optional[UUID] = None
    vendor_id: Optional[UUID] = None
    amount: Decimal = Field(..., gt=0)
    expense_date: date
    category: Optional[str] = Field(None, max_length=100)
    description: Optional[str] = None
    receipt_url: Optional[str] = None
    status: ExpenseStatus = ExpenseStatus.PENDING


class ExpenseCreate(ExpenseBase):
    """Schema for creating an expense."""
    pass


class ExpenseUpdate(PartialUpdate):
    """Schema for updating an expense (all fields optional)."""
    non_nullable = ("client_id", "amount", "expense_date", "status")

    client_id: Optional[UUID] = None
    budget_id: Optional[UUID] = None
    vendor_id: Optional[UUID] = None
    amount: Optional[Decimal] = Field(None, gt=0)
    expense_date: Optional[date] = None
    category: Optional[str] = Field(None, max_length=100)
    description: Optional[str] = None
    receipt_url: Optional[str] = None
    status: Optional[ExpenseStatus] = None


class ExpenseResponse(ExpenseBase):
    """Schema for expense response."""
    id: UUID
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class ExpenseListResponse(BaseModel):
    """Schema for expense list response."""
    items: List[ExpenseResponse]
    total: int
