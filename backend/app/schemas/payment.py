"""
Payment Pydantic schemas for request/response validation.
"""

from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from app.models.payment import PaymentMethod, PaymentStatus
from app.schemas.common import PartialUpdate


class PaymentBase(BaseModel):
    """Base payment schema with common fields."""
    client_id: UUID
    budget_id: Optional[UUID] = None
    amount: Decimal = Field(..., gt=0)
    payment_date: date
    payment_method: PaymentMethod = PaymentMethod.BANK_TRANSFER
    status: PaymentStatus = PaymentStatus.PENDING
    description: Optional[str] = None
    reference_number: Optional[str] = Field(None, max_length=100)


class PaymentCreate(PaymentBase):
    """Schema for creating a payment."""
    pass


class PaymentUpdate(PartialUpdate):
    """Schema for updating a payment (all fields optional)."""
    non_nullable = ("client_id", "amount", "payment_date", "payment_method", "status")

    client_id: Optional[UUID] = None
    budget_id: Optional[UUID] = None
    amount: Optional[Decimal] = Field(None, gt=0)
    payment_date: Optional[date] = None
    payment_method: Optional[PaymentMethod] = None
    status: Optional[PaymentStatus] = None
    description: Optional[str] = None
    reference_number: Optional[str] = Field(None, max_length=100)


class PaymentResponse(PaymentBase):
    """Schema for payment response."""
    id: UUID
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class PaymentListResponse(BaseModel):
    """Schema for payment list response."""
    items: List[PaymentResponse]
    total: int
