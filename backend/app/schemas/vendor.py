"""
Vendor Pydantic schemas for request/response validation.
"""

from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime
from uuid import UUID

from app.models.vendor import VendorStatus
from app.schemas.common import PartialUpdate


class VendorBase(BaseModel):
    """Base vendor schema with common fields."""
    name: str = Field(..., min_length=1, max_length=255)
    contact_person: Optional[str] = Field(None, max_length=255)
    email: Optional[str] = Field(None, max_length=255)
    phone: Optional[str] = Field(None, max_length=50)
    address: Optional[str] = None
    website: Optional[str] = None
    tax_id: Optional[str] = Field(None, max_length=100)
    payment_terms: Optional[str] = Field(None, max_length=100)
    category: Optional[str] = Field(None, max_length=100)
    status: VendorStatus = VendorStatus.ACTIVE


class VendorCreate(VendorBase):
    """Schema for creating a vendor."""
    pass


class VendorUpdate(PartialUpdate):
    """Schema for updating a vendor (all fields optional)."""
    non_nullable = ("name", "status")

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    contact_person: Optional[str] = Field(None, max_length=255)
    email: Optional[str] = Field(None, max_length=255)
    phone: Optional[str] = Field(None, max_length=50)
    address: Optional[str] = None
    website: Optional[str] = None
    tax_id: Optional[str] = Field(None, max_length=100)
    payment_terms: Optional[str] = Field(None, max_length=100)
    category: Optional[str] = Field(None, max_length=100)
    status: Optional[VendorStatus] = None


class VendorResponse(VendorBase):
    """Schema for vendor response."""
    id: UUID
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class VendorListResponse(BaseModel):
    """Schema for vendor list response."""
    items: List[VendorResponse]
    total: int
