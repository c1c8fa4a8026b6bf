"""
Client Pydantic schemas for request/response validation.
"""

from pydantic import BaseModel, Field
from typing import Optional, List, Dict
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from app.models.client import ClientStage
from app.schemas.common import PartialUpdate


class ClientBase(BaseModel):
    """Base client schema with common fields."""
    company_name: str = Field(..., min_length=1, max_length=255)
    contact_name: Optional[str] = Field(None, max_length=255)
    email: Optional[str] = Field(None, max_length=255)
    phone: Optional[str] = Field(None, max_length=50)
    linkedin_url: Optional[str] = None
    notes: Optional[str] = None
    stage: ClientStage = ClientStage.PROSPECT
    deal_value: Optional[Decimal] = Field(None, ge=0)
    assigned_to: Optional[str] = Field(None, max_length=255)


class ClientCreate(ClientBase):
    """Schema for creating a client."""
    pass


class ClientUpdate(PartialUpdate):
    """Schema for updating a client (all fields optional)."""
    non_nullable = ("company_name", "stage")

    company_name: Optional[str] = Field(None, min_length=1, max_length=255)
    contact_name: Optional[str] = Field(None, max_length=255)
    email: Optional[str] = Field(None, max_length=255)
    phone: Optional[str] = Field(None, max_length=50)
    linkedin_url: Optional[str] = None
    notes: Optional[str] = None
    stage: Optional[ClientStage] = None
    deal_value: Optional[Decimal] = Field(None, ge=0)
    assigned_to: Optional[str] = Field(None, max_length=255)


class ClientResponse(ClientBase):
    """Schema for client response."""
    id: UUID
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class ClientListResponse(BaseModel):
    """Schema for client list response."""
    items: List[ClientResponse]
    total: int


class ClientStatsResponse(BaseModel):
    """Pipeline statistics across all clients."""
    total_clients: int
    active_deals: int
    stage_counts: Dict[str, int] = {}
    total_deal_value: Decimal
    conversion_rate: float
