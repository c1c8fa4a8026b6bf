"""
Journal entry Pydantic schemas for request/response validation.
"""

from pydantic import BaseModel, Field
from typing import Optional, List, Dict
from datetime import date, datetime
from uuid import UUID

from app.schemas.common import PartialUpdate


class JournalEntryBase(BaseModel):
    """Base journal entry schema with common fields."""
    title: str = Field(..., min_length=1, max_length=255)
    content: str = Field(..., min_length=1)
    category: str = Field("general", min_length=1, max_length=100)
    mood: Optional[str] = Field(None, max_length=50)
    tags: List[str] = []
    author: Optional[str] = Field(None, max_length=255)


class JournalEntryCreate(JournalEntryBase):
    """Schema for creating a journal entry. The entry date defaults to today."""
    entry_date: Optional[date] = None


class JournalEntryUpdate(PartialUpdate):
    """Schema for updating a journal entry (all fields optional)."""
    non_nullable = ("title", "content", "entry_date", "category", "tags")

    title: Optional[str] = Field(None, min_length=1, max_length=255)
    content: Optional[str] = Field(None, min_length=1)
    entry_date: Optional[date] = None
    category: Optional[str] = Field(None, min_length=1, max_length=100)
    mood: Optional[str] = Field(None, max_length=50)
    tags: Optional[List[str]] = None
    author: Optional[str] = Field(None, max_length=255)


class JournalEntryResponse(JournalEntryBase):
    """Schema for journal entry response."""
    id: UUID
    entry_date: date
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class JournalEntryListResponse(BaseModel):
    """Schema for journal entry list response."""
    items: List[JournalEntryResponse]
    total: int


class JournalStatsResponse(BaseModel):
    """Writing activity across all journal entries."""
    total_entries: int
    recent_entries: int
    category_counts: Dict[str, int] = {}
    mood_counts: Dict[str, int] = {}
    current_streak: int
    average_entries_per_week: float
