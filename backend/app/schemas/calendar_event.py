"""
Calendar event Pydantic schemas for request/response validation.
"""

from pydantic import BaseModel, Field, model_validator
from typing import Optional, List, Dict
from datetime import datetime
from uuid import UUID

from app.models.calendar_event import EventType
from app.schemas.common import PartialUpdate


class CalendarEventBase(BaseModel):
    """Base calendar event schema with common fields."""
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    start_time: datetime
    end_time: datetime
    type: EventType = EventType.MEETING
    client_id: Optional[UUID] = None
    created_by: Optional[str] = Field(None, max_length=255)


class CalendarEventCreate(CalendarEventBase):
    """Schema for creating a calendar event."""

    @model_validator(mode="after")
    def check_time_range(self):
        if self.end_time < self.start_time:
            raise ValueError("end_time must be on or after start_time")
        return self


class CalendarEventUpdate(PartialUpdate):
    """Schema for updating a calendar event (all fields optional)."""
    non_nullable = ("title", "start_time", "end_time", "type")

    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    type: Optional[EventType] = None
    client_id: Optional[UUID] = None


class CalendarEventResponse(CalendarEventBase):
    """Schema for calendar event response."""
    id: UUID
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class CalendarEventListResponse(BaseModel):
    """Schema for calendar event list response."""
    items: List[CalendarEventResponse]
    total: int


class CalendarStatsResponse(BaseModel):
    """Upcoming events and task completion across the calendar."""
    upcoming_events: int
    total_tasks: int
    completed_tasks: int
    tasks_by_status: Dict[str, int] = {}
    tasks_by_priority: Dict[str, int] = {}
    completion_rate: float
