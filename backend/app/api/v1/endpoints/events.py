"""
Calendar event API endpoints.
"""

from datetime import datetime
from typing import Optional
from fastapi import APIRouter, Depends, Query, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from uuid import UUID

from app.db.session import get_db
from app.controllers.calendar_event_controller import CalendarEventController
from app.schemas.calendar_event import (
    CalendarEventCreate,
    CalendarEventUpdate,
    CalendarEventResponse,
    CalendarEventListResponse,
    CalendarStatsResponse,
)

router = APIRouter()


@router.post("", response_model=CalendarEventResponse, status_code=status.HTTP_201_CREATED)
async def create_event(
    event_data: CalendarEventCreate,
    db: AsyncSession = Depends(get_db),
) -> CalendarEventResponse:
    """Create a calendar event."""
    controller = CalendarEventController(db)
    return await controller.create_event(event_data)


@router.get("", response_model=CalendarEventListResponse)
async def list_events(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    start: Optional[datetime] = Query(None),
    end: Optional[datetime] = Query(None),
    client_id: Optional[UUID] = Query(None),
    db: AsyncSession = Depends(get_db),
) -> CalendarEventListResponse:
    """List events overlapping the optional [start, end] window."""
    controller = CalendarEventController(db)
    return await controller.list_events(skip=skip, limit=limit, start=start, end=end, client_id=client_id)


@router.get("/stats", response_model=CalendarStatsResponse)
async def get_calendar_stats(
    db: AsyncSession = Depends(get_db),
) -> CalendarStatsResponse:
    """Upcoming event count and task completion breakdown."""
    controller = CalendarEventController(db)
    return await controller.get_stats()


@router.get("/{event_id}", response_model=CalendarEventResponse)
async def get_event(
    event_id: UUID,
    db: AsyncSession = Depends(get_db),
) -> CalendarEventResponse:
    """Get event by ID."""
    controller = CalendarEventController(db)
    event = await controller.get_event(event_id)
    if not event:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event not found")
    return event


@router.put("/{event_id}", response_model=CalendarEventResponse)
async def update_event(
    event_id: UUID,
    event_data: CalendarEventUpdate,
    db: AsyncSession = Depends(get_db),
) -> CalendarEventResponse:
    """Update an event."""
    controller = CalendarEventController(db)
    event = await controller.update_event(event_id, event_data)
    if not event:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event not found")
    return event


@router.delete("/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_event(
    event_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    """Delete an event."""
    controller = CalendarEventController(db)
    deleted = await controller.delete_event(event_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event not found")
