"""
Calendar event controller.
"""

from typing import Optional
from uuid import UUID
from datetime import datetime
from sqlalchemy.ext.asyncio import AsyncSession

from app.controllers.base_controller import BaseController
from app.services.calendar_event_service import CalendarEventService
from app.schemas.calendar_event import (
    CalendarEventCreate,
    CalendarEventUpdate,
    CalendarEventResponse,
    CalendarEventListResponse,
    CalendarStatsResponse,
)


class CalendarEventController(BaseController):
    """Controller for calendar event operations."""

    def __init__(self, session: AsyncSession):
        self.event_service = CalendarEventService(session)

    async def create_event(self, event_data: CalendarEventCreate) -> CalendarEventResponse:
        return await self.event_service.create_event(event_data)

    async def get_event(self, event_id: UUID) -> Optional[CalendarEventResponse]:
        return await self.event_service.get_event(event_id)

    async def list_events(
        self,
        skip: int = 0,
        limit: int = 100,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        client_id: Optional[UUID] = None,
    ) -> CalendarEventListResponse:
        events, total = await self.event_service.list_events(skip, limit, start, end, client_id)
        return CalendarEventListResponse(items=events, total=total)

    async def get_stats(self) -> CalendarStatsResponse:
        return await self.event_service.get_stats()

    async def update_event(self, event_id: UUID, event_data: CalendarEventUpdate) -> Optional[CalendarEventResponse]:
        return await self.event_service.update_event(event_id, event_data)

    async def delete_event(self, event_id: UUID) -> bool:
        return await self.event_service.delete_event(event_id)
