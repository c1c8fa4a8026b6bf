"""
Calendar event repository for database operations.
"""

from typing import List, Optional
from datetime import datetime
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func

from app.db.repositories.base_repository import BaseRepository
from app.models.calendar_event import CalendarEvent


class CalendarEventRepository(BaseRepository[CalendarEvent]):
    """Repository for calendar event operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(CalendarEvent, session)

    def _window(self, query, start: Optional[datetime], end: Optional[datetime], **filters):
        query = self._apply_filters(query, **filters)
        if start is not None:
            query = query.where(CalendarEvent.start_time >= start)
        if end is not None:
            query = query.where(CalendarEvent.start_time <= end)
        return query

    async def list_in_window(
        self,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        skip: int = 0,
        limit: int = 100,
        **filters,
    ) -> List[CalendarEvent]:
        """List events starting inside [start, end], ordered by start time."""
        query = self._window(select(CalendarEvent), start, end, **filters)
        query = query.order_by(CalendarEvent.start_time).offset(skip).limit(limit)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def count_in_window(
        self,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        **filters,
    ) -> int:
        """Count events starting inside [start, end]."""
        query = self._window(select(func.count()).select_from(CalendarEvent), start, end, **filters)
        result = await self.session.execute(query)
        return result.scalar_one()
