"""
Calendar event service with business logic.
"""

from typing import List, Optional
from uuid import UUID
from collections import Counter
from datetime import datetime, timezone
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ValidationFailedError
from app.services.base_service import BaseService
from app.db.repositories.calendar_event_repository import CalendarEventRepository
from app.db.repositories.task_repository import TaskRepository
from app.models.task import TaskPriority, TaskStatus
from app.schemas.calendar_event import (
    CalendarEventCreate,
    CalendarEventUpdate,
    CalendarEventResponse,
    CalendarStatsResponse,
)


class CalendarEventService(BaseService):
    """Service for calendar event operations."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.event_repo = CalendarEventRepository(session)
        self.task_repo = TaskRepository(session)

    async def create_event(self, event_data: CalendarEventCreate) -> CalendarEventResponse:
        """Create a new calendar event."""
        event = await self.event_repo.create(**event_data.model_dump(exclude_unset=True))
        await self.session.commit()
        await self.session.refresh(event)
        return CalendarEventResponse.model_validate(event)

    async def get_event(self, event_id: UUID) -> Optional[CalendarEventResponse]:
        """Get calendar event by ID."""
        event = await self.event_repo.get(event_id)
        if not event:
            return None
        return CalendarEventResponse.model_validate(event)

    async def list_events(
        self,
        skip: int = 0,
        limit: int = 100,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        client_id: Optional[UUID] = None,
    ) -> tuple[List[CalendarEventResponse], int]:
        """List events starting inside an optional window."""
        events = await self.event_repo.list_in_window(
            start=start,
            end=end,
            skip=skip,
            limit=limit,
            client_id=client_id,
        )
        total = await self.event_repo.count_in_window(start=start, end=end, client_id=client_id)
        return [CalendarEventResponse.model_validate(e) for e in events], total

    async def get_stats(self, now: Optional[datetime] = None) -> CalendarStatsResponse:
        """Events starting from now on, and task counts by status and priority."""
        now = now or datetime.now(timezone.utc)
        tasks = await self.task_repo.list_all()
        by_status = Counter(TaskStatus(t.status).value for t in tasks)
        completed = by_status.get(TaskStatus.COMPLETED.value, 0)
        return CalendarStatsResponse(
            upcoming_events=await self.event_repo.count_in_window(start=now),
            total_tasks=len(tasks),
            completed_tasks=completed,
            tasks_by_status=dict(by_status),
            tasks_by_priority=dict(Counter(TaskPriority(t.priority).value for t in tasks)),
            completion_rate=round(completed / len(tasks) * 100, 1) if tasks else 0.0,
        )

    async def update_event(self, event_id: UUID, event_data: CalendarEventUpdate) -> Optional[CalendarEventResponse]:
        """Update a calendar event."""
        event = await self.event_repo.get(event_id)
        if not event:
            return None

        update_dict = event_data.model_dump(exclude_unset=True)
        start_time = update_dict.get("start_time", event.start_time)
        end_time = update_dict.get("end_time", event.end_time)
        if _comparable(end_time) < _comparable(start_time):
            raise ValidationFailedError("end_time must be on or after start_time")

        updated = await self.event_repo.update(event_id, **update_dict)
        await self.session.commit()
        await self.session.refresh(updated)
        return CalendarEventResponse.model_validate(updated)

    async def delete_event(self, event_id: UUID) -> bool:
        """Delete a calendar event."""
        deleted = await self.event_repo.delete(event_id)
        await self.session.commit()
        return deleted


def _comparable(value: datetime) -> datetime:
    # Some backends hand back naive datetimes; compare everything as naive UTC.
    if value.tzinfo is not None:
        return value.replace(tzinfo=None) - value.utcoffset()
    return value
