"""
Journal service with business logic.
"""

from collections import Counter
from datetime import date, timedelta
from typing import Iterable, List, Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from app.services.base_service import BaseService
from app.db.repositories.journal_entry_repository import JournalEntryRepository
from app.schemas.journal_entry import (
    JournalEntryCreate,
    JournalEntryUpdate,
    JournalEntryResponse,
    JournalStatsResponse,
)

RECENT_WINDOW = timedelta(days=30)
STREAK_LOOKBACK_DAYS = 365
WEEKS_PER_YEAR = 52


def compute_journal_stats(entries: Iterable, today: date) -> JournalStatsResponse:
    """
    Summarise journal activity.

    ``entries`` are objects with ``category``, ``mood`` and ``entry_date``.
    The streak counts consecutive days with an entry, walking back from
    ``today``; a missing entry for today does not break it.
    """
    entries = list(entries)
    dates = {entry.entry_date for entry in entries}

    streak = 0
    day = today
    for _ in range(STREAK_LOOKBACK_DAYS):
        if day in dates:
            streak += 1
        elif day != today:
            break
        day -= timedelta(days=1)

    total = len(entries)
    return JournalStatsResponse(
        total_entries=total,
        recent_entries=sum(1 for d in (e.entry_date for e in entries) if d >= today - RECENT_WINDOW),
        category_counts=dict(Counter(e.category for e in entries)),
        mood_counts=dict(Counter(e.mood for e in entries if e.mood)),
        current_streak=streak,
        average_entries_per_week=round(total / WEEKS_PER_YEAR, 1),
    )


class JournalService(BaseService):
    """Service for journal entry operations."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.journal_repo = JournalEntryRepository(session)

    async def create_entry(self, entry_data: JournalEntryCreate) -> JournalEntryResponse:
        """Create a journal entry, dated today unless a date is given."""
        entry_dict = entry_data.model_dump(exclude_unset=True)
        entry_dict["entry_date"] = entry_data.entry_date or date.today()
        entry = await self.journal_repo.create(**entry_dict)
        await self.session.commit()
        await self.session.refresh(entry)
        return JournalEntryResponse.model_validate(entry)

    async def get_entry(self, entry_id: UUID) -> Optional[JournalEntryResponse]:
        """Get journal entry by ID."""
        entry = await self.journal_repo.get(entry_id)
        if not entry:
            return None
        return JournalEntryResponse.model_validate(entry)

    async def list_entries(
        self,
        skip: int = 0,
        limit: int = 50,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        category: Optional[str] = None,
    ) -> tuple[List[JournalEntryResponse], int]:
        """List entries inside an optional date range, most recent first."""
        entries = await self.journal_repo.list_by_date(
            start_date=start_date,
            end_date=end_date,
            skip=skip,
            limit=limit,
            category=category,
        )
        total = await self.journal_repo.count_by_date(start_date=start_date, end_date=end_date, category=category)
        return [JournalEntryResponse.model_validate(e) for e in entries], total

    async def search_entries(self, text: str, limit: int = 20) -> tuple[List[JournalEntryResponse], int]:
        """Search entry titles and bodies."""
        entries = await self.journal_repo.search(text, limit=limit)
        return [JournalEntryResponse.model_validate(e) for e in entries], len(entries)

    async def get_stats(self, today: Optional[date] = None) -> JournalStatsResponse:
        """Writing statistics over every entry."""
        entries = await self.journal_repo.list_all()
        return compute_journal_stats(entries, today or date.today())

    async def update_entry(self, entry_id: UUID, entry_data: JournalEntryUpdate) -> Optional[JournalEntryResponse]:
        """Update a journal entry."""
        entry = await self.journal_repo.get(entry_id)
        if not entry:
            return None

        updated = await self.journal_repo.update(entry_id, **entry_data.model_dump(exclude_unset=True))
        await self.session.commit()
        await self.session.refresh(updated)
        return JournalEntryResponse.model_validate(updated)

    async def delete_entry(self, entry_id: UUID) -> bool:
        """Delete a journal entry."""
        deleted = await self.journal_repo.delete(entry_id)
        await self.session.commit()
        return deleted
