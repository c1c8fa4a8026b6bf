"""
Journal entry repository for database operations.
"""

from typing import List, Optional
from datetime import date
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func, or_

from app.db.repositories.base_repository import BaseRepository
from app.models.journal_entry import JournalEntry


class JournalEntryRepository(BaseRepository[JournalEntry]):
    """Repository for journal entry operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(JournalEntry, session)

    def _dated(self, query, start_date: Optional[date], end_date: Optional[date], **filters):
        query = self._apply_filters(query, **filters)
        if start_date is not None:
            query = query.where(JournalEntry.entry_date >= start_date)
        if end_date is not None:
            query = query.where(JournalEntry.entry_date <= end_date)
        return query

    async def list_by_date(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        skip: int = 0,
        limit: int = 50,
        **filters,
    ) -> List[JournalEntry]:
        """List entries dated inside [start_date, end_date], most recent first."""
        query = self._dated(select(JournalEntry), start_date, end_date, **filters)
        query = query.order_by(JournalEntry.entry_date.desc(), JournalEntry.created_at.desc())
        result = await self.session.execute(query.offset(skip).limit(limit))
        return list(result.scalars().all())

    async def count_by_date(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        **filters,
    ) -> int:
        """Count entries dated inside [start_date, end_date]."""
        query = self._dated(select(func.count()).select_from(JournalEntry), start_date, end_date, **filters)
        result = await self.session.execute(query)
        return result.scalar_one()

    async def search(self, text: str, limit: int = 20) -> List[JournalEntry]:
        """Case-insensitive substring match on title or content, most recent first."""
        query = (
            select(JournalEntry)
            .where(
                or_(
                    JournalEntry.title.icontains(text, autoescape=True),
                    JournalEntry.content.icontains(text, autoescape=True),
                )
            )
            .order_by(JournalEntry.entry_date.desc())
            .limit(limit)
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())
