"""
Budget repository for database operations.
"""

from typing import List, Optional
from uuid import UUID
from datetime import date
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from app.db.repositories.base_repository import BaseRepository
from app.models.budget import Budget


class BudgetRepository(BaseRepository[Budget]):
    """Repository for budget operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(Budget, session)

    async def list(
        self,
        skip: int = 0,
        limit: int = 100,
        **filters,
    ) -> List[Budget]:
        """List budgets, newest first."""
        query = self._apply_filters(select(Budget), **filters)
        query = query.order_by(Budget.created_at.desc()).offset(skip).limit(limit)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def list_by_client(self, client_id: UUID) -> List[Budget]:
        """All budgets of a client."""
        result = await self.session.execute(
            select(Budget).where(Budget.client_id == client_id)
        )
        return list(result.scalars().all())

    async def list_overlapping(
        self,
        client_id: Optional[UUID] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> List[Budget]:
        """Budgets whose period overlaps the inclusive range, ordered by start date."""
        query = select(Budget)
        if client_id is not None:
            query = query.where(Budget.client_id == client_id)
        if start_date is not None:
            query = query.where(Budget.end_date >= start_date)
        if end_date is not None:
            query = query.where(Budget.start_date <= end_date)
        result = await self.session.execute(query.order_by(Budget.start_date, Budget.name))
        return list(result.scalars().all())
