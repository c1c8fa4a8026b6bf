"""
Expense repository for database operations.
"""

from typing import List, Optional
from uuid import UUID
from datetime import date
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from app.db.repositories.base_repository import BaseRepository
from app.models.expense import Expense, ExpenseStatus


class ExpenseRepository(BaseRepository[Expense]):
    """Repository for expense operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(Expense, session)

    async def list(
        self,
        skip: int = 0,
        limit: int = 100,
        **filters,
    ) -> List[Expense]:
        """List expenses, most recent expense date first."""
        query = self._apply_filters(select(Expense), **filters)
        query = query.order_by(Expense.expense_date.desc()).offset(skip).limit(limit)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def list_by_client(self, client_id: UUID) -> List[Expense]:
        """All expenses of a client regardless of status."""
        result = await self.session.execute(
            select(Expense).where(Expense.client_id == client_id)
        )
        return list(result.scalars().all())

    async def list_approved(
        self,
        client_id: Optional[UUID] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> List[Expense]:
        """Approved expenses, optionally bounded by client and inclusive date range."""
        query = select(Expense).where(Expense.status == ExpenseStatus.APPROVED)
        if client_id is not None:
            query = query.where(Expense.client_id == client_id)
        if start_date is not None:
            query = query.where(Expense.expense_date >= start_date)
        if end_date is not None:
            query = query.where(Expense.expense_date <= end_date)
        result = await self.session.execute(query)
        return list(result.scalars().all())
