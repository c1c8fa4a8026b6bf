"""
Payment repository for database operations.
"""

from typing import List, Optional
from uuid import UUID
from datetime import date
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from app.db.repositories.base_repository import BaseRepository
from app.models.payment import Payment, PaymentStatus


class PaymentRepository(BaseRepository[Payment]):
    """Repository for payment operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(Payment, session)

    async def list(
        self,
        skip: int = 0,
        limit: int = 100,
        **filters,
    ) -> List[Payment]:
        """List payments, most recent payment date first."""
        query = self._apply_filters(select(Payment), **filters)
        query = query.order_by(Payment.payment_date.desc()).offset(skip).limit(limit)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def list_by_client(self, client_id: UUID) -> List[Payment]:
        """All payments of a client regardless of status."""
        result = await self.session.execute(
            select(Payment).where(Payment.client_id == client_id)
        )
        return list(result.scalars().all())

    async def list_completed(
        self,
        client_id: Optional[UUID] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> List[Payment]:
        """Completed payments, optionally bounded by client and inclusive date range."""
        query = select(Payment).where(Payment.status == PaymentStatus.COMPLETED)
        if client_id is not None:
            query = query.where(Payment.client_id == client_id)
        if start_date is not None:
            query = query.where(Payment.payment_date >= start_date)
        if end_date is not None:
            query = query.where(Payment.payment_date <= end_date)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def list_in_range(
        self,
        client_id: Optional[UUID] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> List[Payment]:
        """Payments of any status inside an inclusive date range, most recent first."""
        query = select(Payment)
        if client_id is not None:
            query = query.where(Payment.client_id == client_id)
        if start_date is not None:
            query = query.where(Payment.payment_date >= start_date)
        if end_date is not None:
            query = query.where(Payment.payment_date <= end_date)
        result = await self.session.execute(query.order_by(Payment.payment_date.desc()))
        return list(result.scalars().all())
