"""
Client repository for database operations.
"""

from typing import Optional, List, Dict
from uuid import UUID
from decimal import Decimal
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func
from sqlalchemy.orm import selectinload

from app.db.repositories.base_repository import BaseRepository
from app.models.client import Client, ClientStage


class ClientRepository(BaseRepository[Client]):
    """Repository for client operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(Client, session)

    async def list(
        self,
        skip: int = 0,
        limit: int = 100,
        **filters,
    ) -> List[Client]:
        """List clients, newest first."""
        query = self._apply_filters(select(Client), **filters)
        query = query.order_by(Client.created_at.desc()).offset(skip).limit(limit)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def list_ids(self) -> List[UUID]:
        """IDs of every client."""
        result = await self.session.execute(select(Client.id))
        return list(result.scalars().all())

    async def get_with_financials(self, client_id: UUID) -> Optional[Client]:
        """Get client with budgets, payments, expenses and summary loaded."""
        result = await self.session.execute(
            select(Client)
            .options(
                selectinload(Client.budgets),
                selectinload(Client.payments),
                selectinload(Client.expenses),
                selectinload(Client.financial_summary),
            )
            .where(Client.id == client_id)
        )
        return result.scalar_one_or_none()

    async def count_by_stage(self) -> Dict[str, int]:
        """Number of clients per stage value."""
        result = await self.session.execute(
            select(Client.stage, func.count(Client.id)).group_by(Client.stage)
        )
        return {
            (stage.value if isinstance(stage, ClientStage) else stage): count
            for stage, count in result.all()
        }

    async def count_excluding_stage(self, stage: ClientStage) -> int:
        """Number of clients not in the given stage."""
        result = await self.session.execute(
            select(func.count(Client.id)).where(Client.stage != stage)
        )
        return result.scalar_one()

    async def total_deal_value(self) -> Decimal:
        """Sum of all non-null deal values."""
        result = await self.session.execute(
            select(func.coalesce(func.sum(Client.deal_value), 0))
        )
        return Decimal(str(result.scalar_one()))

    async def delete(self, id: UUID) -> bool:
        """Delete a client together with its financial rows and summary."""
        client = await self.get_with_financials(id)
        if not client:
            return False
        await self.session.delete(client)
        await self.session.flush()
        return True
