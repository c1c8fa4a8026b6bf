"""
Client financial summary repository.
"""

from typing import List, Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from app.db.repositories.base_repository import BaseRepository
from app.models.client_financial_summary import ClientFinancialSummary


class FinancialSummaryRepository(BaseRepository[ClientFinancialSummary]):
    """Repository for the derived per-client summary rows."""

    def __init__(self, session: AsyncSession):
        super().__init__(ClientFinancialSummary, session)

    async def get_by_client(self, client_id: UUID) -> Optional[ClientFinancialSummary]:
        """Get the summary row of a client."""
        result = await self.session.execute(
            select(ClientFinancialSummary).where(ClientFinancialSummary.client_id == client_id)
        )
        return result.scalar_one_or_none()

    async def list_by_revenue(self) -> List[ClientFinancialSummary]:
        """All summary rows, highest revenue first."""
        result = await self.session.execute(
            select(ClientFinancialSummary).order_by(ClientFinancialSummary.total_revenue.desc())
        )
        return list(result.scalars().all())

    async def upsert(self, client_id: UUID, **values) -> ClientFinancialSummary:
        """Insert the client's summary row or overwrite every given column."""
        summary = await self.get_by_client(client_id)
        if summary is None:
            summary = ClientFinancialSummary(client_id=client_id, **values)
            self.session.add(summary)
        else:
            for key, value in values.items():
                setattr(summary, key, value)
        await self.session.flush()
        return summary
