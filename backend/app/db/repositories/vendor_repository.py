"""
Vendor repository for database operations.
"""

from typing import List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from app.db.repositories.base_repository import BaseRepository
from app.models.vendor import Vendor


class VendorRepository(BaseRepository[Vendor]):
    """Repository for vendor operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(Vendor, session)

    async def list(
        self,
        skip: int = 0,
        limit: int = 100,
        **filters,
    ) -> List[Vendor]:
        """List vendors ordered by name."""
        query = self._apply_filters(select(Vendor), **filters)
        query = query.order_by(Vendor.name).offset(skip).limit(limit)
        result = await self.session.execute(query)
        return list(result.scalars().all())
