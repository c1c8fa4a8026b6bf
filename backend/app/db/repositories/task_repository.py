"""
Task repository for database operations.
"""

from typing import List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from app.db.repositories.base_repository import BaseRepository
from app.models.task import Task


class TaskRepository(BaseRepository[Task]):
    """Repository for task operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(Task, session)

    async def list(
        self,
        skip: int = 0,
        limit: int = 100,
        **filters,
    ) -> List[Task]:
        """List tasks, newest first."""
        query = self._apply_filters(select(Task), **filters)
        query = query.order_by(Task.created_at.desc()).offset(skip).limit(limit)
        result = await self.session.execute(query)
        return list(result.scalars().all())
