"""
Task service with business logic.
"""

from typing import List, Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from app.services.base_service import BaseService
from app.db.repositories.task_repository import TaskRepository
from app.models.task import TaskStatus
from app.schemas.task import TaskCreate, TaskUpdate, TaskResponse


class TaskService(BaseService):
    """Service for task operations."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.task_repo = TaskRepository(session)

    async def create_task(self, task_data: TaskCreate) -> TaskResponse:
        """Create a new task."""
        task_dict = task_data.model_dump(exclude_unset=True)
        task_dict["completed"] = task_data.status == TaskStatus.COMPLETED
        task = await self.task_repo.create(**task_dict)
        await self.session.commit()
        await self.session.refresh(task)
        return TaskResponse.model_validate(task)

    async def get_task(self, task_id: UUID) -> Optional[TaskResponse]:
        """Get task by ID."""
        task = await self.task_repo.get(task_id)
        if not task:
            return None
        return TaskResponse.model_validate(task)

    async def list_tasks(
        self,
        skip: int = 0,
        limit: int = 100,
        status: Optional[TaskStatus] = None,
        client_id: Optional[UUID] = None,
    ) -> tuple[List[TaskResponse], int]:
        """List tasks with optional filters."""
        tasks = await self.task_repo.list(skip=skip, limit=limit, status=status, client_id=client_id)
        total = await self.task_repo.count(status=status, client_id=client_id)
        return [TaskResponse.model_validate(t) for t in tasks], total

    async def update_task(self, task_id: UUID, task_data: TaskUpdate) -> Optional[TaskResponse]:
        """Update a task, keeping the completed flag in step with its status."""
        task = await self.task_repo.get(task_id)
        if not task:
            return None

        update_dict = task_data.model_dump(exclude_unset=True)
        if "status" in update_dict:
            update_dict["completed"] = update_dict["status"] == TaskStatus.COMPLETED

        updated = await self.task_repo.update(task_id, **update_dict)
        await self.session.commit()
        await self.session.refresh(updated)
        return TaskResponse.model_validate(updated)

    async def delete_task(self, task_id: UUID) -> bool:
        """Delete a task."""
        deleted = await self.task_repo.delete(task_id)
        await self.session.commit()
        return deleted
