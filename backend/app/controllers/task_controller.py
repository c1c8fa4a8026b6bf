"""
Task controller.
"""

from typing import Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from app.controllers.base_controller import BaseController
from app.services.task_service import TaskService
from app.models.task import TaskStatus
from app.schemas.task import TaskCreate, TaskUpdate, TaskResponse, TaskListResponse


class TaskController(BaseController):
    """Controller for task operations."""

    def __init__(self, session: AsyncSession):
        self.task_service = TaskService(session)

    async def create_task(self, task_data: TaskCreate) -> TaskResponse:
        return await self.task_service.create_task(task_data)

    async def get_task(self, task_id: UUID) -> Optional[TaskResponse]:
        return await self.task_service.get_task(task_id)

    async def list_tasks(
        self,
        skip: int = 0,
        limit: int = 100,
        status: Optional[TaskStatus] = None,
        client_id: Optional[UUID] = None,
    ) -> TaskListResponse:
        tasks, total = await self.task_service.list_tasks(skip, limit, status, client_id)
        return TaskListResponse(items=tasks, total=total)

    async def update_task(self, task_id: UUID, task_data: TaskUpdate) -> Optional[TaskResponse]:
        return await self.task_service.update_task(task_id, task_data)

    async def delete_task(self, task_id: UUID) -> bool:
        return await self.task_service.delete_task(task_id)
