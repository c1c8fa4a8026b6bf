"""
Budget controller.
"""

from typing import Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from app.controllers.base_controller import BaseController
from app.services.budget_service import BudgetService
from app.schemas.budget import BudgetCreate, BudgetUpdate, BudgetResponse, BudgetListResponse


class BudgetController(BaseController):
    """Controller for budget operations."""

    def __init__(self, session: AsyncSession):
        self.budget_service = BudgetService(session)

    async def create_budget(self, budget_data: BudgetCreate) -> BudgetResponse:
        """Create a new budget."""
        return await self.budget_service.create_budget(budget_data)

    async def get_budget(self, budget_id: UUID) -> Optional[BudgetResponse]:
        """Get budget by ID."""
        return await self.budget_service.get_budget(budget_id)

    async def list_budgets(
        self,
        skip: int = 0,
        limit: int = 100,
        client_id: Optional[UUID] = None,
    ) -> BudgetListResponse:
        """List budgets."""
        budgets, total = await self.budget_service.list_budgets(skip, limit, client_id)
        return BudgetListResponse(items=budgets, total=total)

    async def update_budget(self, budget_id: UUID, budget_data: BudgetUpdate) -> Optional[BudgetResponse]:
        """Update a budget."""
        return await self.budget_service.update_budget(budget_id, budget_data)

    async def delete_budget(self, budget_id: UUID) -> bool:
        """Delete a budget."""
        return await self.budget_service.delete_budget(budget_id)
