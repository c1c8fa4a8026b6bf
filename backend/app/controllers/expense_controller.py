"""
Expense controller.
"""

from typing import Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from app.controllers.base_controller import BaseController
from app.services.expense_service import ExpenseService
from app.models.expense import ExpenseStatus
from app.schemas.expense import ExpenseCreate, ExpenseUpdate, ExpenseResponse, ExpenseListResponse


class ExpenseController(BaseController):
    """Controller for expense operations."""

    def __init__(self, session: AsyncSession):
        self.expense_service = ExpenseService(session)

    async def create_expense(self, expense_data: ExpenseCreate) -> ExpenseResponse:
        """Record an expense."""
        return await self.expense_service.create_expense(expense_data)

    async def get_expense(self, expense_id: UUID) -> Optional[ExpenseResponse]:
        """Get expense by ID."""
        return await self.expense_service.get_expense(expense_id)

    async def list_expenses(
        self,
        skip: int = 0,
        limit: int = 100,
        client_id: Optional[UUID] = None,
        status: Optional[ExpenseStatus] = None,
        vendor_id: Optional[UUID] = None,
    ) -> ExpenseListResponse:
        """List expenses."""
        expenses, total = await self.expense_service.list_expenses(skip, limit, client_id, status, vendor_id)
        return ExpenseListResponse(items=expenses, total=total)

    async def update_expense(self, expense_id: UUID, expense_data: ExpenseUpdate) -> Optional[ExpenseResponse]:
        """Update an expense."""
        return await self.expense_service.update_expense(expense_id, expense_data)

    async def delete_expense(self, expense_id: UUID) -> bool:
        """Delete an expense."""
        return await self.expense_service.delete_expense(expense_id)
