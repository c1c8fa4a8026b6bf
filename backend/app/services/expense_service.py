"""
Expense service with business logic.
Every committed expense write refreshes the owning client's financial summary.
"""

from typing import List, Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ValidationFailedError
from app.services.base_service import BaseService
from app.services.financial_summary_service import FinancialSummaryService
from app.db.repositories.expense_repository import ExpenseRepository
from app.db.repositories.client_repository import ClientRepository
from app.db.repositories.budget_repository import BudgetRepository
from app.db.repositories.vendor_repository import VendorRepository
from app.models.expense import ExpenseStatus
from app.schemas.expense import ExpenseCreate, ExpenseUpdate, ExpenseResponse


class ExpenseService(BaseService):
    """Service for expense operations."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.expense_repo = ExpenseRepository(session)
        self.client_repo = ClientRepository(session)
        self.budget_repo = BudgetRepository(session)
        self.vendor_repo = VendorRepository(session)
        self.summary_service = FinancialSummaryService(session)

    async def _validate_references(
        self,
        client_id: Optional[UUID],
        budget_id: Optional[UUID],
        vendor_id: Optional[UUID],
    ) -> None:
        """Reject writes pointing at clients, budgets or vendors that do not exist."""
        if client_id is not None and not await self.client_repo.exists(client_id):
            raise ValidationFailedError("Client not found", details={"client_id": str(client_id)})
        if budget_id is not None and not await self.budget_repo.exists(budget_id):
            raise ValidationFailedError("Budget not found", details={"budget_id": str(budget_id)})
        if vendor_id is not None and not await self.vendor_repo.exists(vendor_id):
            raise ValidationFailedError("Vendor not found", details={"vendor_id": str(vendor_id)})

    async def create_expense(self, expense_data: ExpenseCreate) -> ExpenseResponse:
        """Record an expense."""
        await self._validate_references(expense_data.client_id, expense_data.budget_id, expense_data.vendor_id)

        expense = await self.expense_repo.create(**expense_data.model_dump(exclude_unset=True))
        await self.session.commit()
        await self.session.refresh(expense)
        response = ExpenseResponse.model_validate(expense)

        await self.summary_service.refresh_after_mutation(response.client_id)
        return response

    async def get_expense(self, expense_id: UUID) -> Optional[ExpenseResponse]:
        """Get expense by ID."""
        expense = await self.expense_repo.get(expense_id)
        if not expense:
            return None
        return ExpenseResponse.model_validate(expense)

    async def list_expenses(
        self,
        skip: int = 0,
        limit: int = 100,
        client_id: Optional[UUID] = None,
        status: Optional[ExpenseStatus] = None,
        vendor_id: Optional[UUID] = None,
    ) -> tuple[List[ExpenseResponse], int]:
        """List expenses with optional filters."""
        filters = {"client_id": client_id, "status": status, "vendor_id": vendor_id}
        expenses = await self.expense_repo.list(skip=skip, limit=limit, **filters)
        total = await self.expense_repo.count(**filters)
        return [ExpenseResponse.model_validate(e) for e in expenses], total

    async def update_expense(self, expense_id: UUID, expense_data: ExpenseUpdate) -> Optional[ExpenseResponse]:
        """Update an expense. Moving it to another client refreshes both summaries."""
        expense = await self.expense_repo.get(expense_id)
        if not expense:
            return None
        previous_client_id = expense.client_id

        update_dict = expense_data.model_dump(exclude_unset=True)
        await self._validate_references(
            update_dict.get("client_id"),
            update_dict.get("budget_id"),
            update_dict.get("vendor_id"),
        )

        updated = await self.expense_repo.update(expense_id, **update_dict)
        await self.session.commit()
        await self.session.refresh(updated)
        response = ExpenseResponse.model_validate(updated)

        await self.summary_service.refresh_after_mutation(previous_client_id, response.client_id)
        return response

    async def delete_expense(self, expense_id: UUID) -> bool:
        """Delete an expense."""
        expense = await self.expense_repo.get(expense_id)
        if not expense:
            return False
        client_id = expense.client_id

        deleted = await self.expense_repo.delete(expense_id)
        await self.session.commit()

        await self.summary_service.refresh_after_mutation(client_id)
        return deleted
