"""
Budget service with business logic.
Every committed budget write refreshes the owning client's financial summary.
"""

from typing import List, Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ValidationFailedError
from app.services.base_service import BaseService
from app.services.financial_summary_service import FinancialSummaryService
from app.db.repositories.budget_repository import BudgetRepository
from app.db.repositories.client_repository import ClientRepository
from app.schemas.budget import BudgetCreate, BudgetUpdate, BudgetResponse


class BudgetService(BaseService):
    """Service for budget operations."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.budget_repo = BudgetRepository(session)
        self.client_repo = ClientRepository(session)
        self.summary_service = FinancialSummaryService(session)

    async def _ensure_client(self, client_id: Optional[UUID]) -> None:
        if client_id is not None and not await self.client_repo.exists(client_id):
            raise ValidationFailedError("Client not found", details={"client_id": str(client_id)})

    async def create_budget(self, budget_data: BudgetCreate) -> BudgetResponse:
        """Create a new budget."""
        await self._ensure_client(budget_data.client_id)

        budget = await self.budget_repo.create(**budget_data.model_dump(exclude_unset=True))
        await self.session.commit()
        await self.session.refresh(budget)
        response = BudgetResponse.model_validate(budget)

        await self.summary_service.refresh_after_mutation(response.client_id)
        return response

    async def get_budget(self, budget_id: UUID) -> Optional[BudgetResponse]:
        """Get budget by ID."""
        budget = await self.budget_repo.get(budget_id)
        if not budget:
            return None
        return BudgetResponse.model_validate(budget)

    async def list_budgets(
        self,
        skip: int = 0,
        limit: int = 100,
        client_id: Optional[UUID] = None,
    ) -> tuple[List[BudgetResponse], int]:
        """List budgets, optionally for one client."""
        budgets = await self.budget_repo.list(skip=skip, limit=limit, client_id=client_id)
        total = await self.budget_repo.count(client_id=client_id)
        return [BudgetResponse.model_validate(b) for b in budgets], total

    async def update_budget(self, budget_id: UUID, budget_data: BudgetUpdate) -> Optional[BudgetResponse]:
        """Update a budget."""
        budget = await self.budget_repo.get(budget_id)
        if not budget:
            return None
        previous_client_id = budget.client_id

        update_dict = budget_data.model_dump(exclude_unset=True)
        await self._ensure_client(update_dict.get("client_id"))

        start_date = update_dict.get("start_date", budget.start_date)
        end_date = update_dict.get("end_date", budget.end_date)
        if end_date < start_date:
            raise ValidationFailedError(
                "end_date must be on or after start_date",
                details={"start_date": str(start_date), "end_date": str(end_date)},
            )

        updated = await self.budget_repo.update(budget_id, **update_dict)
        await self.session.commit()
        await self.session.refresh(updated)
        response = BudgetResponse.model_validate(updated)

        await self.summary_service.refresh_after_mutation(previous_client_id, response.client_id)
        return response

    async def delete_budget(self, budget_id: UUID) -> bool:
        """Delete a budget."""
        budget = await self.budget_repo.get(budget_id)
        if not budget:
            return False
        client_id = budget.client_id

        deleted = await self.budget_repo.delete(budget_id)
        await self.session.commit()

        await self.summary_service.refresh_after_mutation(client_id)
        return deleted
