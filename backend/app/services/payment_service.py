"""
Payment service with business logic.
Every committed payment write refreshes the owning client's financial summary.
"""

from typing import List, Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ValidationFailedError
from app.services.base_service import BaseService
from app.services.financial_summary_service import FinancialSummaryService
from app.db.repositories.payment_repository import PaymentRepository
from app.db.repositories.client_repository import ClientRepository
from app.db.repositories.budget_repository import BudgetRepository
from app.models.payment import PaymentStatus
from app.schemas.payment import PaymentCreate, PaymentUpdate, PaymentResponse


class PaymentService(BaseService):
    """Service for payment operations."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.payment_repo = PaymentRepository(session)
        self.client_repo = ClientRepository(session)
        self.budget_repo = BudgetRepository(session)
        self.summary_service = FinancialSummaryService(session)

    async def _validate_references(self, client_id: Optional[UUID], budget_id: Optional[UUID]) -> None:
        """Reject writes pointing at clients or budgets that do not exist."""
        if client_id is not None and not await self.client_repo.exists(client_id):
            raise ValidationFailedError("Client not found", details={"client_id": str(client_id)})
        if budget_id is not None and not await self.budget_repo.exists(budget_id):
            raise ValidationFailedError("Budget not found", details={"budget_id": str(budget_id)})

    async def create_payment(self, payment_data: PaymentCreate) -> PaymentResponse:
        """Record a payment."""
        await self._validate_references(payment_data.client_id, payment_data.budget_id)

        payment = await self.payment_repo.create(**payment_data.model_dump(exclude_unset=True))
        await self.session.commit()
        await self.session.refresh(payment)
        response = PaymentResponse.model_validate(payment)

        await self.summary_service.refresh_after_mutation(response.client_id)
        return response

    async def get_payment(self, payment_id: UUID) -> Optional[PaymentResponse]:
        """Get payment by ID."""
        payment = await self.payment_repo.get(payment_id)
        if not payment:
            return None
        return PaymentResponse.model_validate(payment)

    async def list_payments(
        self,
        skip: int = 0,
        limit: int = 100,
        client_id: Optional[UUID] = None,
        status: Optional[PaymentStatus] = None,
    ) -> tuple[List[PaymentResponse], int]:
        """List payments with optional filters."""
        payments = await self.payment_repo.list(skip=skip, limit=limit, client_id=client_id, status=status)
        total = await self.payment_repo.count(client_id=client_id, status=status)
        return [PaymentResponse.model_validate(p) for p in payments], total

    async def update_payment(self, payment_id: UUID, payment_data: PaymentUpdate) -> Optional[PaymentResponse]:
        """Update a payment. Moving it to another client refreshes both summaries."""
        payment = await self.payment_repo.get(payment_id)
        if not payment:
            return None
        previous_client_id = payment.client_id

        update_dict = payment_data.model_dump(exclude_unset=True)
        await self._validate_references(update_dict.get("client_id"), update_dict.get("budget_id"))

        updated = await self.payment_repo.update(payment_id, **update_dict)
        await self.session.commit()
        await self.session.refresh(updated)
        response = PaymentResponse.model_validate(updated)

        await self.summary_service.refresh_after_mutation(previous_client_id, response.client_id)
        return response

    async def delete_payment(self, payment_id: UUID) -> bool:
        """Delete a payment."""
        payment = await self.payment_repo.get(payment_id)
        if not payment:
            return False
        client_id = payment.client_id

        deleted = await self.payment_repo.delete(payment_id)
        await self.session.commit()

        await self.summary_service.refresh_after_mutation(client_id)
        return deleted
