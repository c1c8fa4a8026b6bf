"""
Payment controller.
"""

from typing import Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from app.controllers.base_controller import BaseController
from app.services.payment_service import PaymentService
from app.models.payment import PaymentStatus
from app.schemas.payment import PaymentCreate, PaymentUpdate, PaymentResponse, PaymentListResponse


class PaymentController(BaseController):
    """Controller for payment operations."""

    def __init__(self, session: AsyncSession):
        self.payment_service = PaymentService(session)

    async def create_payment(self, payment_data: PaymentCreate) -> PaymentResponse:
        """Record a payment."""
        return await self.payment_service.create_payment(payment_data)

    async def get_payment(self, payment_id: UUID) -> Optional[PaymentResponse]:
        """Get payment by ID."""
        return await self.payment_service.get_payment(payment_id)

    async def list_payments(
        self,
        skip: int = 0,
        limit: int = 100,
        client_id: Optional[UUID] = None,
        status: Optional[PaymentStatus] = None,
    ) -> PaymentListResponse:
        """List payments."""
        payments, total = await self.payment_service.list_payments(skip, limit, client_id, status)
        return PaymentListResponse(items=payments, total=total)

    async def update_payment(self, payment_id: UUID, payment_data: PaymentUpdate) -> Optional[PaymentResponse]:
        """Update a payment."""
        return await self.payment_service.update_payment(payment_id, payment_data)

    async def delete_payment(self, payment_id: UUID) -> bool:
        """Delete a payment."""
        return await self.payment_service.delete_payment(payment_id)
