"""
Payment API endpoints.
Writes here trigger a recomputation of the owning client's financial summary.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from uuid import UUID

from app.db.session import get_db
from app.controllers.payment_controller import PaymentController
from app.models.payment import PaymentStatus
from app.schemas.payment import PaymentCreate, PaymentUpdate, PaymentResponse, PaymentListResponse

router = APIRouter()


@router.post("", response_model=PaymentResponse, status_code=status.HTTP_201_CREATED)
async def create_payment(
    payment_data: PaymentCreate,
    db: AsyncSession = Depends(get_db),
) -> PaymentResponse:
    """Record a payment."""
    controller = PaymentController(db)
    return await controller.create_payment(payment_data)


@router.get("", response_model=PaymentListResponse)
async def list_payments(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    client_id: Optional[UUID] = Query(None),
    payment_status: Optional[PaymentStatus] = Query(None, alias="status"),
    db: AsyncSession = Depends(get_db),
) -> PaymentListResponse:
    """List payments."""
    controller = PaymentController(db)
    return await controller.list_payments(skip=skip, limit=limit, client_id=client_id, status=payment_status)


@router.get("/{payment_id}", response_model=PaymentResponse)
async def get_payment(
    payment_id: UUID,
    db: AsyncSession = Depends(get_db),
) -> PaymentResponse:
    """Get payment by ID."""
    controller = PaymentController(db)
    payment = await controller.get_payment(payment_id)
    if not payment:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Payment not found")
    return payment


@router.put("/{payment_id}", response_model=PaymentResponse)
async def update_payment(
    payment_id: UUID,
    payment_data: PaymentUpdate,
    db: AsyncSession = Depends(get_db),
) -> PaymentResponse:
    """Update a payment."""
    controller = PaymentController(db)
    payment = await controller.update_payment(payment_id, payment_data)
    if not payment:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Payment not found")
    return payment


@router.delete("/{payment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_payment(
    payment_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    """Delete a payment."""
    controller = PaymentController(db)
    deleted = await controller.delete_payment(payment_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Payment not found")
