"""
Expense API endpoints.
Writes here trigger a recomputation of the owning client's financial summary.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from uuid import UUID

from app.db.session import get_db
from app.controllers.expense_controller import ExpenseController
from app.models.expense import ExpenseStatus
from app.schemas.expense import ExpenseCreate, ExpenseUpdate, ExpenseResponse, ExpenseListResponse

router = APIRouter()


@router.post("", response_model=ExpenseResponse, status_code=status.HTTP_201_CREATED)
async def create_expense(
    expense_data: ExpenseCreate,
    db: AsyncSession = Depends(get_db),
) -> ExpenseResponse:
    """Record an expense."""
    controller = ExpenseController(db)
    return await controller.create_expense(expense_data)


@router.get("", response_model=ExpenseListResponse)
async def list_expenses(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    client_id: Optional[UUID] = Query(None),
    expense_status: Optional[ExpenseStatus] = Query(None, alias="status"),
    vendor_id: Optional[UUID] = Query(None),
    db: AsyncSession = Depends(get_db),
) -> ExpenseListResponse:
    """List expenses."""
    controller = ExpenseController(db)
    return await controller.list_expenses(
        skip=skip,
        limit=limit,
        client_id=client_id,
        status=expense_status,
        vendor_id=vendor_id,
    )


@router.get("/{expense_id}", response_model=ExpenseResponse)
async def get_expense(
    expense_id: UUID,
    db: AsyncSession = Depends(get_db),
) -> ExpenseResponse:
    """Get expense by ID."""
    controller = ExpenseController(db)
    expense = await controller.get_expense(expense_id)
    if not expense:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Expense not found")
    return expense


@router.put("/{expense_id}", response_model=ExpenseResponse)
async def update_expense(
    expense_id: UUID,
    expense_data: ExpenseUpdate,
    db: AsyncSession = Depends(get_db),
) -> ExpenseResponse:
    """Update an expense."""
    controller = ExpenseController(db)
    expense = await controller.update_expense(expense_id, expense_data)
    if not expense:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Expense not found")
    return expense


@router.delete("/{expense_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_expense(
    expense_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    """Delete an expense."""
    controller = ExpenseController(db)
    deleted = await controller.delete_expense(expense_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Expense not found")
