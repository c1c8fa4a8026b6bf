"""
Budget API endpoints.
Writes here trigger a recomputation of the owning client's financial summary.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from uuid import UUID

from app.db.session import get_db
from app.controllers.budget_controller import BudgetController
from app.schemas.budget import BudgetCreate, BudgetUpdate, BudgetResponse, BudgetListResponse

router = APIRouter()


@router.post("", response_model=BudgetResponse, status_code=status.HTTP_201_CREATED)
async def create_budget(
    budget_data: BudgetCreate,
    db: AsyncSession = Depends(get_db),
) -> BudgetResponse:
    """Create a new budget."""
    controller = BudgetController(db)
    return await controller.create_budget(budget_data)


@router.get("", response_model=BudgetListResponse)
async def list_budgets(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    client_id: Optional[UUID] = Query(None),
    db: AsyncSession = Depends(get_db),
) -> BudgetListResponse:
    """List budgets, optionally for one client."""
    controller = BudgetController(db)
    return await controller.list_budgets(skip=skip, limit=limit, client_id=client_id)


@router.get("/{budget_id}", response_model=BudgetResponse)
async def get_budget(
    budget_id: UUID,
    db: AsyncSession = Depends(get_db),
) -> BudgetResponse:
    """Get budget by ID."""
    controller = BudgetController(db)
    budget = await controller.get_budget(budget_id)
    if not budget:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Budget not found")
    return budget


@router.put("/{budget_id}", response_model=BudgetResponse)
async def update_budget(
    budget_id: UUID,
    budget_data: BudgetUpdate,
    db: AsyncSession = Depends(get_db),
) -> BudgetResponse:
    """Update a budget."""
    controller = BudgetController(db)
    budget = await controller.update_budget(budget_id, budget_data)
    if not budget:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Budget not found")
    return budget


@router.delete("/{budget_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_budget(
    budget_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    """Delete a budget."""
    controller = BudgetController(db)
    deleted = await controller.delete_budget(budget_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Budget not found")
