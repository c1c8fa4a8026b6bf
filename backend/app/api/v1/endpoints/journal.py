"""
Journal API endpoints.
"""

from datetime import date
from typing import Optional
from fastapi import APIRouter, Depends, Query, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from uuid import UUID

from app.db.session import get_db
from app.controllers.journal_controller import JournalController
from app.schemas.journal_entry import (
    JournalEntryCreate,
    JournalEntryUpdate,
    JournalEntryResponse,
    JournalEntryListResponse,
    JournalStatsResponse,
)

router = APIRouter()


@router.post("", response_model=JournalEntryResponse, status_code=status.HTTP_201_CREATED)
async def create_entry(
    entry_data: JournalEntryCreate,
    db: AsyncSession = Depends(get_db),
) -> JournalEntryResponse:
    """Create a journal entry."""
    controller = JournalController(db)
    return await controller.create_entry(entry_data)


@router.get("", response_model=JournalEntryListResponse)
async def list_entries(
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=1000),
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None),
    category: Optional[str] = Query(None),
    db: AsyncSession = Depends(get_db),
) -> JournalEntryListResponse:
    """List journal entries, most recent first."""
    controller = JournalController(db)
    return await controller.list_entries(
        skip=skip,
        limit=limit,
        start_date=start_date,
        end_date=end_date,
        category=category,
    )


@router.get("/stats", response_model=JournalStatsResponse)
async def get_journal_stats(
    db: AsyncSession = Depends(get_db),
) -> JournalStatsResponse:
    """Entry counts, category and mood breakdowns and the current writing streak."""
    controller = JournalController(db)
    return await controller.get_stats()


@router.get("/search", response_model=JournalEntryListResponse)
async def search_entries(
    q: str = Query(..., min_length=1),
    limit: int = Query(20, ge=1, le=200),
    db: AsyncSession = Depends(get_db),
) -> JournalEntryListResponse:
    """Search journal titles and content."""
    controller = JournalController(db)
    return await controller.search_entries(q, limit=limit)


@router.get("/{entry_id}", response_model=JournalEntryResponse)
async def get_entry(
    entry_id: UUID,
    db: AsyncSession = Depends(get_db),
) -> JournalEntryResponse:
    """Get journal entry by ID."""
    controller = JournalController(db)
    entry = await controller.get_entry(entry_id)
    if not entry:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Journal entry not found")
    return entry


@router.put("/{entry_id}", response_model=JournalEntryResponse)
async def update_entry(
    entry_id: UUID,
    entry_data: JournalEntryUpdate,
    db: AsyncSession = Depends(get_db),
) -> JournalEntryResponse:
    """Update a journal entry."""
    controller = JournalController(db)
    entry = await controller.update_entry(entry_id, entry_data)
    if not entry:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Journal entry not found")
    return entry


@router.delete("/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_entry(
    entry_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    """Delete a journal entry."""
    controller = JournalController(db)
    deleted = await controller.delete_entry(entry_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Journal entry not found")
