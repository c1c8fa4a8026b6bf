"""
Journal controller.
"""

from datetime import date
from typing import Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from app.controllers.base_controller import BaseController
from app.services.journal_service import JournalService
from app.schemas.journal_entry import (
    JournalEntryCreate,
    JournalEntryUpdate,
    JournalEntryResponse,
    JournalEntryListResponse,
    JournalStatsResponse,
)


class JournalController(BaseController):
    """Controller for journal entry operations."""

    def __init__(self, session: AsyncSession):
        self.journal_service = JournalService(session)

    async def create_entry(self, entry_data: JournalEntryCreate) -> JournalEntryResponse:
        return await self.journal_service.create_entry(entry_data)

    async def get_entry(self, entry_id: UUID) -> Optional[JournalEntryResponse]:
        return await self.journal_service.get_entry(entry_id)

    async def list_entries(
        self,
        skip: int = 0,
        limit: int = 50,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        category: Optional[str] = None,
    ) -> JournalEntryListResponse:
        entries, total = await self.journal_service.list_entries(skip, limit, start_date, end_date, category)
        return JournalEntryListResponse(items=entries, total=total)

    async def search_entries(self, text: str, limit: int = 20) -> JournalEntryListResponse:
        entries, total = await self.journal_service.search_entries(text, limit)
        return JournalEntryListResponse(items=entries, total=total)

    async def get_stats(self) -> JournalStatsResponse:
        return await self.journal_service.get_stats()

    async def update_entry(self, entry_id: UUID, entry_data: JournalEntryUpdate) -> Optional[JournalEntryResponse]:
        return await self.journal_service.update_entry(entry_id, entry_data)

    async def delete_entry(self, entry_id: UUID) -> bool:
        return await self.journal_service.delete_entry(entry_id)
