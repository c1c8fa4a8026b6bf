"""
Vendor controller.
"""

from typing import Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from app.controllers.base_controller import BaseController
from app.services.vendor_service import VendorService
from app.models.vendor import VendorStatus
from app.schemas.vendor import VendorCreate, VendorUpdate, VendorResponse, VendorListResponse


class VendorController(BaseController):
    """Controller for vendor operations."""

    def __init__(self, session: AsyncSession):
        self.vendor_service = VendorService(session)

    async def create_vendor(self, vendor_data: VendorCreate) -> VendorResponse:
        return await self.vendor_service.create_vendor(vendor_data)

    async def get_vendor(self, vendor_id: UUID) -> Optional[VendorResponse]:
        return await self.vendor_service.get_vendor(vendor_id)

    async def list_vendors(
        self,
        skip: int = 0,
        limit: int = 100,
        status: Optional[VendorStatus] = None,
        category: Optional[str] = None,
    ) -> VendorListResponse:
        vendors, total = await self.vendor_service.list_vendors(skip, limit, status, category)
        return VendorListResponse(items=vendors, total=total)

    async def update_vendor(self, vendor_id: UUID, vendor_data: VendorUpdate) -> Optional[VendorResponse]:
        return await self.vendor_service.update_vendor(vendor_id, vendor_data)

    async def delete_vendor(self, vendor_id: UUID) -> bool:
        return await self.vendor_service.delete_vendor(vendor_id)
