"""
Vendor service with business logic.
"""

from typing import List, Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from app.services.base_service import BaseService
from app.db.repositories.vendor_repository import VendorRepository
from app.models.vendor import VendorStatus
from app.schemas.vendor import VendorCreate, VendorUpdate, VendorResponse


class VendorService(BaseService):
    """Service for vendor operations."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.vendor_repo = VendorRepository(session)

    async def create_vendor(self, vendor_data: VendorCreate) -> VendorResponse:
        """Create a new vendor."""
        vendor = await self.vendor_repo.create(**vendor_data.model_dump(exclude_unset=True))
        await self.session.commit()
        await self.session.refresh(vendor)
        return VendorResponse.model_validate(vendor)

    async def get_vendor(self, vendor_id: UUID) -> Optional[VendorResponse]:
        """Get vendor by ID."""
        vendor = await self.vendor_repo.get(vendor_id)
        if not vendor:
            return None
        return VendorResponse.model_validate(vendor)

    async def list_vendors(
        self,
        skip: int = 0,
        limit: int = 100,
        status: Optional[VendorStatus] = None,
        category: Optional[str] = None,
    ) -> tuple[List[VendorResponse], int]:
        """List vendors with optional filters."""
        vendors = await self.vendor_repo.list(skip=skip, limit=limit, status=status, category=category)
        total = await self.vendor_repo.count(status=status, category=category)
        return [VendorResponse.model_validate(v) for v in vendors], total

    async def update_vendor(self, vendor_id: UUID, vendor_data: VendorUpdate) -> Optional[VendorResponse]:
        """Update a vendor."""
        vendor = await self.vendor_repo.get(vendor_id)
        if not vendor:
            return None

        updated = await self.vendor_repo.update(vendor_id, **vendor_data.model_dump(exclude_unset=True))
        await self.session.commit()
        await self.session.refresh(updated)
        return VendorResponse.model_validate(updated)

    async def delete_vendor(self, vendor_id: UUID) -> bool:
        """Delete a vendor. Expenses keep their amounts and lose the vendor link."""
        deleted = await self.vendor_repo.delete(vendor_id)
        await self.session.commit()
        return deleted
