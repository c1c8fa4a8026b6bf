"""
Vendor API endpoints.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from uuid import UUID

from app.db.session import get_db
from app.controllers.vendor_controller import VendorController
from app.models.vendor import VendorStatus
from app.schemas.vendor import VendorCreate, VendorUpdate, VendorResponse, VendorListResponse

router = APIRouter()


@router.post("", response_model=VendorResponse, status_code=status.HTTP_201_CREATED)
async def create_vendor(
    vendor_data: VendorCreate,
    db: AsyncSession = Depends(get_db),
) -> VendorResponse:
    """Create a new vendor."""
    controller = VendorController(db)
    return await controller.create_vendor(vendor_data)


@router.get("", response_model=VendorListResponse)
async def list_vendors(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    vendor_status: Optional[VendorStatus] = Query(None, alias="status"),
    category: Optional[str] = Query(None),
    db: AsyncSession = Depends(get_db),
) -> VendorListResponse:
    """List vendors."""
    controller = VendorController(db)
    return await controller.list_vendors(skip=skip, limit=limit, status=vendor_status, category=category)


@router.get("/{vendor_id}", response_model=VendorResponse)
async def get_vendor(
    vendor_id: UUID,
    db: AsyncSession = Depends(get_db),
) -> VendorResponse:
    """Get vendor by ID."""
    controller = VendorController(db)
    vendor = await controller.get_vendor(vendor_id)
    if not vendor:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Vendor not found")
    return vendor


@router.put("/{vendor_id}", response_model=VendorResponse)
async def update_vendor(
    vendor_id: UUID,
    vendor_data: VendorUpdate,
    db: AsyncSession = Depends(get_db),
) -> VendorResponse:
    """Update a vendor."""
    controller = VendorController(db)
    vendor = await controller.update_vendor(vendor_id, vendor_data)
    if not vendor:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Vendor not found")
    return vendor


@router.delete("/{vendor_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_vendor(
    vendor_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    """Delete a vendor."""
    controller = VendorController(db)
    deleted = await controller.delete_vendor(vendor_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Vendor not found")
