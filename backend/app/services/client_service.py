"""
Client service with business logic.
"""

from typing import List, Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from app.services.base_service import BaseService
from app.db.repositories.client_repository import ClientRepository
from app.models.client import ClientStage
from app.schemas.client import (
    ClientCreate,
    ClientUpdate,
    ClientResponse,
    ClientStatsResponse,
)

CLOSED_STAGES = (ClientStage.CLOSED.value, ClientStage.LOST.value)


class ClientService(BaseService):
    """Service for client operations."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.client_repo = ClientRepository(session)

    async def create_client(self, client_data: ClientCreate) -> ClientResponse:
        """Create a new client."""
        client_dict = client_data.model_dump(exclude_unset=True)
        client = await self.client_repo.create(**client_dict)
        await self.session.commit()
        await self.session.refresh(client)
        return ClientResponse.model_validate(client)

    async def get_client(self, client_id: UUID) -> Optional[ClientResponse]:
        """Get client by ID."""
        client = await self.client_repo.get(client_id)
        if not client:
            return None
        return ClientResponse.model_validate(client)

    async def list_clients(
        self,
        skip: int = 0,
        limit: int = 100,
        stage: Optional[ClientStage] = None,
        assigned_to: Optional[str] = None,
    ) -> tuple[List[ClientResponse], int]:
        """List clients with optional filters."""
        clients = await self.client_repo.list(skip=skip, limit=limit, stage=stage, assigned_to=assigned_to)
        total = await self.client_repo.count(stage=stage, assigned_to=assigned_to)
        return [ClientResponse.model_validate(client) for client in clients], total

    async def update_client(
        self,
        client_id: UUID,
        client_data: ClientUpdate,
    ) -> Optional[ClientResponse]:
        """Update a client."""
        client = await self.client_repo.get(client_id)
        if not client:
            return None

        update_dict = client_data.model_dump(exclude_unset=True)
        updated = await self.client_repo.update(client_id, **update_dict)
        await self.session.commit()
        await self.session.refresh(updated)
        return ClientResponse.model_validate(updated)

    async def delete_client(self, client_id: UUID) -> bool:
        """Delete a client along with its financial records."""
        deleted = await self.client_repo.delete(client_id)
        await self.session.commit()
        return deleted

    async def get_stats(self) -> ClientStatsResponse:
        """Pipeline statistics across all clients."""
        stage_counts = await self.client_repo.count_by_stage()
        total_clients = sum(stage_counts.values())
        active_deals = sum(
            count for stage, count in stage_counts.items() if stage not in CLOSED_STAGES
        )
        won = stage_counts.get(ClientStage.CLOSED.value, 0)
        conversion_rate = round(won / total_clients * 100, 1) if total_clients else 0.0

        return ClientStatsResponse(
            total_clients=total_clients,
            active_deals=active_deals,
            stage_counts=stage_counts,
            total_deal_value=await self.client_repo.total_deal_value(),
            conversion_rate=conversion_rate,
        )
