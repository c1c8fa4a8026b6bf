"""
Health service.
Reports uptime, database reachability and recorded request exceptions.
"""

import time
from app.services.base_service import BaseService
from app.schemas.health import HealthResponse
from app.core.integrations.observability import get_exception_counts
from app.db import session as db_session
from app.db.repositories.health_repository import HealthRepository


class HealthService(BaseService):
    """Service for health check operations."""

    def __init__(self):
        self.start_time = time.time()

    async def get_health(self) -> HealthResponse:
        """
        Get system health status.

        Returns:
            HealthResponse with status, uptime, and checks
        """
        uptime_seconds = int(time.time() - self.start_time)
        uptime_str = f"PT{uptime_seconds}S"  # ISO 8601 duration

        checks = {}

        if db_session.async_session_maker is None:
            checks["database"] = "error: not initialized"
        else:
            try:
                async with db_session.async_session_maker() as session:
                    repo = HealthRepository(session=session)
                    checks["database"] = "ok" if await repo.check_database() else "error"
            except Exception as e:
                checks["database"] = f"error: {str(e)}"

        status = "ok" if all(check == "ok" for check in checks.values()) else "degraded"
        checks["recorded_exceptions"] = sum(get_exception_counts().values())

        return HealthResponse(
            status=status,
            uptime=uptime_str,
            checks=checks,
        )
