"""
Analytics dashboard controller.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.controllers.base_controller import BaseController
from app.services.analytics_service import AnalyticsService
from app.schemas.analytics import AnalyticsDashboardResponse


class AnalyticsController(BaseController):
    """Controller for the analytics dashboard."""

    def __init__(self, session: AsyncSession):
        self.analytics_service = AnalyticsService(session)

    async def get_dashboard(self, days: int) -> AnalyticsDashboardResponse:
        """Build dashboard metrics over the given lookback window."""
        return await self.analytics_service.get_dashboard(days)
