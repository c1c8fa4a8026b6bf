"""
Analytics dashboard endpoint.
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.db.session import get_db
from app.controllers.analytics_controller import AnalyticsController
from app.schemas.analytics import AnalyticsDashboardResponse

router = APIRouter()


@router.get("/dashboard", response_model=AnalyticsDashboardResponse)
async def get_dashboard(
    days: int = Query(settings.ANALYTICS_DEFAULT_DAYS, ge=1, le=3650),
    db: AsyncSession = Depends(get_db),
) -> AnalyticsDashboardResponse:
    """Pipeline, activity and forecasting metrics over the last `days` days."""
    controller = AnalyticsController(db)
    return await controller.get_dashboard(days)
