"""
Financial analytics controller.
Coordinates the summary, analytics, report and export services.
"""

import io
from datetime import date
from typing import Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from app.controllers.base_controller import BaseController
from app.core.exceptions import NotFoundError
from app.services.financial_summary_service import FinancialSummaryService
from app.services.financial_analytics_service import FinancialAnalyticsService
from app.services.financial_export_service import FinancialExportService
from app.schemas.financial_summary import (
    BudgetPerformanceResponse,
    ClientFinancialSummaryListResponse,
    ClientFinancialSummaryResponse,
    ClientProfitabilityResponse,
    FinancialOverviewResponse,
    MonthlyTrendsResponse,
    PaymentTrackingResponse,
    SummaryRefreshResponse,
    VendorAnalysisResponse,
)


class FinancialController(BaseController):
    """Controller for financial summaries and reporting."""

    def __init__(self, session: AsyncSession):
        self.summary_service = FinancialSummaryService(session)
        self.analytics_service = FinancialAnalyticsService(session)
        self.export_service = FinancialExportService(session)

    async def list_client_summaries(self) -> ClientFinancialSummaryListResponse:
        """List every client summary by revenue."""
        summaries = await self.summary_service.list_summaries()
        return ClientFinancialSummaryListResponse(items=summaries, total=len(summaries))

    async def get_client_summary(self, client_id: UUID) -> Optional[ClientFinancialSummaryResponse]:
        """Get one client's summary."""
        return await self.summary_service.get_summary(client_id)

    async def refresh_summaries(self, client_id: Optional[UUID] = None) -> SummaryRefreshResponse:
        """Recompute one client's summary, or all of them."""
        if client_id is None:
            return await self.summary_service.recompute_all()
        summary = await self.summary_service.recompute(client_id)
        if summary is None:
            raise NotFoundError("Client not found", details={"client_id": str(client_id)})
        return SummaryRefreshResponse(refreshed=1, failed=0)

    async def get_client_profitability(
        self,
        client_id: UUID,
        start_date: date,
        end_date: date,
    ) -> ClientProfitabilityResponse:
        """Date-bounded profitability of a client."""
        return await self.analytics_service.get_client_profitability(client_id, start_date, end_date)

    async def get_overview(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> FinancialOverviewResponse:
        """Organisation-wide totals."""
        return await self.analytics_service.get_overview(start_date, end_date)

    async def get_monthly_trends(self, year: int) -> MonthlyTrendsResponse:
        """Monthly revenue/expense/profit for a year."""
        return await self.analytics_service.get_monthly_trends(year)

    async def get_budget_performance(
        self,
        client_id: Optional[UUID] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> BudgetPerformanceResponse:
        return await self.analytics_service.get_budget_performance(client_id, start_date, end_date)

    async def get_payment_tracking(
        self,
        client_id: Optional[UUID] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> PaymentTrackingResponse:
        return await self.analytics_service.get_payment_tracking(client_id, start_date, end_date)

    async def get_vendor_analysis(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> VendorAnalysisResponse:
        return await self.analytics_service.get_vendor_analysis(start_date, end_date)

    async def export_summaries(self) -> io.BytesIO:
        """Spreadsheet of every client summary."""
        return await self.export_service.export_summaries_to_excel()
