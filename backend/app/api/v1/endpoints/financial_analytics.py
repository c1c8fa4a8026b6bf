"""
Financial analytics API endpoints.
Client summaries, profitability, overview, monthly trends, reports and spreadsheet export.
"""

from datetime import date
from typing import Optional
from fastapi import APIRouter, Depends, Query, HTTPException, status
from fastapi.responses import StreamingResponse
from sqlalchemy.ext.asyncio import AsyncSession
from uuid import UUID

from app.db.session import get_db
from app.controllers.financial_controller import FinancialController
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

router = APIRouter()


@router.get("/client-summary", response_model=ClientFinancialSummaryListResponse)
async def list_client_summaries(
    db: AsyncSession = Depends(get_db),
) -> ClientFinancialSummaryListResponse:
    """All client financial summaries, highest revenue first."""
    controller = FinancialController(db)
    return await controller.list_client_summaries()


@router.post("/client-summary/refresh", response_model=SummaryRefreshResponse)
async def refresh_client_summaries(
    client_id: Optional[UUID] = Query(None),
    db: AsyncSession = Depends(get_db),
) -> SummaryRefreshResponse:
    """Recompute one client's summary, or every summary when no client is given."""
    controller = FinancialController(db)
    return await controller.refresh_summaries(client_id)


@router.get("/client-summary/export")
async def export_client_summaries(
    db: AsyncSession = Depends(get_db),
):
    """Export every client summary to Excel."""
    controller = FinancialController(db)
    try:
        output = await controller.export_summaries()
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    return StreamingResponse(
        output,
        media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        headers={
            "Content-Disposition": f"attachment; filename=client_financial_summary_{date.today().isoformat()}.xlsx"
        },
    )


@router.get("/client-summary/{client_id}", response_model=ClientFinancialSummaryResponse)
async def get_client_summary(
    client_id: UUID,
    db: AsyncSession = Depends(get_db),
) -> ClientFinancialSummaryResponse:
    """Get one client's financial summary."""
    controller = FinancialController(db)
    summary = await controller.get_client_summary(client_id)
    if not summary:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Financial summary not found",
        )
    return summary


@router.get("/client-profitability/{client_id}", response_model=ClientProfitabilityResponse)
async def get_client_profitability(
    client_id: UUID,
    start_date: date = Query(...),
    end_date: date = Query(...),
    db: AsyncSession = Depends(get_db),
) -> ClientProfitabilityResponse:
    """Profitability of a client between two dates, inclusive."""
    controller = FinancialController(db)
    return await controller.get_client_profitability(client_id, start_date, end_date)


@router.get("/overview", response_model=FinancialOverviewResponse)
async def get_financial_overview(
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None),
    db: AsyncSession = Depends(get_db),
) -> FinancialOverviewResponse:
    """Organisation-wide revenue, expenses and profit."""
    controller = FinancialController(db)
    return await controller.get_overview(start_date, end_date)


@router.get("/monthly-trends", response_model=MonthlyTrendsResponse)
async def get_monthly_trends(
    year: Optional[int] = Query(None, ge=1900, le=9999),
    db: AsyncSession = Depends(get_db),
) -> MonthlyTrendsResponse:
    """Revenue, expenses and profit per month of a year, the current year by default."""
    controller = FinancialController(db)
    return await controller.get_monthly_trends(year or date.today().year)


@router.get("/budget-performance", response_model=BudgetPerformanceResponse)
async def get_budget_performance(
    client_id: Optional[UUID] = Query(None),
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None),
    db: AsyncSession = Depends(get_db),
) -> BudgetPerformanceResponse:
    """Allocated, spent and remaining per budget overlapping the date range."""
    controller = FinancialController(db)
    return await controller.get_budget_performance(client_id, start_date, end_date)


@router.get("/payment-tracking", response_model=PaymentTrackingResponse)
async def get_payment_tracking(
    client_id: Optional[UUID] = Query(None),
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None),
    db: AsyncSession = Depends(get_db),
) -> PaymentTrackingResponse:
    """Payments by status with the completion rate."""
    controller = FinancialController(db)
    return await controller.get_payment_tracking(client_id, start_date, end_date)


@router.get("/vendor-analysis", response_model=VendorAnalysisResponse)
async def get_vendor_analysis(
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None),
    db: AsyncSession = Depends(get_db),
) -> VendorAnalysisResponse:
    """Approved spending per vendor."""
    controller = FinancialController(db)
    return await controller.get_vendor_analysis(start_date, end_date)
