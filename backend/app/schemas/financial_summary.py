"""
Schemas for derived financial data: per-client summaries, profitability,
overview, monthly trends and the budget, payment and vendor reports.
"""

from pydantic import BaseModel
from typing import Optional, List, Dict
from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from app.models.payment import PaymentMethod, PaymentStatus
from app.models.vendor import VendorStatus


class ClientFinancialSummaryResponse(BaseModel):
    """Per-client financial summary row."""
    id: UUID
    client_id: UUID
    total_revenue: Decimal
    total_expenses: Decimal
    net_profit: Decimal
    profit_margin: Decimal
    total_payments: Decimal
    total_budgets: Decimal
    budget_utilization: Decimal
    average_monthly_revenue: Decimal
    last_payment_date: Optional[date] = None
    last_expense_date: Optional[date] = None
    payment_count: int
    expense_count: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class ClientFinancialSummaryListResponse(BaseModel):
    """List of summary rows ordered by revenue."""
    items: List[ClientFinancialSummaryResponse]
    total: int


class SummaryRefreshResponse(BaseModel):
    """Outcome of a manual summary recomputation."""
    refreshed: int
    failed: int


class ClientProfitabilityResponse(BaseModel):
    """Profitability of one client inside a date range."""
    client_id: UUID
    start_date: date
    end_date: date
    total_revenue: Decimal
    total_expenses: Decimal
    net_profit: Decimal
    profit_margin: Decimal
    total_payments: int
    total_expenses_count: int
    average_payment_amount: Decimal
    average_expense_amount: Decimal
    last_payment_date: Optional[date] = None
    last_expense_date: Optional[date] = None


class FinancialOverviewResponse(BaseModel):
    """Organisation-wide financial totals."""
    total_revenue: Decimal
    total_expenses: Decimal
    net_profit: Decimal
    profit_margin: Decimal
    active_budgets: int
    active_clients: int


class MonthlyTrendEntry(BaseModel):
    """Revenue/expense/profit for one calendar month."""
    month: int
    month_name: str
    revenue: Decimal
    expenses: Decimal
    profit: Decimal


class MonthlyTrendsResponse(BaseModel):
    """Twelve monthly buckets for a year."""
    year: int
    months: List[MonthlyTrendEntry]


class BudgetPerformanceEntry(BaseModel):
    """Allocated versus spent for one budget."""
    budget_id: UUID
    name: str
    client_id: UUID
    client_name: Optional[str] = None
    category: Optional[str] = None
    start_date: date
    end_date: date
    allocated: Decimal
    spent: Decimal
    remaining: Decimal
    utilization_rate: Decimal
    variance_percentage: Decimal


class BudgetPerformanceResponse(BaseModel):
    """Budget performance report."""
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    total_budgets: int
    total_allocated: Decimal
    total_spent: Decimal
    total_remaining: Decimal
    average_utilization: Decimal
    budgets: List[BudgetPerformanceEntry]


class PaymentTrackingEntry(BaseModel):
    """One payment line of the tracking report."""
    payment_id: UUID
    client_id: UUID
    client_name: Optional[str] = None
    amount: Decimal
    payment_date: date
    status: PaymentStatus
    payment_method: PaymentMethod
    reference_number: Optional[str] = None
    description: Optional[str] = None


class PaymentTrackingResponse(BaseModel):
    """Payment counts by status and completion rate over a date range."""
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    total_payments: int
    status_counts: Dict[str, int]
    total_amount: Decimal
    completed_amount: Decimal
    completion_rate: Decimal
    payments: List[PaymentTrackingEntry]


class VendorAnalysisEntry(BaseModel):
    """Approved spending with one vendor."""
    vendor_id: UUID
    name: str
    status: VendorStatus
    category: Optional[str] = None
    payment_terms: Optional[str] = None
    total_spending: Decimal
    expense_count: int


class VendorAnalysisResponse(BaseModel):
    """Vendor spending report."""
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    total_vendors: int
    active_vendors: int
    inactive_vendors: int
    total_spending: Decimal
    average_spending: Decimal
    vendors: List[VendorAnalysisEntry]
