"""
Read-side financial analytics: date-bounded client profitability,
organisation-wide overview, monthly trends and the budget performance,
payment tracking and vendor spending reports.
"""

import calendar
from datetime import date
from decimal import Decimal
from typing import Dict, Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import NotFoundError, ValidationFailedError
from app.services.base_service import BaseService
from app.db.repositories.client_repository import ClientRepository
from app.db.repositories.budget_repository import BudgetRepository
from app.db.repositories.payment_repository import PaymentRepository
from app.db.repositories.expense_repository import ExpenseRepository
from app.db.repositories.vendor_repository import VendorRepository
from app.models.client import ClientStage
from app.models.payment import PaymentStatus
from app.models.vendor import VendorStatus
from app.schemas.financial_summary import (
    BudgetPerformanceEntry,
    BudgetPerformanceResponse,
    ClientProfitabilityResponse,
    FinancialOverviewResponse,
    MonthlyTrendEntry,
    MonthlyTrendsResponse,
    PaymentTrackingEntry,
    PaymentTrackingResponse,
    VendorAnalysisEntry,
    VendorAnalysisResponse,
)
from app.utils.financial_math import percentage, round_money, safe_divide, sum_amounts


def _check_range(start_date: Optional[date], end_date: Optional[date]) -> None:
    if start_date is not None and end_date is not None and start_date > end_date:
        raise ValidationFailedError(
            "start_date must be on or before end_date",
            details={"start_date": str(start_date), "end_date": str(end_date)},
        )


class FinancialAnalyticsService(BaseService):
    """Service for financial reporting queries."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.client_repo = ClientRepository(session)
        self.budget_repo = BudgetRepository(session)
        self.payment_repo = PaymentRepository(session)
        self.expense_repo = ExpenseRepository(session)
        self.vendor_repo = VendorRepository(session)

    async def get_client_profitability(
        self,
        client_id: UUID,
        start_date: date,
        end_date: date,
    ) -> ClientProfitabilityResponse:
        """Profitability of one client over an inclusive date range."""
        _check_range(start_date, end_date)
        if not await self.client_repo.exists(client_id):
            raise NotFoundError("Client not found", details={"client_id": str(client_id)})

        payments = await self.payment_repo.list_completed(client_id, start_date, end_date)
        expenses = await self.expense_repo.list_approved(client_id, start_date, end_date)

        revenue = round_money(sum_amounts(p.amount for p in payments))
        spent = round_money(sum_amounts(e.amount for e in expenses))

        return ClientProfitabilityResponse(
            client_id=client_id,
            start_date=start_date,
            end_date=end_date,
            total_revenue=revenue,
            total_expenses=spent,
            net_profit=revenue - spent,
            profit_margin=percentage(revenue - spent, revenue),
            total_payments=len(payments),
            total_expenses_count=len(expenses),
            average_payment_amount=round_money(safe_divide(revenue, len(payments))),
            average_expense_amount=round_money(safe_divide(spent, len(expenses))),
            last_payment_date=max((p.payment_date for p in payments), default=None),
            last_expense_date=max((e.expense_date for e in expenses), default=None),
        )

    async def get_overview(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> FinancialOverviewResponse:
        """Totals across every client, optionally bounded by date."""
        _check_range(start_date, end_date)

        payments = await self.payment_repo.list_completed(start_date=start_date, end_date=end_date)
        expenses = await self.expense_repo.list_approved(start_date=start_date, end_date=end_date)

        revenue = round_money(sum_amounts(p.amount for p in payments))
        spent = round_money(sum_amounts(e.amount for e in expenses))

        return FinancialOverviewResponse(
            total_revenue=revenue,
            total_expenses=spent,
            net_profit=revenue - spent,
            profit_margin=percentage(revenue - spent, revenue),
            active_budgets=await self.budget_repo.count(),
            active_clients=await self.client_repo.count_excluding_stage(ClientStage.LOST),
        )

    async def get_monthly_trends(self, year: int) -> MonthlyTrendsResponse:
        """Revenue, expenses and profit per calendar month of a year."""
        start, end = date(year, 1, 1), date(year, 12, 31)
        revenue = {month: Decimal("0") for month in range(1, 13)}
        spent = {month: Decimal("0") for month in range(1, 13)}

        for payment in await self.payment_repo.list_completed(start_date=start, end_date=end):
            revenue[payment.payment_date.month] += sum_amounts([payment.amount])
        for expense in await self.expense_repo.list_approved(start_date=start, end_date=end):
            spent[expense.expense_date.month] += sum_amounts([expense.amount])

        months = [
            MonthlyTrendEntry(
                month=month,
                month_name=calendar.month_name[month],
                revenue=round_money(revenue[month]),
                expenses=round_money(spent[month]),
                profit=round_money(revenue[month] - spent[month]),
            )
            for month in range(1, 13)
        ]
        return MonthlyTrendsResponse(year=year, months=months)

    async def _client_names(self) -> Dict[UUID, str]:
        return {client.id: client.company_name for client in await self.client_repo.list_all()}

    async def get_budget_performance(
        self,
        client_id: Optional[UUID] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> BudgetPerformanceResponse:
        """Allocated versus spent for every budget whose period overlaps the range."""
        _check_range(start_date, end_date)
        budgets = await self.budget_repo.list_overlapping(client_id, start_date, end_date)
        names = await self._client_names()

        entries = []
        for budget in budgets:
            allocated = round_money(budget.amount)
            spent = round_money(budget.spent_amount)
            remaining = allocated - spent
            entries.append(
                BudgetPerformanceEntry(
                    budget_id=budget.id,
                    name=budget.name,
                    client_id=budget.client_id,
                    client_name=names.get(budget.client_id),
                    category=budget.category,
                    start_date=budget.start_date,
                    end_date=budget.end_date,
                    allocated=allocated,
                    spent=spent,
                    remaining=remaining,
                    utilization_rate=percentage(spent, allocated),
                    variance_percentage=percentage(remaining, allocated),
                )
            )

        total_allocated = sum_amounts(e.allocated for e in entries)
        total_spent = sum_amounts(e.spent for e in entries)
        return BudgetPerformanceResponse(
            start_date=start_date,
            end_date=end_date,
            total_budgets=len(entries),
            total_allocated=round_money(total_allocated),
            total_spent=round_money(total_spent),
            total_remaining=round_money(total_allocated - total_spent),
            average_utilization=round_money(
                safe_divide(sum_amounts(e.utilization_rate for e in entries), len(entries))
            ),
            budgets=entries,
        )

    async def get_payment_tracking(
        self,
        client_id: Optional[UUID] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> PaymentTrackingResponse:
        """Payments of every status inside the range, with counts and completion rate."""
        _check_range(start_date, end_date)
        payments = await self.payment_repo.list_in_range(client_id, start_date, end_date)
        names = await self._client_names()

        status_counts = {s.value: 0 for s in PaymentStatus}
        for payment in payments:
            status_counts[PaymentStatus(payment.status).value] += 1
        completed = [p for p in payments if p.status == PaymentStatus.COMPLETED]

        return PaymentTrackingResponse(
            start_date=start_date,
            end_date=end_date,
            total_payments=len(payments),
            status_counts=status_counts,
            total_amount=round_money(sum_amounts(p.amount for p in payments)),
            completed_amount=round_money(sum_amounts(p.amount for p in completed)),
            completion_rate=percentage(len(completed), len(payments)),
            payments=[
                PaymentTrackingEntry(
                    payment_id=p.id,
                    client_id=p.client_id,
                    client_name=names.get(p.client_id),
                    amount=round_money(p.amount),
                    payment_date=p.payment_date,
                    status=p.status,
                    payment_method=p.payment_method,
                    reference_number=p.reference_number,
                    description=p.description,
                )
                for p in payments
            ],
        )

    async def get_vendor_analysis(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> VendorAnalysisResponse:
        """Approved spending per vendor inside the range, vendors ordered by name."""
        _check_range(start_date, end_date)
        vendors = sorted(await self.vendor_repo.list_all(), key=lambda v: v.name.lower())
        expenses = await self.expense_repo.list_approved(start_date=start_date, end_date=end_date)

        by_vendor: Dict[UUID, list] = {}
        for expense in expenses:
            if expense.vendor_id is not None:
                by_vendor.setdefault(expense.vendor_id, []).append(expense.amount)

        entries = [
            VendorAnalysisEntry(
                vendor_id=vendor.id,
                name=vendor.name,
                status=vendor.status,
                category=vendor.category,
                payment_terms=vendor.payment_terms,
                total_spending=round_money(sum_amounts(by_vendor.get(vendor.id, []))),
                expense_count=len(by_vendor.get(vendor.id, [])),
            )
            for vendor in vendors
        ]
        total_spending = sum_amounts(e.total_spending for e in entries)
        active = sum(1 for v in vendors if v.status == VendorStatus.ACTIVE)

        return VendorAnalysisResponse(
            start_date=start_date,
            end_date=end_date,
            total_vendors=len(vendors),
            active_vendors=active,
            inactive_vendors=len(vendors) - active,
            total_spending=round_money(total_spending),
            average_spending=round_money(safe_divide(total_spending, len(vendors))),
            vendors=entries,
        )
