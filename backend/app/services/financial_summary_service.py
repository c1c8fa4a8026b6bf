"""
Financial summary recomputation.

Each client owns exactly one ClientFinancialSummary row. The row is derived from
the client's payments, expenses and budgets and is rewritten whenever one of
those changes. Services that mutate financial rows call
``FinancialSummaryService.refresh_after_mutation`` right after committing.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.services.base_service import BaseService
from app.db.repositories.client_repository import ClientRepository
from app.db.repositories.budget_repository import BudgetRepository
from app.db.repositories.payment_repository import PaymentRepository
from app.db.repositories.expense_repository import ExpenseRepository
from app.db.repositories.financial_summary_repository import FinancialSummaryRepository
from app.models.budget import Budget
from app.models.expense import Expense, ExpenseStatus
from app.models.payment import Payment, PaymentStatus
from app.schemas.financial_summary import (
    ClientFinancialSummaryResponse,
    SummaryRefreshResponse,
)
from app.utils.financial_math import (
    months_spanned,
    percentage,
    round_money,
    safe_divide,
    sum_amounts,
)

logger = logging.getLogger(__name__)

SUMMARY_FIELDS = (
    "total_revenue",
    "total_expenses",
    "net_profit",
    "profit_margin",
    "total_payments",
    "total_budgets",
    "budget_utilization",
    "average_monthly_revenue",
    "last_payment_date",
    "last_expense_date",
    "payment_count",
    "expense_count",
)


def compute_financial_summary(
    payments: Iterable[Payment],
    expenses: Iterable[Expense],
    budgets: Iterable[Budget],
) -> Dict[str, Any]:
    """
    Derive the summary values of one client from its source rows.

    Only completed payments count as revenue and only approved expenses count
    as spending. Budgets count regardless of state. Each table is aggregated on
    its own, so a client with several budgets does not multiply its revenue.

    Args:
        payments: All payments of the client
        expenses: All expenses of the client
        budgets: All budgets of the client

    Returns:
        Mapping of ClientFinancialSummary column name to value
    """
    completed = [p for p in payments if p.status == PaymentStatus.COMPLETED]
    approved = [e for e in expenses if e.status == ExpenseStatus.APPROVED]

    revenue = round_money(sum_amounts(p.amount for p in completed))
    spent = round_money(sum_amounts(e.amount for e in approved))
    total_budgets = round_money(sum_amounts(b.amount for b in budgets))

    payment_dates = [p.payment_date for p in completed if p.payment_date is not None]
    expense_dates = [e.expense_date for e in approved if e.expense_date is not None]

    # Undated payments still count as revenue; the month span comes from the
    # dated ones, and revenue with no dated payment at all spans one month.
    months = months_spanned(min(payment_dates), max(payment_dates)) if payment_dates else 1
    average_monthly_revenue = round_money(safe_divide(revenue, months))

    return {
        "total_revenue": revenue,
        "total_expenses": spent,
        "net_profit": revenue - spent,
        "profit_margin": percentage(revenue - spent, revenue),
        "total_payments": revenue,
        "total_budgets": total_budgets,
        "budget_utilization": percentage(spent, total_budgets),
        "average_monthly_revenue": average_monthly_revenue,
        "last_payment_date": max(payment_dates) if payment_dates else None,
        "last_expense_date": max(expense_dates) if expense_dates else None,
        "payment_count": len(completed),
        "expense_count": len(approved),
    }


class FinancialSummaryService(BaseService):
    """Service that owns the client_financial_summary table."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.client_repo = ClientRepository(session)
        self.budget_repo = BudgetRepository(session)
        self.payment_repo = PaymentRepository(session)
        self.expense_repo = ExpenseRepository(session)
        self.summary_repo = FinancialSummaryRepository(session)

    async def recompute(self, client_id: UUID) -> Optional[ClientFinancialSummaryResponse]:
        """
        Recompute and upsert the summary of one client.

        The row is only written when a derived value changed, so running this
        twice over unchanged source rows leaves the row untouched.

        Returns:
            The current summary, or None when the client does not exist
        """
        if not await self.client_repo.exists(client_id):
            logger.info("Skipping summary recomputation for missing client", extra={"client_id": str(client_id)})
            return None

        values = compute_financial_summary(
            await self.payment_repo.list_by_client(client_id),
            await self.expense_repo.list_by_client(client_id),
            await self.budget_repo.list_by_client(client_id),
        )

        existing = await self.summary_repo.get_by_client(client_id)
        if existing is not None and all(getattr(existing, field) == values[field] for field in SUMMARY_FIELDS):
            return ClientFinancialSummaryResponse.model_validate(existing)

        values["updated_at"] = datetime.now(timezone.utc)
        summary = await self.summary_repo.upsert(client_id, **values)
        await self.session.commit()
        await self.session.refresh(summary)

        logger.info(
            "Financial summary recomputed",
            extra={
                "client_id": str(client_id),
                "total_revenue": str(values["total_revenue"]),
                "total_expenses": str(values["total_expenses"]),
            },
        )
        return ClientFinancialSummaryResponse.model_validate(summary)

    async def refresh_after_mutation(self, *client_ids: Optional[UUID]) -> None:
        """
        Recompute summaries after a payment, expense or budget write was committed.

        A failure here never undoes the originating write: the session is rolled
        back, the error is logged, and the stale summary is corrected by the next
        write for that client.
        """
        if not settings.SUMMARY_RECOMPUTE_ENABLED:
            return

        for client_id in dict.fromkeys(cid for cid in client_ids if cid is not None):
            try:
                await self.recompute(client_id)
            except Exception:
                await self.session.rollback()
                logger.exception(
                    "Financial summary recomputation failed",
                    extra={"client_id": str(client_id)},
                )

    async def recompute_all(self) -> SummaryRefreshResponse:
        """Recompute the summary of every client."""
        refreshed = 0
        failed = 0
        for client_id in await self.client_repo.list_ids():
            try:
                await self.recompute(client_id)
                refreshed += 1
            except Exception:
                await self.session.rollback()
                failed += 1
                logger.exception(
                    "Financial summary recomputation failed",
                    extra={"client_id": str(client_id)},
                )
        return SummaryRefreshResponse(refreshed=refreshed, failed=failed)

    async def get_summary(self, client_id: UUID) -> Optional[ClientFinancialSummaryResponse]:
        """Get the stored summary of a client."""
        summary = await self.summary_repo.get_by_client(client_id)
        if not summary:
            return None
        return ClientFinancialSummaryResponse.model_validate(summary)

    async def list_summaries(self) -> List[ClientFinancialSummaryResponse]:
        """All stored summaries, highest revenue first."""
        summaries = await self.summary_repo.list_by_revenue()
        return [ClientFinancialSummaryResponse.model_validate(s) for s in summaries]
