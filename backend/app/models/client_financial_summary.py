"""
Derived per-client financial summary.
Rows are written only by FinancialSummaryService.recompute.
"""

from sqlalchemy import Column, Integer, Numeric, Date, DateTime, ForeignKey
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid

from app.db.base import Base


class ClientFinancialSummary(Base):
    """One denormalized financial aggregate row per client."""

    __tablename__ = "client_financial_summary"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    client_id = Column(
        UUID(as_uuid=True),
        ForeignKey("clients.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
        index=True,
    )
    total_revenue = Column(Numeric(14, 2), nullable=False, default=0)
    total_expenses = Column(Numeric(14, 2), nullable=False, default=0)
    net_profit = Column(Numeric(14, 2), nullable=False, default=0)
    profit_margin = Column(Numeric(8, 2), nullable=False, default=0)
    total_payments = Column(Numeric(14, 2), nullable=False, default=0)
    total_budgets = Column(Numeric(14, 2), nullable=False, default=0)
    budget_utilization = Column(Numeric(8, 2), nullable=False, default=0)
    average_monthly_revenue = Column(Numeric(14, 2), nullable=False, default=0)
    last_payment_date = Column(Date, nullable=True)
    last_expense_date = Column(Date, nullable=True)
    payment_count = Column(Integer, nullable=False, default=0)
    expense_count = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), index=True)

    # Relationships
    client = relationship("Client", back_populates="financial_summary")
