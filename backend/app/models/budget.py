"""
Budget model: an amount allocated to a client over a date range.
"""

from sqlalchemy import Column, String, Text, Numeric, Date, DateTime, ForeignKey, Enum as SQLEnum
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid
import enum

from app.db.base import Base


class BudgetPeriod(str, enum.Enum):
    """Budget period enumeration."""
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    YEARLY = "yearly"


class Budget(Base):
    """Budget model."""

    __tablename__ = "budgets"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    client_id = Column(UUID(as_uuid=True), ForeignKey("clients.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)
    period = Column(
        SQLEnum(BudgetPeriod, values_callable=lambda x: [e.value for e in BudgetPeriod]),
        nullable=False,
        default=BudgetPeriod.MONTHLY,
    )
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    category = Column(String(100), nullable=True)
    description = Column(Text, nullable=True)
    spent_amount = Column(Numeric(12, 2), nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    # Relationships
    client = relationship("Client", back_populates="budgets")
    payments = relationship("Payment", back_populates="budget", passive_deletes=True)
    expenses = relationship("Expense", back_populates="budget", passive_deletes=True)
