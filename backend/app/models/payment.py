"""
Payment model: money received from a client.
"""

from sqlalchemy import Column, String, Text, Numeric, Date, DateTime, ForeignKey, Enum as SQLEnum
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid
import enum

from app.db.base import Base


class PaymentMethod(str, enum.Enum):
    """Payment method enumeration."""
    BANK_TRANSFER = "bank_transfer"
    CREDIT_CARD = "credit_card"
    PAYPAL = "paypal"
    CHECK = "check"
    CASH = "cash"


class PaymentStatus(str, enum.Enum):
    """Payment status enumeration. Only COMPLETED counts as revenue."""
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"
    REFUNDED = "refunded"


class Payment(Base):
    """Payment model."""

    __tablename__ = "payments"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    client_id = Column(UUID(as_uuid=True), ForeignKey("clients.id", ondelete="CASCADE"), nullable=False, index=True)
    budget_id = Column(UUID(as_uuid=True), ForeignKey("budgets.id", ondelete="SET NULL"), nullable=True, index=True)
    amount = Column(Numeric(12, 2), nullable=False)
    payment_date = Column(Date, nullable=False, index=True)
    payment_method = Column(
        SQLEnum(PaymentMethod, values_callable=lambda x: [e.value for e in PaymentMethod]),
        nullable=False,
        default=PaymentMethod.BANK_TRANSFER,
    )
    status = Column(
        SQLEnum(PaymentStatus, values_callable=lambda x: [e.value for e in PaymentStatus]),
        nullable=False,
        default=PaymentStatus.PENDING,
        index=True,
    )
    description = Column(Text, nullable=True)
    reference_number = Column(String(100), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    # Relationships
    client = relationship("Client", back_populates="payments")
    budget = relationship("Budget", back_populates="payments")
