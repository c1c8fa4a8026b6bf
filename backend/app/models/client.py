"""
Client model for the sales pipeline.
"""

from sqlalchemy import Column, String, Text, Numeric, DateTime, Enum as SQLEnum
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid
import enum

from app.db.base import Base


class ClientStage(str, enum.Enum):
    """Position of a client in the sales pipeline."""
    PROSPECT = "prospect"
    CONNECTED = "connected"
    REPLIED = "replied"
    MEETING = "meeting"
    PROPOSAL = "proposal"
    CLOSED = "closed"
    LOST = "lost"


class Client(Base):
    """Client model for relationship tracking."""

    __tablename__ = "clients"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    company_name = Column(String(255), nullable=False, index=True)
    contact_name = Column(String(255), nullable=True)
    email = Column(String(255), nullable=True)
    phone = Column(String(50), nullable=True)
    linkedin_url = Column(Text, nullable=True)
    notes = Column(Text, nullable=True)
    stage = Column(
        SQLEnum(ClientStage, values_callable=lambda x: [e.value for e in ClientStage]),
        nullable=False,
        default=ClientStage.PROSPECT,
        index=True,
    )
    deal_value = Column(Numeric(12, 2), nullable=True)
    assigned_to = Column(String(255), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    # Relationships
    budgets = relationship("Budget", back_populates="client", cascade="all, delete-orphan")
    payments = relationship("Payment", back_populates="client", cascade="all, delete-orphan")
    expenses = relationship("Expense", back_populates="client", cascade="all, delete-orphan")
    financial_summary = relationship(
        "ClientFinancialSummary",
        back_populates="client",
        cascade="all, delete-orphan",
        uselist=False,
    )
