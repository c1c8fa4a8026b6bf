"""
Calendar event model.
"""

from sqlalchemy import Column, String, Text, DateTime, ForeignKey, Enum as SQLEnum
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.sql import func
import uuid
import enum

from app.db.base import Base


class EventType(str, enum.Enum):
    """Calendar event type enumeration."""
    MEETING = "meeting"
    SYNC = "sync"
    BLOCK = "block"
    PERSONAL = "personal"


class CalendarEvent(Base):
    """Calendar event model."""

    __tablename__ = "calendar_events"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    start_time = Column(DateTime(timezone=True), nullable=False, index=True)
    end_time = Column(DateTime(timezone=True), nullable=False)
    type = Column(
        SQLEnum(EventType, values_callable=lambda x: [e.value for e in EventType]),
        nullable=False,
        default=EventType.MEETING,
    )
    client_id = Column(UUID(as_uuid=True), ForeignKey("clients.id", ondelete="SET NULL"), nullable=True, index=True)
    created_by = Column(String(255), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
