"""
Journal entry model for the team's daily log.
"""

from sqlalchemy import Column, String, Text, Date, DateTime, JSON
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.sql import func
import uuid

from app.db.base import Base


class JournalEntry(Base):
    """Journal entry model."""

    __tablename__ = "journal_entries"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    entry_date = Column(Date, nullable=False, index=True)
    category = Column(String(100), nullable=False, default="general", index=True)
    mood = Column(String(50), nullable=True)
    tags = Column(JSON, nullable=False, default=list)
    author = Column(String(255), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())
