"""
Database initialization and bootstrapping.
"""

from sqlalchemy.ext.asyncio import AsyncEngine

from app.db.base import Base
from app.db import session as db_session
from app.core.logging import get_logger

# Registers every model with Base.metadata
import app.models  # noqa: F401

logger = get_logger(__name__)


async def create_tables(bind: AsyncEngine = None) -> None:
    """
    Create all database tables that do not exist yet.
    Uses the application engine unless an explicit one is given.
    """
    if bind is None:
        if db_session.engine is None:
            db_session.create_engine()
        bind = db_session.engine

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("Database tables initialized", extra={"tables": sorted(Base.metadata.tables)})


async def drop_tables(bind: AsyncEngine) -> None:
    """Drop all tables known to the metadata."""
    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    logger.info("Database tables dropped")
