"""
The AdventureWorks engine.

One engine per process, bound to ``settings.database_url`` at import time.
Endpoints get sessions from it through the ``get_session`` dependency.
"""

from __future__ import annotations

from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from adventureworks_lab.server.core.config import settings

from .utils import create_engine, create_sessionmaker

engine = create_engine(settings.database_url)
async_session_maker = create_sessionmaker(engine)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency yielding a session that is closed after the request."""
    async with async_session_maker() as session:
        yield session


async def check_connection() -> None:
    """
    Verify that the AdventureWorks database is reachable.

    The database is owned outside this project, so nothing is created here;
    the check only opens a connection and runs a trivial statement.

    Raises:
        sqlalchemy.exc.DBAPIError: If the database cannot be reached.
    """
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))
