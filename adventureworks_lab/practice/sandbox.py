"""
Practice sandbox.

An isolated in-memory SQLite database holding the practice schema and its
seed data. Every sandbox is a separate database: attempts executed in one
cannot be observed from another.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from adventureworks_lab.core.database.entities.practice import PRACTICE_MODELS
from adventureworks_lab.core.database.utils import create_all, create_engine, create_sessionmaker
from adventureworks_lab.core.logging_config import get_logger

from .seed import seed

logger = get_logger(__name__)

SANDBOX_URL = "sqlite+aiosqlite:///:memory:"


class PracticeSandbox:
    """
    Seeded practice database, used as an async context manager.

    Example:
        ```python
        async with PracticeSandbox() as sandbox:
            async with sandbox.session() as session:
                report = await verify_problem(session, problem)
        ```
    """

    def __init__(self, db_url: str = SANDBOX_URL) -> None:
        self.db_url = db_url
        self._engine: Optional[AsyncEngine] = None
        self._session_maker: Optional[async_sessionmaker[AsyncSession]] = None

    async def start(self) -> None:
        """Create the practice tables and load the seed data."""
        self._engine = create_engine(self.db_url)
        self._session_maker = create_sessionmaker(self._engine)
        await create_all(self._engine, tables=[model.__table__ for model in PRACTICE_MODELS])
        async with self._session_maker() as session:
            count = await seed(session)
        logger.debug(f"Practice sandbox ready with {count} seed rows")

    async def close(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            self._session_maker = None

    def session(self) -> AsyncSession:
        """Open a new session on the sandbox database."""
        if self._session_maker is None:
            raise RuntimeError("Practice sandbox is not started")
        return self._session_maker()

    async def __aenter__(self) -> "PracticeSandbox":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
