"""
Engine, session factory and table helpers.

The same helpers serve the AdventureWorks database (SQL Server through
aioodbc, or SQLite in tests) and the in-memory practice sandbox.

Functions:
- create_engine: async engine for a URL, with per-dialect options
- create_sessionmaker: session factory that keeps objects loaded after commit
- create_all: DDL for a subset of the mapped tables
"""

from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Iterable, Optional

from sqlalchemy import Table
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from .base import Base

# SQL Server schemas used by the AdventureWorks mapping. SQLite has no schemas,
# so they are translated to the default one there.
ADVENTUREWORKS_SCHEMAS = ("HumanResources", "Person")


def is_sqlite_url(db_url: str) -> bool:
    return db_url.startswith("sqlite")


def create_engine(db_url: str) -> AsyncEngine:
    """Create an async SQLAlchemy engine.

    The helper normalizes SQL Server URLs to ensure the async driver is used.
    For example, it rewrites ``mssql://`` and ``mssql+pyodbc://`` to
    ``mssql+aioodbc://``. SQLite URLs get a schema translation map for the
    AdventureWorks schemas and, for in-memory databases, a static pool so
    every session sees the same database.

    Args:
        db_url: Database connection URL

    Returns:
        Configured AsyncEngine instance
    """
    if is_sqlite_url(db_url):
        kwargs = {
            "execution_options": {"schema_translate_map": {schema: None for schema in ADVENTUREWORKS_SCHEMAS}},
            "connect_args": {"check_same_thread": False},
        }
        if ":memory:" in db_url:
            kwargs["poolclass"] = StaticPool
        return create_async_engine(db_url, **kwargs)

    url = re.sub(r"^mssql(?:\+[a-z0-9_]+)?://", "mssql+aioodbc://", db_url, count=1)
    return create_async_engine(url, pool_pre_ping=True)


def create_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Sessions keep loaded rows usable after commit (``expire_on_commit=False``)."""
    return async_sessionmaker(engine, expire_on_commit=False)


async def create_all(engine: AsyncEngine, tables: Optional[Iterable[Table]] = None) -> None:
    """Create tables for the current ORM metadata.

    This is intended for tests and the practice sandbox only. The
    AdventureWorks database is pre-existing and never migrated from here.

    Args:
        engine: Async SQLAlchemy engine
        tables: Restrict creation to these tables (default: all mapped tables)
    """
    selected = list(tables) if tables is not None else None
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all, tables=selected)


def utc_now_naive() -> datetime:
    """Current UTC time without tzinfo, for ``DATETIME`` columns such as ``ModifiedDate``."""
    return datetime.now(timezone.utc).replace(tzinfo=None)
