"""
Database access.

- entities: mapped AdventureWorks tables and the practice schema
- repositories: read-only AdventureWorks queries
- session: the process-wide engine bound to ``DATABASE_URL``
- utils: engine and table helpers, also used by the practice sandbox
"""

from .base import Base
from .session import (
    async_session_maker,
    check_connection,
    engine,
    get_session,
)
from .utils import (
    create_all,
    create_engine,
    create_sessionmaker,
)

__all__ = [
    "Base",
    "async_session_maker",
    "check_connection",
    "create_all",
    "create_engine",
    "create_sessionmaker",
    "engine",
    "get_session",
]
