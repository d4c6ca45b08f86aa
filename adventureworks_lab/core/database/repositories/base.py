"""
Read-only repository base.

The AdventureWorks database is owned elsewhere, so repositories in this
package never write. ``AsyncReadRepository`` fixes the lookup and listing
contract; ``AsyncQueryBuilder`` holds the statement helpers they share.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

EntityType = TypeVar("EntityType", bound=SQLModel)


class AsyncReadRepository(ABC, Generic[EntityType]):
    """Async lookup and listing over one mapped AdventureWorks table."""

    def __init__(self, session: AsyncSession, model: Type[EntityType]) -> None:
        self.session = session
        self.model = model

    @abstractmethod
    async def get_by_id(self, entity_id: int) -> Optional[EntityType]:
        """Fetch a row by BusinessEntityID, or ``None`` when there is none."""

    @abstractmethod
    async def list(
        self, limit: Optional[int] = None, offset: Optional[int] = None, filters: Optional[Dict[str, Any]] = None
    ) -> List[EntityType]:
        """List rows in key order.

        Args:
            limit: Page size (no limit when ``None``)
            offset: Rows to skip before the page starts
            filters: Equality filters keyed by attribute name
        """


class AsyncQueryBuilder:
    """Helpers shared by the repository ``select`` statements."""

    @staticmethod
    def apply_filters(stmt, model: Type[EntityType], filters: Dict[str, Any]):
        """Add a ``WHERE attribute = value`` clause per filter.

        Unknown attribute names and ``None`` values are skipped.
        """
        for attribute, value in filters.items():
            if value is None or not hasattr(model, attribute):
                continue
            stmt = stmt.where(getattr(model, attribute) == value)
        return stmt

    @staticmethod
    def apply_pagination(stmt, limit: Optional[int], offset: Optional[int]):
        if limit is not None:
            stmt = stmt.limit(limit)
        if offset is not None:
            stmt = stmt.offset(offset)
        return stmt
