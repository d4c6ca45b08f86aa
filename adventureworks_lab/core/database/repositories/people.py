"""
Person repository.

Read access to ``Person.Person``, including the name projection served by
the AdventureWorks action controller.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.adventure_works import Person
from .base import AsyncQueryBuilder, AsyncReadRepository


class PersonRepository(AsyncReadRepository[Person]):
    """Repository for AdventureWorks people."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Person)

    async def get_by_id(self, business_entity_id: int) -> Optional[Person]:
        return await self.session.get(Person, business_entity_id)

    async def list(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        filters: Optional[Dict[str, Any]] = None,
    ) -> List[Person]:
        """List people in primary key order.

        Args:
            limit: Maximum records to return
            offset: Records to skip
            filters: Field filters (person_type, last_name, first_name...)

        Returns:
            List of Person instances
        """
        stmt = select(Person).order_by(Person.business_entity_id)

        if filters:
            stmt = AsyncQueryBuilder.apply_filters(stmt, Person, filters)

        stmt = AsyncQueryBuilder.apply_pagination(stmt, limit, offset)

        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_names_by_last_name(self, limit: int) -> List[Dict[str, Any]]:
        """Project people to first name, last name and id, ordered by last name.

        Only the three projected columns are selected.

        Returns:
            Dictionaries with ``firstname``, ``lastname`` and ``employee_id`` keys
        """
        stmt = (
            select(
                Person.first_name.label("firstname"),
                Person.last_name.label("lastname"),
                Person.business_entity_id.label("employee_id"),
            )
            .order_by(Person.last_name, Person.business_entity_id)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [dict(row) for row in result.mappings().all()]
