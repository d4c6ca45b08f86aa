"""
Employee repository.

Read access to ``HumanResources.Employee``.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.adventure_works import Employee
from .base import AsyncQueryBuilder, AsyncReadRepository


class EmployeeRepository(AsyncReadRepository[Employee]):
    """Repository for AdventureWorks employees."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Employee)

    async def get_by_id(self, business_entity_id: int) -> Optional[Employee]:
        return await self.session.get(Employee, business_entity_id)

    async def list(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        filters: Optional[Dict[str, Any]] = None,
    ) -> List[Employee]:
        """List employees in primary key order.

        Args:
            limit: Maximum records to return
            offset: Records to skip
            filters: Field filters (job_title, gender, marital_status, current_flag...)

        Returns:
            List of Employee instances
        """
        stmt = select(Employee).order_by(Employee.business_entity_id)

        if filters:
            stmt = AsyncQueryBuilder.apply_filters(stmt, Employee, filters)

        stmt = AsyncQueryBuilder.apply_pagination(stmt, limit, offset)

        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_by_job_title(self, limit: int) -> List[Employee]:
        """Get the first ``limit`` employees ordered by job title.

        Ties on job title are broken by BusinessEntityID so the page is stable.
        """
        stmt = select(Employee).order_by(Employee.job_title, Employee.business_entity_id).limit(limit)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
