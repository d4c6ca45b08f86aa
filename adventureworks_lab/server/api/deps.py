"""
API Dependencies.

Database session and repository dependencies for the endpoints.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from adventureworks_lab.core.database import get_session
from adventureworks_lab.core.database.repositories import EmployeeRepository, PersonRepository

SessionDep = Annotated[AsyncSession, Depends(get_session)]


def get_employee_repository(session: SessionDep) -> EmployeeRepository:
    return EmployeeRepository(session)


def get_person_repository(session: SessionDep) -> PersonRepository:
    return PersonRepository(session)


EmployeeRepositoryDep = Annotated[EmployeeRepository, Depends(get_employee_repository)]
PersonRepositoryDep = Annotated[PersonRepository, Depends(get_person_repository)]
