"""
AdventureWorks Controllers.

Two demo controllers reading the AdventureWorks2012 database:

- the legacy controller (route ``[controller]``) serves ``Get_Q1`` at
  ``GET /AdventureWorks``;
- the action controller (route ``[controller]/[action]``) serves
  ``GET /AdventureWorks/Get_Q1`` and ``GET /AdventureWorks/Get_Q3``.

Each action is a single read with a fixed ordering and a fixed row limit.
Database failures are left to the global exception handler.
"""

from typing import List

from adventureworks_lab.core.models.io import EmployeeRead, PersonNameRead

from ..core.constant import ADVENTUREWORKS_TAKE
from .controller import ACTION_ROUTE, CONTROLLER_ROUTE, ControllerRouter
from .deps import EmployeeRepositoryDep, PersonRepositoryDep

CONTROLLER_NAME = "AdventureWorks"

legacy_router = ControllerRouter(CONTROLLER_NAME, CONTROLLER_ROUTE)
router = ControllerRouter(CONTROLLER_NAME, ACTION_ROUTE)


async def _employees_by_job_title(employees: EmployeeRepositoryDep) -> List[EmployeeRead]:
    rows = await employees.list_by_job_title(ADVENTUREWORKS_TAKE)
    return [EmployeeRead.model_validate(row) for row in rows]


@legacy_router.action(
    "Get_Q1",
    response_model=List[EmployeeRead],
    summary="Employees by Job Title",
    description="The first 10 employees ordered by job title.",
)
async def legacy_get_q1(employees: EmployeeRepositoryDep) -> List[EmployeeRead]:
    legacy_router.logger.debug("Listing employees by job title")
    return await _employees_by_job_title(employees)


@router.action(
    "Get_Q1",
    response_model=List[EmployeeRead],
    summary="Employees by Job Title",
    description="The first 10 employees ordered by job title.",
)
async def get_q1(employees: EmployeeRepositoryDep) -> List[EmployeeRead]:
    router.logger.debug("Listing employees by job title")
    return await _employees_by_job_title(employees)


@router.action(
    "Get_Q3",
    response_model=List[PersonNameRead],
    summary="People by Last Name",
    description="First name, last name and id of the first 10 people ordered by last name.",
)
async def get_q3(people: PersonRepositoryDep) -> List[PersonNameRead]:
    router.logger.debug("Listing people by last name")
    rows = await people.list_names_by_last_name(ADVENTUREWORKS_TAKE)
    return [PersonNameRead.model_validate(row) for row in rows]
