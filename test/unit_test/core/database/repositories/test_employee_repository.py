"""Unit tests for EmployeeRepository."""

import pytest

from adventureworks_lab.core.database.repositories import EmployeeRepository


@pytest.fixture
def repo(seeded_aw_session) -> EmployeeRepository:
    return EmployeeRepository(seeded_aw_session)


class TestEmployeeRepository:
    async def test_get_by_id(self, repo, employees):
        employee = await repo.get_by_id(3)

        assert employee is not None
        assert employee.job_title == employees[2].job_title
        assert employee.rowguid == employees[2].rowguid

    async def test_get_by_id_missing(self, repo):
        assert await repo.get_by_id(999) is None

    async def test_list_in_primary_key_order(self, repo, employees):
        result = await repo.list()

        assert [e.business_entity_id for e in result] == [e.business_entity_id for e in employees]

    async def test_list_with_pagination(self, repo):
        result = await repo.list(limit=3, offset=2)

        assert [e.business_entity_id for e in result] == [3, 4, 5]

    async def test_list_with_filters(self, repo):
        result = await repo.list(filters={"job_title": "Design Engineer", "unknown_field": "ignored"})

        assert [e.business_entity_id for e in result] == [5, 6]

    async def test_list_by_job_title(self, repo, employees):
        expected = [
            e.business_entity_id for e in sorted(employees, key=lambda e: (e.job_title, e.business_entity_id))
        ][:10]

        result = await repo.list_by_job_title(10)

        assert len(result) == 10
        assert [e.business_entity_id for e in result] == expected

    async def test_list_by_job_title_breaks_ties_by_id(self, repo):
        result = await repo.list_by_job_title(10)

        titles = [e.job_title for e in result]
        assert titles == sorted(titles)
        design_engineers = [e.business_entity_id for e in result if e.job_title == "Design Engineer"]
        assert design_engineers == [5, 6]

    async def test_list_by_job_title_fewer_rows_than_limit(self, repo, employees):
        result = await repo.list_by_job_title(100)

        assert len(result) == len(employees)
