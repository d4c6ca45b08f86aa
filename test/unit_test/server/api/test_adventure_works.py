"""Endpoint tests for the AdventureWorks controllers."""

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio

EMPLOYEE_KEYS = {
    "businessEntityId",
    "nationalIdNumber",
    "loginId",
    "organizationLevel",
    "jobTitle",
    "birthDate",
    "maritalStatus",
    "gender",
    "hireDate",
    "salariedFlag",
    "vacationHours",
    "sickLeaveHours",
    "currentFlag",
    "rowguid",
    "modifiedDate",
}


def employees_by_job_title(employees):
    return sorted(employees, key=lambda e: (e.job_title, e.business_entity_id))[:10]


@pytest.mark.parametrize("path", ["/AdventureWorks", "/AdventureWorks/Get_Q1"])
async def test_get_q1(client: AsyncClient, employees, path):
    response = await client.get(path)

    assert response.status_code == 200
    data = response.json()
    assert len(data) == 10
    assert [row["businessEntityId"] for row in data] == [
        e.business_entity_id for e in employees_by_job_title(employees)
    ]


async def test_get_q1_serializes_camel_case(client: AsyncClient):
    response = await client.get("/AdventureWorks/Get_Q1")

    first = response.json()[0]
    assert set(first) == EMPLOYEE_KEYS
    assert first["jobTitle"] == "Accountant"
    assert first["birthDate"] == "1982-01-13"
    assert first["salariedFlag"] is False


async def test_legacy_and_action_routes_agree(client: AsyncClient):
    legacy = await client.get("/AdventureWorks")
    action = await client.get("/AdventureWorks/Get_Q1")

    assert legacy.json() == action.json()


async def test_get_q3(client: AsyncClient, people):
    response = await client.get("/AdventureWorks/Get_Q3")

    assert response.status_code == 200
    data = response.json()
    expected = sorted(people, key=lambda p: (p.last_name, p.business_entity_id))[:10]
    assert data == [
        {"firstname": p.first_name, "lastname": p.last_name, "employee_id": p.business_entity_id} for p in expected
    ]


async def test_get_q3_only_projects_names(client: AsyncClient):
    response = await client.get("/AdventureWorks/Get_Q3")

    for row in response.json():
        assert set(row) == {"firstname", "lastname", "employee_id"}


async def test_unknown_action_not_found(client: AsyncClient):
    response = await client.get("/AdventureWorks/Get_Q2")

    assert response.status_code == 404


async def test_only_get_is_allowed(client: AsyncClient):
    response = await client.post("/AdventureWorks/Get_Q1")

    assert response.status_code == 405
