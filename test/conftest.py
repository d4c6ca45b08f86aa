from __future__ import annotations

import os
import uuid
from datetime import date, datetime
from typing import AsyncGenerator, List

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

# Point the application at an in-memory SQLite database and keep logs on the
# console before any application module is imported.
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"
os.environ["DATABASE_URL"] = TEST_DATABASE_URL
os.environ["ADVENTUREWORKS_LAB_ENABLE_FILE_LOGGING"] = "false"

from adventureworks_lab.core.database.entities.adventure_works import Employee, Person  # noqa: E402
from adventureworks_lab.core.database.utils import create_all, create_engine, create_sessionmaker  # noqa: E402

JOB_TITLES = [
    "Chief Executive Officer",
    "Vice President of Engineering",
    "Engineering Manager",
    "Senior Tool Designer",
    "Design Engineer",
    "Design Engineer",
    "Research and Development Manager",
    "Production Technician - WC60",
    "Production Technician - WC10",
    "Marketing Assistant",
    "Buyer",
    "Accountant",
]

PEOPLE = [
    ("Ken", "Sánchez"),
    ("Terri", "Duffy"),
    ("Roberto", "Tamburello"),
    ("Rob", "Walters"),
    ("Gail", "Erickson"),
    ("Jossef", "Goldberg"),
    ("Dylan", "Miller"),
    ("Diane", "Margheim"),
    ("Gigi", "Matthew"),
    ("Michael", "Raheem"),
    ("Ovidiu", "Cracium"),
    ("Thierry", "D'Hers"),
]


def build_employees() -> List[Employee]:
    return [
        Employee(
            business_entity_id=i,
            national_id_number=f"{295847284 + i}",
            login_id=f"adventure-works\\employee{i}",
            organization_level=None if i == 1 else 1 + i % 3,
            job_title=title,
            birth_date=date(1970 + i, 1 + i % 12, 1 + i),
            marital_status="S" if i % 2 else "M",
            gender="M" if i % 3 else "F",
            hire_date=date(2008 + i % 5, 1 + i % 12, 10),
            salaried_flag=i < 8,
            vacation_hours=10 * i,
            sick_leave_hours=20 + i,
            current_flag=True,
            rowguid=uuid.UUID(int=i),
            modified_date=datetime(2014, 6, 30),
        )
        for i, title in enumerate(JOB_TITLES, start=1)
    ]


def build_people() -> List[Person]:
    return [
        Person(
            business_entity_id=i,
            person_type="EM",
            first_name=first,
            last_name=last,
            email_promotion=i % 3,
            rowguid=uuid.UUID(int=1000 + i),
            modified_date=datetime(2014, 6, 30),
        )
        for i, (first, last) in enumerate(PEOPLE, start=1)
    ]


@pytest_asyncio.fixture(name="aw_engine")
async def aw_engine_fixture() -> AsyncGenerator[AsyncEngine, None]:
    """In-memory stand-in for the AdventureWorks database."""
    engine = create_engine(TEST_DATABASE_URL)
    await create_all(engine, tables=[Employee.__table__, Person.__table__])
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture(name="aw_session")
async def aw_session_fixture(aw_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    async with create_sessionmaker(aw_engine)() as session:
        yield session


@pytest_asyncio.fixture(name="seeded_aw_session")
async def seeded_aw_session_fixture(aw_session: AsyncSession) -> AsyncSession:
    aw_session.add_all(build_employees())
    aw_session.add_all(build_people())
    await aw_session.commit()
    return aw_session


@pytest_asyncio.fixture(name="client")
async def client_fixture(seeded_aw_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client on the app with the database session overridden."""
    from adventureworks_lab.core.database import get_session
    from adventureworks_lab.server.main import app

    async def get_session_override() -> AsyncGenerator[AsyncSession, None]:
        yield seeded_aw_session

    app.dependency_overrides[get_session] = get_session_override
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def employees() -> List[Employee]:
    return build_employees()


@pytest.fixture
def people() -> List[Person]:
    return build_people()
