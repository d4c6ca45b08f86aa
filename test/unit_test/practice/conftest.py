from typing import AsyncGenerator

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession

from adventureworks_lab.practice import PracticeSandbox


@pytest_asyncio.fixture(name="sandbox")
async def sandbox_fixture() -> AsyncGenerator[PracticeSandbox, None]:
    """A freshly seeded practice sandbox per test."""
    async with PracticeSandbox() as sandbox:
        yield sandbox


@pytest_asyncio.fixture(name="practice_session")
async def practice_session_fixture(sandbox: PracticeSandbox) -> AsyncGenerator[AsyncSession, None]:
    async with sandbox.session() as session:
        yield session
