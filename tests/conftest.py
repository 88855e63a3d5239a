"""
Shared pytest fixtures.

Every test gets a fresh in-memory SQLite database (aiosqlite) with the
projects/tasks schema applied and foreign keys enabled.
"""
import os

# must be set before tracker.core.config is imported
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from typing import AsyncGenerator  # noqa: E402

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession  # noqa: E402

from tracker.core.database import init_db, make_engine, make_sessionmaker  # noqa: E402
from tracker.repositories.project_repository import SqlProjectRepository  # noqa: E402
from tracker.repositories.task_repository import SqlTaskRepository  # noqa: E402


@pytest.fixture()
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    engine = make_engine("sqlite+aiosqlite:///:memory:")
    await init_db(engine)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture()
async def session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    async with make_sessionmaker(engine)() as session:
        yield session


@pytest.fixture()
def project_repo(session: AsyncSession) -> SqlProjectRepository:
    return SqlProjectRepository(session)


@pytest.fixture()
def task_repo(session: AsyncSession) -> SqlTaskRepository:
    return SqlTaskRepository(session)
