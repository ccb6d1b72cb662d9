"""Integration test fixtures backed by an in-memory SQLite database.

Every test gets a fresh database with the schema created from model
metadata. Uses polyfactory for test data generation.
"""

from collections.abc import AsyncGenerator

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

from src.tracker.core.db import build_engine
from src.tracker.models import Project
from src.tracker.repositories import ProjectRepository, StoryRepository
from tests.factories import ProjectFactory


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine]:
    """In-memory database shared by one connection for the whole test."""
    test_engine = build_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield test_engine
    await test_engine.dispose()


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Provide an async session for database operations.

    The session does NOT auto-commit; repositories only flush.
    """
    async with AsyncSession(engine, expire_on_commit=False) as session:
        yield session


@pytest.fixture
def project_repo(db_session: AsyncSession) -> ProjectRepository:
    return ProjectRepository(db_session)


@pytest.fixture
def story_repo(db_session: AsyncSession) -> StoryRepository:
    return StoryRepository(db_session)


@pytest.fixture
async def tractor(project_repo: ProjectRepository) -> Project:
    """Persisted project named "Tractor"."""
    return await project_repo.save(ProjectFactory.build(name="Tractor"))


@pytest.fixture
async def interstellar(project_repo: ProjectRepository) -> Project:
    """Second persisted project, for cross-project isolation checks."""
    return await project_repo.save(ProjectFactory.build(name="Interstellar Tractor"))
