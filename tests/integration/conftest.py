"""Integration test fixtures for database and HTTP client operations.

Every test gets a fresh in-memory SQLite database built from the model
metadata, including the partial unique indexes on live rows.
"""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

from src.classroom.api.dependencies import get_db_session, get_repository_client_factory
from src.classroom.core.db import get_session
from src.classroom.core.security import create_access_token
from src.classroom.main import create_app
from src.classroom.models import Organization, User
from src.classroom.repositories import (
    AssignmentInvitationRepository,
    AssignmentRepository,
    DeadlineRepository,
    GroupAssignmentRepository,
    UserRepository,
)
from src.classroom.services import (
    AssignmentService,
    AssignmentValidationPipeline,
    UniquenessChecker,
)
from tests.helpers import FakeRepositoryClient, create_organization_with_creator


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine]:
    """Create an in-memory database with all tables."""
    test_engine = create_async_engine(
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
    """Provide a session configured like the application's."""
    async with get_session(engine) as session:
        yield session


@pytest.fixture
async def owners(db_session: AsyncSession) -> tuple[Organization, User]:
    """An organization and a user who creates assignments in it."""
    return await create_organization_with_creator(db_session)


@pytest.fixture
def organization(owners: tuple[Organization, User]) -> Organization:
    return owners[0]


@pytest.fixture
def creator(owners: tuple[Organization, User]) -> User:
    return owners[1]


@pytest.fixture
def assignment_repo(db_session: AsyncSession) -> AssignmentRepository:
    return AssignmentRepository(db_session)


@pytest.fixture
def group_assignment_repo(db_session: AsyncSession) -> GroupAssignmentRepository:
    return GroupAssignmentRepository(db_session)


@pytest.fixture
def uniqueness_checker(assignment_repo, group_assignment_repo) -> UniquenessChecker:
    return UniquenessChecker(assignment_repo, group_assignment_repo)


@pytest.fixture
def assignment_service(
    db_session: AsyncSession,
    assignment_repo: AssignmentRepository,
    uniqueness_checker: UniquenessChecker,
    fake_client: FakeRepositoryClient,
) -> AssignmentService:
    """AssignmentService wired to the test database and the fake GitHub client."""
    pipeline = AssignmentValidationPipeline(uniqueness_checker, lambda user: fake_client)
    return AssignmentService(
        assignment_repo,
        AssignmentInvitationRepository(db_session),
        DeadlineRepository(db_session),
        UserRepository(db_session),
        pipeline,
        db_session,
    )


@pytest.fixture
async def client(
    engine: AsyncEngine, fake_client: FakeRepositoryClient
) -> AsyncGenerator[AsyncClient]:
    """HTTP client against the app with the database and GitHub overridden."""
    app = create_app()

    async def override_get_db_session() -> AsyncGenerator[AsyncSession]:
        async with get_session(engine) as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    app.dependency_overrides[get_repository_client_factory] = lambda: lambda user: fake_client

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(creator: User) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(creator.id)}"}
