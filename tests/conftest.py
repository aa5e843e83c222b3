"""Pytest configuration and fixtures."""

import itertools

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from contact_directory.core.auth import create_user_token
from contact_directory.domain.schemas import PhoneAttributes
from contact_directory.persistence.database import Base, get_db
from contact_directory.persistence.models import *  # noqa: F401, F403
from contact_directory.persistence.models.contact import Contact
from contact_directory.persistence.repositories.contact_repository import ContactRepository
from contact_directory.persistence.repositories.user_repository import UserRepository


@pytest.fixture
async def db_engine():
    """Create an in-memory SQLite engine with the schema in place."""
    # StaticPool keeps every session on the same in-memory database
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    """Session factory bound to the test engine."""
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(session_factory):
    """Create a test database session."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def phones():
    """Home, office and mobile phone submissions."""
    return [
        PhoneAttributes(number="555-0100", phone_type="home"),
        PhoneAttributes(number="555-0101", phone_type="office"),
        PhoneAttributes(number="555-0102", phone_type="mobile"),
    ]


@pytest.fixture
def contact_factory(db_session, phones):
    """Persist contacts with unique emails and three phones each."""
    sequence = itertools.count(1)

    async def create(
        firstname: str = "Jane",
        lastname: str = "Doe",
        email: str | None = None,
        phone_list: list[PhoneAttributes] | None = None,
    ) -> Contact:
        n = next(sequence)
        return await ContactRepository(db_session).create_with_phones(
            firstname=firstname,
            lastname=lastname,
            email=email or f"person{n}@example.com",
            phones=phones if phone_list is None else phone_list,
        )

    return create


@pytest.fixture
async def user(db_session):
    """Regular signed-in user."""
    return await UserRepository(db_session).create(email="user@example.com", role="user")


@pytest.fixture
async def admin(db_session):
    """Administrator."""
    return await UserRepository(db_session).create(email="admin@example.com", role="admin")


@pytest.fixture
def user_headers(user):
    """Authorization headers for the regular user."""
    return {"Authorization": f"Bearer {create_user_token(user.id)}"}


@pytest.fixture
def admin_headers(admin):
    """Authorization headers for the administrator."""
    return {"Authorization": f"Bearer {create_user_token(admin.id)}"}


@pytest.fixture
async def client(db_session):
    """Create a test client talking to the app in-process."""
    from contact_directory.main import app

    app.dependency_overrides[get_db] = lambda: db_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as test_client:
        yield test_client

    app.dependency_overrides.clear()
