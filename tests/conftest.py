# /tests/conftest.py

import os

# Must be set before any `app.*` import: Settings reads the environment at import time.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import httpx
import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.core.db import get_db
from app.main import create_app
from app.models import Base
from app.repositories.classroom_repository import create_classroom
from app.services.auth_service import signup

TEST_PASSWORD = "secret-pass"


@pytest.fixture
async def engine():
    """A fresh in-memory SQLite database with every table created, per test."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(bind=engine, class_=AsyncSession, autoflush=False, expire_on_commit=False)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def app(session_factory):
    application = create_app()

    async def _get_test_db():
        async with session_factory() as session:
            yield session

    application.dependency_overrides[get_db] = _get_test_db
    return application


@pytest.fixture
async def client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver", follow_redirects=False) as c:
        yield c


@pytest.fixture
async def teacher(db):
    return await signup(
        db, full_name="Asha Teacher", username="asha", email="asha@example.com", password=TEST_PASSWORD, role="teacher"
    )


@pytest.fixture
async def student(db):
    return await signup(
        db, full_name="Ravi Student", username="ravi", email="ravi@example.com", password=TEST_PASSWORD, role="student"
    )


@pytest.fixture
async def classroom(db, teacher):
    return await create_classroom(db, name="Class 7B", teacher_id=teacher.id)


async def login(client, username: str, password: str = TEST_PASSWORD) -> httpx.Response:
    return await client.post("/login", data={"username": username, "password": password})
