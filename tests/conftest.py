"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory async database, entity factories, API client with
session sign-in, service mocks
Dependencies: pytest, pytest-asyncio, sqlalchemy, aiosqlite, fastapi
System role: Test infrastructure and fixture management
"""

from datetime import datetime, timezone
from types import SimpleNamespace
from unittest.mock import AsyncMock
import uuid

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
async def test_engine():
    """
    Create in-memory SQLite async engine with all tables.

    Yields:
        AsyncEngine: Engine sharing one connection across sessions
    """
    from sqlalchemy.ext.asyncio import create_async_engine
    from sqlalchemy.pool import StaticPool
    from braincast.boundary.db.base import Base
    import braincast.boundary.db.models  # noqa: F401

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def test_session_factory(test_engine):
    """Session factory bound to the test engine."""
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

    return async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )


@pytest.fixture
async def test_async_db(test_session_factory):
    """
    Create a session on the in-memory SQLite database.

    Yields:
        AsyncSession: Test database session with cleanup
    """
    async with test_session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def make_profile(test_async_db):
    """
    Factory inserting a profile.

    Usage:
        alice = await make_profile(username="alice")
    """
    from braincast.boundary.db.CRUD.profile_crud import profile_crud

    async def _make(**values):
        values.setdefault("username", f"user-{uuid.uuid4().hex[:8]}")
        values.setdefault("display_name", values["username"].title())
        profile = await profile_crud.create(test_async_db, **values)
        await test_async_db.commit()
        return profile

    return _make


@pytest.fixture
def make_category(test_async_db):
    """Factory inserting a category."""
    from braincast.boundary.db.CRUD.quiz_crud import category_crud

    async def _make(name: str = "Geography", emoji: str = "🌍"):
        category = await category_crud.create(test_async_db, name=name, emoji=emoji)
        await test_async_db.commit()
        return category

    return _make


@pytest.fixture
def make_quiz(test_async_db):
    """
    Factory inserting a quiz with numbered multiple-choice questions.

    Questions are inserted in reverse order_index so ordering is observable.
    """
    from braincast.boundary.db.CRUD.quiz_crud import question_crud, quiz_crud

    async def _make(title: str = "Capitals", question_count: int = 3, **values):
        values.setdefault("is_published", True)
        quiz = await quiz_crud.create(test_async_db, title=title, **values)
        await question_crud.create_many(
            test_async_db,
            [
                {
                    "quiz_id": quiz.id,
                    "text": f"Question {index}",
                    "question_type": "multiple-choice",
                    "options": ["a", "b", "c"],
                    "correct_answer": "a",
                    "order_index": index,
                }
                for index in reversed(range(question_count))
            ],
        )
        await test_async_db.commit()
        return quiz

    return _make


@pytest.fixture
def now() -> datetime:
    return datetime.now(timezone.utc)


@pytest.fixture
def app():
    """Fresh application with dependency overrides cleared after the test."""
    from braincast.api.main import create_app

    application = create_app()
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def signed_in_client(app):
    """
    Build a TestClient whose session cookie holds the given user id.

    Signs in through the development session endpoint with a stubbed
    profile service.

    Usage:
        client = signed_in_client(user_id)
    """
    from braincast.api.deps.dependencies import get_profile_service

    def _sign_in(user_id: uuid.UUID) -> TestClient:
        profile_service = AsyncMock()
        profile_service.get_profile.return_value = SimpleNamespace(id=user_id)
        app.dependency_overrides[get_profile_service] = lambda: profile_service

        test_client = TestClient(app)
        response = test_client.post("/api/auth/dev-session", json={"user_id": str(user_id)})
        assert response.status_code == 200
        del app.dependency_overrides[get_profile_service]
        return test_client

    return _sign_in
