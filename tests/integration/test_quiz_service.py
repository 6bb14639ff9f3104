"""
Test suite for QuizService against an in-memory database.

System role: Verification of the quiz read path and authoring
"""

import asyncio
import uuid
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

import braincast.boundary.db.models  # noqa: F401
from braincast.application.services.quiz_service import QuizService
from braincast.boundary.db.base import Base
from braincast.boundary.db.CRUD.profile_crud import profile_crud
from braincast.boundary.db.CRUD.quiz_crud import QuizCRUD, quiz_crud
from braincast.core.exceptions import NotFoundError, ValidationError
from braincast.models.quiz import CreateQuestionRequest, CreateQuizRequest


@pytest.fixture
def quiz_service(test_async_db) -> QuizService:
    return QuizService(test_async_db)


class TestGetQuiz:
    """Test suite for QuizService.get_quiz()."""

    @pytest.mark.asyncio
    async def test_get_quiz_returns_ordered_questions(
        self, quiz_service: QuizService, make_quiz
    ) -> None:
        quiz = await make_quiz(question_count=3)

        loaded = await quiz_service.get_quiz(quiz.id)

        assert [q.order_index for q in loaded.questions] == [0, 1, 2]
        assert [q.text for q in loaded.questions] == ["Question 0", "Question 1", "Question 2"]

    @pytest.mark.asyncio
    async def test_each_read_increments_plays_by_one(
        self, quiz_service: QuizService, make_quiz
    ) -> None:
        quiz = await make_quiz()

        plays = [(await quiz_service.get_quiz(quiz.id)).plays for _ in range(3)]

        assert plays == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_concurrent_reads_never_lose_or_overshoot_plays(self, tmp_path) -> None:
        engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'plays.db'}", poolclass=NullPool)
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

        async with session_factory() as db:
            quiz = await quiz_crud.create(db, title="Capitals", is_published=True, plays=5)
            await db.commit()

        async def read() -> int:
            async with session_factory() as db:
                return (await QuizService(db).get_quiz(quiz.id)).plays

        readers = 4
        try:
            seen = await asyncio.gather(*(read() for _ in range(readers)))
            async with session_factory() as db:
                final = (await quiz_crud.get_by_id(db, quiz.id)).plays
        finally:
            await engine.dispose()

        assert 5 < final <= 5 + readers
        assert all(5 < plays <= 5 + readers for plays in seen)

    @pytest.mark.asyncio
    async def test_get_quiz_loads_category_and_author(
        self, quiz_service: QuizService, make_quiz, make_category, make_profile
    ) -> None:
        category = await make_category(name="Geography", emoji="🌍")
        author = await make_profile(username="ann", display_name="Ann")
        quiz = await make_quiz(category_id=category.id, creator_id=author.id)

        loaded = await quiz_service.get_quiz(quiz.id)

        assert loaded.category.name == "Geography"
        assert loaded.creator.display_name == "Ann"

    @pytest.mark.asyncio
    async def test_missing_quiz_is_not_found(self, quiz_service: QuizService) -> None:
        with pytest.raises(NotFoundError) as exc_info:
            await quiz_service.get_quiz(uuid.uuid4())

        assert exc_info.value.message == "Quiz not found"


class TestIncrementPlaysStatement:
    """The play counter is bumped by a single UPDATE, never read-modify-write."""

    @pytest.mark.asyncio
    async def test_increment_plays_issues_single_relative_update(self) -> None:
        # Arrange
        session = AsyncMock(spec=AsyncSession)
        result = MagicMock()
        result.scalar_one_or_none = MagicMock(return_value=5)
        session.execute = AsyncMock(return_value=result)

        # Act
        plays = await QuizCRUD().increment_plays(session, uuid.uuid4())

        # Assert
        assert plays == 5
        session.execute.assert_awaited_once()
        sql = str(session.execute.await_args.args[0])
        assert sql.startswith("UPDATE quizzes")
        assert "quizzes.plays +" in sql
        assert "RETURNING quizzes.plays" in sql


class TestListQuizzes:
    """Test suite for QuizService.list_quizzes()."""

    @pytest.mark.asyncio
    async def test_lists_only_published(self, quiz_service: QuizService, make_quiz) -> None:
        published = await make_quiz(title="Published")
        await make_quiz(title="Draft", is_published=False)

        quizzes = await quiz_service.list_quizzes()

        assert [q.id for q in quizzes] == [published.id]

    @pytest.mark.asyncio
    async def test_popular_orders_by_plays(
        self, quiz_service: QuizService, test_async_db, make_quiz
    ) -> None:
        quiet = await make_quiz(title="Quiet")
        busy = await make_quiz(title="Busy")
        await quiz_crud.update_by_id(test_async_db, quiet.id, plays=2)
        await quiz_crud.update_by_id(test_async_db, busy.id, plays=40)
        await test_async_db.commit()

        quizzes = await quiz_service.list_quizzes(sort="popular")

        assert [q.title for q in quizzes] == ["Busy", "Quiet"]

    @pytest.mark.asyncio
    async def test_category_filter_and_pagination(
        self, quiz_service: QuizService, test_async_db, make_quiz, make_category
    ) -> None:
        science = await make_category(name="Science")
        history = await make_category(name="History")
        for plays in range(5):
            quiz = await make_quiz(title=f"Science {plays}", category_id=science.id)
            await quiz_crud.update_by_id(test_async_db, quiz.id, plays=plays)
        await make_quiz(title="Rome", category_id=history.id)
        await test_async_db.commit()

        first_page = await quiz_service.list_quizzes(
            category_id=science.id, sort="popular", limit=2, page=0
        )
        second_page = await quiz_service.list_quizzes(
            category_id=science.id, sort="popular", limit=2, page=1
        )

        assert [q.title for q in first_page] == ["Science 4", "Science 3"]
        assert [q.title for q in second_page] == ["Science 2", "Science 1"]


class TestCategories:
    """Test suite for QuizService.list_categories()."""

    @pytest.mark.asyncio
    async def test_categories_are_ordered_by_name(
        self, quiz_service: QuizService, make_category
    ) -> None:
        for name in ["Sports", "Art", "Music"]:
            await make_category(name=name)

        categories = await quiz_service.list_categories()

        assert [c.name for c in categories] == ["Art", "Music", "Sports"]


class TestCreateQuiz:
    """Test suite for QuizService.create_quiz()."""

    @pytest.mark.asyncio
    async def test_create_quiz_stores_questions_in_order_and_counts_author(
        self, quiz_service: QuizService, test_async_db, make_profile
    ) -> None:
        # Arrange
        author = await make_profile(username="author")
        request = CreateQuizRequest(
            title="Flags",
            questions=[
                CreateQuestionRequest(text="Red maple?", type="multiple-choice", correctAnswer="Canada"),
                CreateQuestionRequest(text="Name five", type="list", correctAnswers=["a", "b"]),
                CreateQuestionRequest(
                    text="Find Paris",
                    type="map",
                    mapUrl="https://maps/eu.png",
                    correctCoordinates={"x": 10, "y": 20},
                ),
            ],
        )

        # Act
        quiz = await quiz_service.create_quiz(author.id, request)

        # Assert
        assert quiz.time_limit == 60
        assert quiz.is_published is True
        assert quiz.creator.username == "author"
        assert [q.text for q in quiz.questions] == ["Red maple?", "Name five", "Find Paris"]
        assert quiz.questions[1].correct_answers == ["a", "b"]
        assert quiz.questions[2].map_coordinates == {"x": 10, "y": 20}

        stored_author = await profile_crud.get_by_id(test_async_db, author.id)
        await test_async_db.refresh(stored_author)
        assert stored_author.quizzes_created == 1

    @pytest.mark.asyncio
    async def test_create_quiz_without_questions_is_rejected(
        self, quiz_service: QuizService, make_profile
    ) -> None:
        author = await make_profile()

        with pytest.raises(ValidationError):
            await quiz_service.create_quiz(author.id, CreateQuizRequest(title="Empty"))

    @pytest.mark.asyncio
    async def test_create_quiz_with_unknown_category_is_not_found(
        self, quiz_service: QuizService, make_profile
    ) -> None:
        author = await make_profile()
        request = CreateQuizRequest(
            title="Lost",
            category_id=999,
            questions=[CreateQuestionRequest(text="Q?", type="multiple-choice")],
        )

        with pytest.raises(NotFoundError):
            await quiz_service.create_quiz(author.id, request)
