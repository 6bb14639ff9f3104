"""
Quiz service orchestrator.

Serves the quiz catalogue: detail reads (which count a play), listings,
categories and quiz authoring.

Dependencies: braincast.boundary.db.CRUD, braincast.core.exceptions
System role: Quiz read path and authoring
"""

import logging
from typing import Literal
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from braincast.boundary.db.CRUD.profile_crud import profile_crud
from braincast.boundary.db.CRUD.quiz_crud import category_crud, question_crud, quiz_crud
from braincast.boundary.db.models.quiz_model import CategoryModel, QuizModel
from braincast.core.exceptions import NotFoundError, ValidationError
from braincast.models.quiz import CreateQuizRequest

logger = logging.getLogger(__name__)

QuizSort = Literal["all", "popular", "new", "trending"]

DEFAULT_TIME_LIMIT = 60


class QuizService:
    """Quiz service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize quiz service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def get_quiz(self, quiz_id: UUID) -> QuizModel:
        """
        Fetch a quiz with its questions and count the read as a play.

        The play counter is bumped with a single atomic increment before the
        quiz is loaded, so the returned plays value includes this read.

        Args:
            quiz_id: Quiz UUID

        Returns:
            QuizModel: Quiz with category, creator and ordered questions loaded

        Raises:
            NotFoundError: Quiz does not exist
        """
        plays = await quiz_crud.increment_plays(self.db, quiz_id)
        if plays is None:
            raise NotFoundError("Quiz not found", entity="quiz", entity_id=quiz_id)

        quiz = await quiz_crud.get_with_details(self.db, quiz_id)
        if quiz is None:
            raise NotFoundError("Quiz not found", entity="quiz", entity_id=quiz_id)

        await self.db.commit()
        logger.debug("Quiz served", extra={"quiz_id": str(quiz_id), "plays": plays})
        return quiz

    async def list_quizzes(
        self,
        category_id: int | None = None,
        sort: QuizSort = "all",
        limit: int = 10,
        page: int = 0,
    ) -> list[QuizModel]:
        """
        List published quizzes.

        Args:
            category_id: Restrict to one category when given
            sort: Listing order
            limit: Page size
            page: 0-based page number

        Returns:
            list[QuizModel]: Quizzes with category and creator loaded
        """
        offset = page * limit
        rows = await quiz_crud.list_published(
            self.db,
            category_id=category_id,
            sort=sort,
            limit=limit,
            offset=offset,
        )
        return list(rows)

    async def list_categories(self) -> list[CategoryModel]:
        """All categories ordered by name."""
        return list(await category_crud.list_by_name(self.db))

    async def create_quiz(self, creator_id: UUID, request: CreateQuizRequest) -> QuizModel:
        """
        Create a published quiz with its questions.

        Args:
            creator_id: Authoring user
            request: Quiz fields and questions

        Returns:
            QuizModel: Created quiz with relationships loaded

        Raises:
            ValidationError: Quiz has no questions
            NotFoundError: Referenced category does not exist
        """
        if not request.questions:
            raise ValidationError("A quiz needs at least one question", field="questions")

        if request.category_id is not None and not await category_crud.exists(
            self.db, request.category_id
        ):
            raise NotFoundError(
                "Category not found",
                entity="category",
                entity_id=request.category_id,
            )

        quiz = await quiz_crud.create(
            self.db,
            title=request.title,
            description=request.description,
            emoji=request.emoji,
            category_id=request.category_id,
            creator_id=creator_id,
            time_limit=request.time_limit or DEFAULT_TIME_LIMIT,
            is_published=True,
        )

        await question_crud.create_many(
            self.db,
            [
                {
                    "quiz_id": quiz.id,
                    "text": question.text,
                    "question_type": question.type,
                    "options": question.options,
                    "correct_answer": question.correct_answer,
                    "correct_answers": question.correct_answers,
                    "image_url": question.image_url,
                    "map_url": question.map_url,
                    "map_coordinates": question.correct_coordinates,
                    "order_index": index,
                }
                for index, question in enumerate(request.questions)
            ],
        )
        await profile_crud.increment_counter(self.db, creator_id, "quizzes_created")
        await self.db.commit()

        logger.info(
            "Quiz created",
            extra={
                "quiz_id": str(quiz.id),
                "creator_id": str(creator_id),
                "question_count": len(request.questions),
            },
        )

        created = await quiz_crud.get_with_details(self.db, quiz.id)
        if created is None:
            raise NotFoundError("Quiz not found", entity="quiz", entity_id=quiz.id)
        return created
