"""
Quiz, question and category CRUD operations.

Dependencies: sqlalchemy, braincast.boundary.db.models
System role: Quiz catalogue persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from braincast.boundary.db.CRUD.base_crud import BaseCRUD
from braincast.boundary.db.models.quiz_model import CategoryModel, QuestionModel, QuizModel


class QuizCRUD(BaseCRUD[QuizModel]):
    """CRUD operations for QuizModel."""

    def __init__(self) -> None:
        """Initialize QuizCRUD with QuizModel."""
        super().__init__(QuizModel)

    async def get_with_details(self, session: AsyncSession, quiz_id: UUID) -> QuizModel | None:
        """
        Retrieve a quiz with category, author and ordered questions loaded.

        Args:
            session: Async database session
            quiz_id: Quiz UUID

        Returns:
            QuizModel with relationships loaded, None if not found
        """
        stmt = (
            select(QuizModel)
            .where(QuizModel.id == quiz_id)
            .options(
                selectinload(QuizModel.category),
                selectinload(QuizModel.creator),
                selectinload(QuizModel.questions),
            )
            .execution_options(populate_existing=True)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def increment_plays(self, session: AsyncSession, quiz_id: UUID) -> int | None:
        """
        Atomically add one to the play counter.

        Returns:
            New play count, None if the quiz does not exist
        """
        stmt = (
            update(QuizModel)
            .where(QuizModel.id == quiz_id)
            .values(plays=QuizModel.plays + 1)
            .returning(QuizModel.plays)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_published(
        self,
        session: AsyncSession,
        category_id: int | None = None,
        sort: str = "all",
        limit: int = 10,
        offset: int = 0,
    ) -> Sequence[QuizModel]:
        """
        List published quizzes with category and author loaded.

        Args:
            session: Async database session
            category_id: Restrict to one category when given
            sort: "popular" (plays), "new" (created_at), "trending" (plays then
                created_at) or "all" (store order)
            limit: Page size
            offset: Rows to skip

        Returns:
            Sequence of QuizModel
        """
        stmt = (
            select(QuizModel)
            .where(QuizModel.is_published.is_(True))
            .options(selectinload(QuizModel.category), selectinload(QuizModel.creator))
        )
        if category_id is not None:
            stmt = stmt.where(QuizModel.category_id == category_id)

        if sort == "popular":
            stmt = stmt.order_by(QuizModel.plays.desc())
        elif sort == "new":
            stmt = stmt.order_by(QuizModel.created_at.desc())
        elif sort == "trending":
            stmt = stmt.order_by(QuizModel.plays.desc(), QuizModel.created_at.desc())

        stmt = stmt.offset(offset).limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()


class QuestionCRUD(BaseCRUD[QuestionModel]):
    """CRUD operations for QuestionModel."""

    def __init__(self) -> None:
        """Initialize QuestionCRUD with QuestionModel."""
        super().__init__(QuestionModel)

    async def create_many(
        self,
        session: AsyncSession,
        rows: list[dict],
    ) -> list[QuestionModel]:
        """Insert several questions in one flush."""
        instances = [QuestionModel(**row) for row in rows]
        session.add_all(instances)
        await session.flush()
        return instances


class CategoryCRUD(BaseCRUD[CategoryModel]):
    """CRUD operations for CategoryModel."""

    def __init__(self) -> None:
        """Initialize CategoryCRUD with CategoryModel."""
        super().__init__(CategoryModel)

    async def list_by_name(self, session: AsyncSession) -> Sequence[CategoryModel]:
        """All categories ordered alphabetically."""
        result = await session.execute(select(CategoryModel).order_by(CategoryModel.name))
        return result.scalars().all()


quiz_crud = QuizCRUD()
question_crud = QuestionCRUD()
category_crud = CategoryCRUD()
