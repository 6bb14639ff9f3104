"""
Quiz, question and category ORM models.

Read-mostly reference data consumed by the quiz read path and by challenges.

Dependencies: sqlalchemy, braincast.boundary.db.base
System role: Quiz catalogue persistence
"""

from uuid import UUID

from sqlalchemy import JSON, Boolean, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from braincast.boundary.db.base import Base, CreatedAtMixin, UUIDMixin, TimestampMixin


class CategoryModel(Base, CreatedAtMixin):
    """
    Quiz category.

    Attributes:
        id: Integer primary key
        name: Category name, used for ordering
        emoji: Icon shown next to the name
        description: Optional blurb
    """

    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    emoji: Mapped[str | None] = mapped_column(String(32), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)


class QuizModel(Base, UUIDMixin, TimestampMixin):
    """
    Quiz ORM model.

    Attributes:
        id: UUID primary key
        title: Quiz title
        description: Optional description
        emoji: Icon
        category_id: Owning category (nullable)
        creator_id: Authoring profile (nullable)
        time_limit: Seconds allowed per play
        is_published: Listed publicly when true
        plays: Number of times the quiz was opened
        questions: Questions ordered by order_index
    """

    __tablename__ = "quizzes"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    emoji: Mapped[str | None] = mapped_column(String(32), nullable=True)
    category_id: Mapped[int | None] = mapped_column(
        ForeignKey("categories.id", ondelete="SET NULL"),
        nullable=True,
    )
    creator_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("profiles.id", ondelete="SET NULL"),
        nullable=True,
    )
    time_limit: Mapped[int] = mapped_column(Integer, nullable=False, default=60)
    is_published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    plays: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    category = relationship("CategoryModel")
    creator = relationship("ProfileModel")
    questions = relationship(
        "QuestionModel",
        back_populates="quiz",
        cascade="all, delete-orphan",
        order_by="QuestionModel.order_index",
    )


class QuestionModel(Base, UUIDMixin, CreatedAtMixin):
    """
    Question ORM model.

    Answer fields are type dependent: multiple choice uses options and
    correct_answer, list quizzes use correct_answers, map quizzes use
    map_url and map_coordinates.
    """

    __tablename__ = "questions"

    quiz_id: Mapped[UUID] = mapped_column(
        ForeignKey("quizzes.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    text: Mapped[str] = mapped_column(Text, nullable=False)
    question_type: Mapped[str] = mapped_column(String(64), nullable=False)
    options: Mapped[list | None] = mapped_column(JSON, nullable=True)
    correct_answer: Mapped[str | None] = mapped_column(Text, nullable=True)
    correct_answers: Mapped[list | None] = mapped_column(JSON, nullable=True)
    image_url: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    map_url: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    map_coordinates: Mapped[dict | None] = mapped_column(JSON, nullable=True)
    order_index: Mapped[int | None] = mapped_column(Integer, nullable=True)

    quiz = relationship("QuizModel", back_populates="questions")
