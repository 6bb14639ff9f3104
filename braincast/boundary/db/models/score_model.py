"""
User score ORM model.

One row per finished quiz play.

Dependencies: sqlalchemy, braincast.boundary.db.base
System role: Play history and leaderboard source data
"""

from uuid import UUID

from sqlalchemy import ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column

from braincast.boundary.db.base import Base, CreatedAtMixin, UUIDMixin


class UserScoreModel(Base, UUIDMixin, CreatedAtMixin):
    """
    User score ORM model.

    Attributes:
        user_id: Profile that played
        quiz_id: Quiz played
        score: Points earned
        max_score: Points available
        percentage: score / max_score, rounded half up to a whole percent
        time_taken: Seconds spent, if reported
    """

    __tablename__ = "user_scores"

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    quiz_id: Mapped[UUID] = mapped_column(
        ForeignKey("quizzes.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    score: Mapped[int] = mapped_column(Integer, nullable=False)
    max_score: Mapped[int] = mapped_column(Integer, nullable=False)
    percentage: Mapped[int] = mapped_column(Integer, nullable=False)
    time_taken: Mapped[int | None] = mapped_column(Integer, nullable=True)
