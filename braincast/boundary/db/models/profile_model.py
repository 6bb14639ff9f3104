"""
Profile ORM model.

Public profile of a BrainCast user, optionally linked to a Farcaster account.

Dependencies: sqlalchemy, braincast.boundary.db.base
System role: User identity and score counters
"""

from sqlalchemy import BigInteger, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from braincast.boundary.db.base import Base, UUIDMixin, TimestampMixin


class ProfileModel(Base, UUIDMixin, TimestampMixin):
    """
    Profile ORM model.

    Attributes:
        id: UUID primary key; this is the user id stored in the session
        fid: Farcaster id, unique when present
        username: Handle shown in the UI
        display_name: Display name
        avatar_url: Profile picture URL
        total_score: Points accumulated from quizzes and challenges
        quizzes_taken: Number of quizzes played
        quizzes_created: Number of quizzes authored
    """

    __tablename__ = "profiles"

    fid: Mapped[int | None] = mapped_column(BigInteger, unique=True, nullable=True)
    username: Mapped[str | None] = mapped_column(String(255), nullable=True)
    display_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    avatar_url: Mapped[str | None] = mapped_column(String(2048), nullable=True)

    total_score: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    quizzes_taken: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    quizzes_created: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
