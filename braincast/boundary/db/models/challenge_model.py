"""
Challenge ORM model.

An asynchronous quiz duel sent from one profile to another.

Dependencies: sqlalchemy, braincast.boundary.db.base
System role: Persistence for the challenge lifecycle
"""

import enum
from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, Enum, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from braincast.boundary.db.base import Base, UUIDMixin, TimestampMixin


class ChallengeStatus(str, enum.Enum):
    """
    Challenge states.

    PENDING: Sent, recipient has not responded
    ACCEPTED: Recipient took the challenge (a score may be attached)
    DECLINED: Recipient refused; terminal
    COMPLETED: Recipient played and was scored; terminal
    """

    PENDING = "pending"
    ACCEPTED = "accepted"
    DECLINED = "declined"
    COMPLETED = "completed"

    @property
    def is_terminal(self) -> bool:
        return self in (ChallengeStatus.DECLINED, ChallengeStatus.COMPLETED)

    @property
    def accepts_score(self) -> bool:
        """Whether a recipient score may be attached when entering this status."""
        return self in (ChallengeStatus.ACCEPTED, ChallengeStatus.COMPLETED)

    def can_transition_to(self, target: "ChallengeStatus") -> bool:
        """Forward-only transition check."""
        return target in _TRANSITIONS[self]


_TRANSITIONS: dict[ChallengeStatus, frozenset[ChallengeStatus]] = {
    ChallengeStatus.PENDING: frozenset(
        {ChallengeStatus.ACCEPTED, ChallengeStatus.DECLINED, ChallengeStatus.COMPLETED}
    ),
    ChallengeStatus.ACCEPTED: frozenset({ChallengeStatus.COMPLETED}),
    ChallengeStatus.DECLINED: frozenset(),
    ChallengeStatus.COMPLETED: frozenset(),
}


class ChallengeModel(Base, UUIDMixin, TimestampMixin):
    """
    Challenge ORM model.

    The recipient controls resolution: only recipient_id may change status or
    attach recipient_score. The sender cannot retract or re-score.

    Attributes:
        id: UUID primary key
        quiz_id: Quiz being played (referenced, not owned)
        sender_id: Profile that issued the challenge
        recipient_id: Profile that resolves it
        status: ChallengeStatus
        sender_score: Score the sender set on the quiz, if known
        recipient_score: Score attached by the recipient (nullable until played)
        expires_at: When the challenge lapses
    """

    __tablename__ = "challenges"

    quiz_id: Mapped[UUID] = mapped_column(
        ForeignKey("quizzes.id", ondelete="CASCADE"),
        nullable=False,
    )
    sender_id: Mapped[UUID] = mapped_column(
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    recipient_id: Mapped[UUID] = mapped_column(
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    status: Mapped[ChallengeStatus] = mapped_column(
        Enum(
            ChallengeStatus,
            native_enum=False,
            values_callable=lambda statuses: [status.value for status in statuses],
        ),
        nullable=False,
        default=ChallengeStatus.PENDING,
    )
    sender_score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    recipient_score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    expires_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    sender = relationship("ProfileModel", foreign_keys=[sender_id])
    recipient = relationship("ProfileModel", foreign_keys=[recipient_id])
    quiz = relationship("QuizModel")
