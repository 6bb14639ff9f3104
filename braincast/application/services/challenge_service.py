"""
Challenge service orchestrator.

Runs the challenge lifecycle: create, decline, recipient status updates and
inbox listings.

Completing a challenge with both scores known credits challenge points to
the winner, or to both players on a draw, in the same transaction.

Only the recipient resolves a challenge. Status moves forward along
pending -> accepted -> completed, or pending -> declined, and never leaves a
terminal state. Every write re-checks recipient and expected status in the
UPDATE itself, so two racing updates cannot both succeed.

Dependencies: braincast.boundary.db.CRUD, braincast.core.exceptions
System role: Challenge state machine
"""

import logging
from datetime import timedelta
from typing import Literal
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from braincast.boundary.db.base import utc_now
from braincast.boundary.db.CRUD.challenge_crud import challenge_crud
from braincast.boundary.db.CRUD.profile_crud import profile_crud
from braincast.boundary.db.CRUD.quiz_crud import quiz_crud
from braincast.boundary.db.models.challenge_model import ChallengeModel, ChallengeStatus
from braincast.core.exceptions import (
    InvalidStateError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)

logger = logging.getLogger(__name__)

ChallengeListFilter = Literal["active", "sent", "history"]

CHALLENGE_TTL = timedelta(days=7)
WIN_POINTS = 3
DRAW_POINTS = 1


class ChallengeService:
    """Challenge service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize challenge service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def _award_points(self, challenge: ChallengeModel) -> None:
        """
        Credit challenge points to total_score once both scores are known.

        The higher score earns WIN_POINTS; a draw earns DRAW_POINTS each.
        """
        sender_score = challenge.sender_score
        recipient_score = challenge.recipient_score
        if sender_score is None or recipient_score is None:
            return

        if sender_score > recipient_score:
            awards = {challenge.sender_id: WIN_POINTS}
        elif recipient_score > sender_score:
            awards = {challenge.recipient_id: WIN_POINTS}
        else:
            awards = {challenge.sender_id: DRAW_POINTS, challenge.recipient_id: DRAW_POINTS}

        for profile_id, points in awards.items():
            await profile_crud.increment_counter(self.db, profile_id, "total_score", points)

        logger.info(
            "Challenge points awarded",
            extra={
                "challenge_id": str(challenge.id),
                "awards": {str(profile_id): points for profile_id, points in awards.items()},
            },
        )

    async def decline_challenge(self, challenge_id: UUID, user_id: UUID) -> ChallengeModel:
        """
        Decline a pending challenge addressed to user_id.

        Args:
            challenge_id: Challenge UUID
            user_id: Acting user

        Returns:
            ChallengeModel: The declined challenge

        Raises:
            NotFoundError: Challenge absent or addressed to someone else
            InvalidStateError: Challenge is no longer pending
        """
        challenge = await challenge_crud.get_for_recipient(self.db, challenge_id, user_id)
        if challenge is None:
            raise NotFoundError(
                "Challenge not found or you're not the recipient",
                entity="challenge",
                entity_id=challenge_id,
            )

        if challenge.status != ChallengeStatus.PENDING:
            raise InvalidStateError(
                "Challenge is not pending",
                current_status=ChallengeStatus(challenge.status).value,
                requested_status=ChallengeStatus.DECLINED.value,
            )

        declined = await challenge_crud.update_for_recipient(
            self.db,
            challenge_id,
            user_id,
            expected_status=ChallengeStatus.PENDING,
            status=ChallengeStatus.DECLINED,
        )
        if declined is None:
            # Resolved by a concurrent request between the read and the write
            raise InvalidStateError(
                "Challenge is not pending",
                requested_status=ChallengeStatus.DECLINED.value,
            )

        await self.db.commit()
        logger.info(
            "Challenge declined",
            extra={"challenge_id": str(challenge_id), "user_id": str(user_id)},
        )
        return declined

    async def update_status(
        self,
        challenge_id: UUID,
        user_id: UUID,
        status: ChallengeStatus,
        recipient_score: int | None = None,
    ) -> ChallengeModel:
        """
        Move a challenge to a new status, optionally attaching the recipient score.

        Args:
            challenge_id: Challenge UUID
            user_id: Acting user, must be the recipient
            status: Target status
            recipient_score: Score to attach (accepted or completed only)

        Returns:
            ChallengeModel: The updated challenge

        Raises:
            NotFoundError: Challenge does not exist
            UnauthorizedError: Acting user is not the recipient
            InvalidStateError: Transition not allowed, or score given for a non-scoring status
        """
        challenge = await challenge_crud.get_by_id(self.db, challenge_id)
        if challenge is None:
            raise NotFoundError("Challenge not found", entity="challenge", entity_id=challenge_id)

        if challenge.recipient_id != user_id:
            logger.warning(
                "Challenge update by non-recipient rejected",
                extra={"challenge_id": str(challenge_id), "user_id": str(user_id)},
            )
            raise UnauthorizedError()

        current = ChallengeStatus(challenge.status)
        if not current.can_transition_to(status):
            if current.is_terminal:
                message = f"Challenge is already {current.value}"
            else:
                message = f"Cannot change challenge from {current.value} to {status.value}"
            raise InvalidStateError(
                message,
                current_status=current.value,
                requested_status=status.value,
            )

        if recipient_score is not None and not status.accepts_score:
            raise InvalidStateError(
                "A score can only be recorded when accepting or completing a challenge",
                current_status=current.value,
                requested_status=status.value,
            )

        values: dict = {"status": status}
        if recipient_score is not None:
            values["recipient_score"] = recipient_score

        updated = await challenge_crud.update_for_recipient(
            self.db,
            challenge_id,
            user_id,
            expected_status=current,
            **values,
        )
        if updated is None:
            raise InvalidStateError(
                "Challenge was modified by another request",
                current_status=current.value,
                requested_status=status.value,
            )

        if status == ChallengeStatus.COMPLETED:
            await self._award_points(updated)

        await self.db.commit()
        logger.info(
            "Challenge status updated",
            extra={
                "challenge_id": str(challenge_id),
                "from_status": current.value,
                "to_status": status.value,
                "has_score": recipient_score is not None,
            },
        )
        return updated

    async def create_challenge(
        self,
        sender_id: UUID,
        recipient_id: UUID,
        quiz_id: UUID,
        sender_score: int | None = None,
    ) -> ChallengeModel:
        """
        Challenge another user on a quiz.

        Args:
            sender_id: Acting user
            recipient_id: Challenged profile
            quiz_id: Quiz to play
            sender_score: Score to beat, if the sender already played

        Returns:
            ChallengeModel: The new pending challenge

        Raises:
            ValidationError: Sender challenged themselves
            NotFoundError: Recipient or quiz does not exist
        """
        if sender_id == recipient_id:
            raise ValidationError("You cannot challenge yourself", field="recipient_id")

        if not await profile_crud.exists(self.db, recipient_id):
            raise NotFoundError("Recipient not found", entity="profile", entity_id=recipient_id)

        if not await quiz_crud.exists(self.db, quiz_id):
            raise NotFoundError("Quiz not found", entity="quiz", entity_id=quiz_id)

        challenge = await challenge_crud.create(
            self.db,
            quiz_id=quiz_id,
            sender_id=sender_id,
            recipient_id=recipient_id,
            status=ChallengeStatus.PENDING,
            sender_score=sender_score,
            expires_at=utc_now() + CHALLENGE_TTL,
        )
        await self.db.commit()
        logger.info(
            "Challenge created",
            extra={
                "challenge_id": str(challenge.id),
                "sender_id": str(sender_id),
                "quiz_id": str(quiz_id),
            },
        )
        return challenge

    async def list_challenges(
        self,
        user_id: UUID,
        status: ChallengeListFilter = "active",
    ) -> list[ChallengeModel]:
        """
        List challenges for user_id.

        Args:
            user_id: Acting user
            status: "active" (pending, received), "sent", or "history" (completed)

        Returns:
            list[ChallengeModel]: Challenges with sender, recipient and quiz loaded
        """
        if status == "sent":
            rows = await challenge_crud.list_sent(self.db, user_id)
        elif status == "history":
            rows = await challenge_crud.list_history(self.db, user_id)
        else:
            rows = await challenge_crud.list_active(self.db, user_id)
        return list(rows)
