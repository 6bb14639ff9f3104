"""
Score service.

Records finished quiz plays and keeps the profile's score counters in step.

Dependencies: braincast.boundary.db.CRUD, braincast.core.exceptions
System role: Play history and leaderboard bookkeeping
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from braincast.boundary.db.CRUD.profile_crud import profile_crud
from braincast.boundary.db.CRUD.quiz_crud import quiz_crud
from braincast.boundary.db.CRUD.score_crud import score_crud
from braincast.boundary.db.models.score_model import UserScoreModel
from braincast.core.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def score_percentage(score: int, max_score: int) -> int:
    """Whole percent of max_score, rounded half up."""
    return (score * 200 + max_score) // (2 * max_score)


class ScoreService:
    """Score service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def record_score(
        self,
        user_id: UUID,
        quiz_id: UUID,
        score: int,
        max_score: int,
        time_taken: int | None = None,
    ) -> UserScoreModel:
        """
        Record a finished play and credit it to the player's profile.

        Adds score to total_score and one to quizzes_taken, each as an atomic
        increment, in the same transaction as the score row.

        Args:
            user_id: Player
            quiz_id: Quiz played
            score: Points earned
            max_score: Points available
            time_taken: Seconds spent, if known

        Returns:
            UserScoreModel: The stored score

        Raises:
            ValidationError: score outside 0..max_score
            NotFoundError: Quiz does not exist
        """
        if score > max_score:
            raise ValidationError("Score cannot exceed the maximum score", field="score")

        if not await quiz_crud.exists(self.db, quiz_id):
            raise NotFoundError("Quiz not found", entity="quiz", entity_id=quiz_id)

        record = await score_crud.create(
            self.db,
            user_id=user_id,
            quiz_id=quiz_id,
            score=score,
            max_score=max_score,
            percentage=score_percentage(score, max_score),
            time_taken=time_taken,
        )
        await profile_crud.increment_counter(self.db, user_id, "total_score", score)
        await profile_crud.increment_counter(self.db, user_id, "quizzes_taken")
        await self.db.commit()

        logger.info(
            "Score recorded",
            extra={
                "user_id": str(user_id),
                "quiz_id": str(quiz_id),
                "score": score,
                "percentage": record.percentage,
            },
        )
        return record
