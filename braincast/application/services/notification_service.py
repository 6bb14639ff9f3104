"""
Notification dispatcher.

Composes user-facing notifications and delivers them to every enabled token
of the target user. Runs after the response has been sent, on its own
database session, and never raises: a failed send is logged and dropped.

Dependencies: braincast.boundary.farcaster, braincast.boundary.db
System role: Fire-and-forget notification side effects
"""

import asyncio
import logging
from typing import Any, Callable
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from braincast.application.services.score_service import score_percentage
from braincast.boundary.db.CRUD.notification_token_crud import notification_token_crud
from braincast.boundary.db.CRUD.profile_crud import profile_crud
from braincast.boundary.db.CRUD.quiz_crud import quiz_crud
from braincast.boundary.farcaster import NotificationClient, NotificationPayload
from braincast.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)


class NotificationService:
    """Sends challenge and quiz notifications to a user's registered tokens."""

    def __init__(
        self,
        session_factory: Callable[[], AsyncSession],
        client: NotificationClient,
        app_url: str,
        enabled: bool = True,
    ) -> None:
        """
        Args:
            session_factory: Opens a fresh session per dispatch
            client: Outbound HTTP client
            app_url: Public base URL used for notification targets
            enabled: Master switch; when False nothing is sent
        """
        self.session_factory = session_factory
        self.client = client
        self.app_url = app_url.rstrip("/")
        self.enabled = enabled

    async def _deliver(
        self,
        db: AsyncSession,
        user_id: UUID,
        payload: NotificationPayload,
    ) -> list[dict[str, Any] | None]:
        tokens = await notification_token_crud.list_enabled(db, user_id)
        if not tokens:
            logger.debug("No notification tokens", extra={"user_id": str(user_id)})
            return []
        return list(
            await asyncio.gather(
                *(self.client.send(token.token, token.url, payload) for token in tokens)
            )
        )

    async def notify_challenge_received(
        self,
        challenge_id: UUID,
        recipient_id: UUID,
        sender_id: UUID,
        quiz_id: UUID,
    ) -> list[dict[str, Any] | None]:
        """
        Tell the recipient they were challenged.

        Args:
            challenge_id: New challenge
            recipient_id: User to notify
            sender_id: Challenger, named in the body
            quiz_id: Quiz, named in the body

        Returns:
            list: One result per token (None for failed sends); empty when
            nothing was sent
        """
        if not self.enabled:
            return []

        try:
            async with self.session_factory() as db:
                sender = await profile_crud.get_by_id(db, sender_id)
                quiz = await quiz_crud.get_by_id(db, quiz_id)

                challenger = "Someone"
                if sender is not None:
                    challenger = sender.display_name or sender.username or challenger
                quiz_title = quiz.title if quiz is not None else "a quiz"

                payload = NotificationPayload(
                    notification_id=f"challenge-received-{challenge_id}",
                    title="New Quiz Challenge!",
                    body=f"{challenger} has challenged you to beat their score on {quiz_title}",
                    target_url=f"{self.app_url}/challenges",
                )
                results = await self._deliver(db, recipient_id, payload)
        except Exception as e:
            log_exception_with_context(
                logger,
                "Challenge notification failed",
                e,
                challenge_id=challenge_id,
                recipient_id=recipient_id,
            )
            return []

        logger.info(
            "Challenge notification dispatched",
            extra={
                "challenge_id": str(challenge_id),
                "tokens": len(results),
                "delivered": sum(1 for result in results if result is not None),
            },
        )
        return results

    async def notify_quiz_completed(
        self,
        user_id: UUID,
        quiz_id: UUID,
        score: int,
        max_score: int,
    ) -> list[dict[str, Any] | None]:
        """
        Tell a player how they did on a quiz.

        Args:
            user_id: Player to notify
            quiz_id: Quiz played, named in the body
            score: Points earned
            max_score: Points available

        Returns:
            list: One result per token (None for failed sends); empty when
            nothing was sent
        """
        if not self.enabled:
            return []

        try:
            async with self.session_factory() as db:
                quiz = await quiz_crud.get_by_id(db, quiz_id)
                quiz_title = quiz.title if quiz is not None else "a quiz"
                percentage = score_percentage(score, max_score)

                payload = NotificationPayload(
                    notification_id=f"quiz-completion-{quiz_id}-{user_id}",
                    title="Quiz Completed!",
                    body=f"You scored {score}/{max_score} ({percentage}%) on {quiz_title}",
                    target_url=f"{self.app_url}/quiz/{quiz_id}/results",
                )
                results = await self._deliver(db, user_id, payload)
        except Exception as e:
            log_exception_with_context(
                logger,
                "Quiz completion notification failed",
                e,
                quiz_id=quiz_id,
                user_id=user_id,
            )
            return []

        logger.info(
            "Quiz completion notification dispatched",
            extra={
                "quiz_id": str(quiz_id),
                "tokens": len(results),
                "delivered": sum(1 for result in results if result is not None),
            },
        )
        return results
