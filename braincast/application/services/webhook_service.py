"""
Mini-app webhook service.

Keeps notification tokens in step with the events the mini-app host posts
when a user adds or removes the app or toggles notifications.

Dependencies: braincast.boundary.db.CRUD
System role: Notification token registration
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from braincast.boundary.db.CRUD.notification_token_crud import notification_token_crud
from braincast.models.webhook import WebhookEvent

logger = logging.getLogger(__name__)

ENABLE_EVENTS = frozenset({"frame_added", "notifications_enabled"})
DISABLE_EVENTS = frozenset({"frame_removed", "notifications_disabled"})


class WebhookService:
    """Applies host events to stored notification tokens."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def handle_event(self, event: WebhookEvent, user_id: UUID | None) -> bool:
        """
        Apply one webhook event.

        Events without a signed-in user, enable events without notification
        details, and unknown events are acknowledged and ignored.

        Args:
            event: Parsed webhook body
            user_id: Signed-in user the event belongs to, if any

        Returns:
            bool: True when stored tokens changed
        """
        if user_id is None:
            logger.info("Webhook event without session ignored", extra={"event": event.event})
            return False

        if event.event in ENABLE_EVENTS:
            details = event.notification_details
            if details is None:
                logger.info(
                    "Webhook enable event without notification details",
                    extra={"event": event.event, "user_id": str(user_id)},
                )
                return False
            await notification_token_crud.create(
                self.db,
                user_id=user_id,
                token=details.token,
                url=details.url,
                enabled=True,
            )
            await self.db.commit()
            logger.info(
                "Notification token registered",
                extra={"event": event.event, "user_id": str(user_id)},
            )
            return True

        if event.event in DISABLE_EVENTS:
            disabled = await notification_token_crud.disable_all(self.db, user_id)
            await self.db.commit()
            logger.info(
                "Notification tokens disabled",
                extra={"event": event.event, "user_id": str(user_id), "count": disabled},
            )
            return disabled > 0

        logger.debug("Unhandled webhook event", extra={"event": event.event})
        return False
