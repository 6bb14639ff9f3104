"""
Notification token CRUD operations.

Dependencies: sqlalchemy, braincast.boundary.db.models
System role: Notification target persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from braincast.boundary.db.CRUD.base_crud import BaseCRUD
from braincast.boundary.db.models.notification_token_model import NotificationTokenModel


class NotificationTokenCRUD(BaseCRUD[NotificationTokenModel]):
    """CRUD operations for NotificationTokenModel."""

    def __init__(self) -> None:
        """Initialize NotificationTokenCRUD with NotificationTokenModel."""
        super().__init__(NotificationTokenModel)

    async def list_enabled(
        self,
        session: AsyncSession,
        user_id: UUID,
    ) -> Sequence[NotificationTokenModel]:
        """Enabled tokens for user_id."""
        stmt = select(NotificationTokenModel).where(
            NotificationTokenModel.user_id == user_id,
            NotificationTokenModel.enabled.is_(True),
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def disable_all(self, session: AsyncSession, user_id: UUID) -> int:
        """
        Disable every token of user_id.

        Returns:
            Number of rows touched
        """
        stmt = (
            update(NotificationTokenModel)
            .where(NotificationTokenModel.user_id == user_id)
            .values(enabled=False)
        )
        result = await session.execute(stmt)
        return result.rowcount


notification_token_crud = NotificationTokenCRUD()
