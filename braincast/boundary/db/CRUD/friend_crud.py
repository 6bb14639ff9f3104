"""
Friend request CRUD operations.

Filtered reads and writes for FriendModel. Accept and decline are single
statements whose predicate covers id, recipient and pending status together.

Dependencies: sqlalchemy, braincast.boundary.db.models
System role: Friend request persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import and_, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from braincast.boundary.db.CRUD.base_crud import BaseCRUD
from braincast.boundary.db.models.friend_model import FriendModel, FriendStatus


class FriendCRUD(BaseCRUD[FriendModel]):
    """CRUD operations for FriendModel."""

    def __init__(self) -> None:
        """Initialize FriendCRUD with FriendModel."""
        super().__init__(FriendModel)

    def _pending_for(self, request_id: UUID, recipient_id: UUID):
        return (
            FriendModel.id == request_id,
            FriendModel.recipient_id == recipient_id,
            FriendModel.status == FriendStatus.PENDING,
        )

    async def accept_pending(
        self,
        session: AsyncSession,
        request_id: UUID,
        recipient_id: UUID,
    ) -> FriendModel | None:
        """
        Mark a pending request addressed to recipient_id as accepted.

        Args:
            session: Async database session
            request_id: Friend request UUID
            recipient_id: Acting user, must be the request's recipient

        Returns:
            Updated FriendModel, None when id, recipient or status did not match
        """
        return await self.update_where(
            session,
            *self._pending_for(request_id, recipient_id),
            status=FriendStatus.ACCEPTED,
        )

    async def delete_pending(
        self,
        session: AsyncSession,
        request_id: UUID,
        recipient_id: UUID,
    ) -> bool:
        """
        Delete a pending request addressed to recipient_id.

        Returns:
            True if the row was removed, False when nothing matched
        """
        return await self.delete_where(session, *self._pending_for(request_id, recipient_id))

    async def find_between(
        self,
        session: AsyncSession,
        user_a: UUID,
        user_b: UUID,
    ) -> FriendModel | None:
        """
        Find any request between two users, in either direction.

        Returns:
            The first matching FriendModel, None if the pair has no relationship
        """
        stmt = (
            select(FriendModel)
            .where(
                or_(
                    and_(FriendModel.sender_id == user_a, FriendModel.recipient_id == user_b),
                    and_(FriendModel.sender_id == user_b, FriendModel.recipient_id == user_a),
                )
            )
            .order_by(FriendModel.created_at)
            .limit(1)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_received_pending(
        self,
        session: AsyncSession,
        user_id: UUID,
    ) -> Sequence[FriendModel]:
        """Pending requests sent to user_id, with sender profiles loaded."""
        stmt = (
            select(FriendModel)
            .where(
                FriendModel.recipient_id == user_id,
                FriendModel.status == FriendStatus.PENDING,
            )
            .options(selectinload(FriendModel.sender))
            .order_by(FriendModel.created_at.desc())
            .execution_options(populate_existing=True)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def list_sent_pending(
        self,
        session: AsyncSession,
        user_id: UUID,
    ) -> Sequence[FriendModel]:
        """Pending requests sent by user_id, with recipient profiles loaded."""
        stmt = (
            select(FriendModel)
            .where(
                FriendModel.sender_id == user_id,
                FriendModel.status == FriendStatus.PENDING,
            )
            .options(selectinload(FriendModel.recipient))
            .order_by(FriendModel.created_at.desc())
            .execution_options(populate_existing=True)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def list_accepted(
        self,
        session: AsyncSession,
        user_id: UUID,
    ) -> Sequence[FriendModel]:
        """Accepted friendships on either side of user_id, with both profiles loaded."""
        stmt = (
            select(FriendModel)
            .where(
                or_(FriendModel.sender_id == user_id, FriendModel.recipient_id == user_id),
                FriendModel.status == FriendStatus.ACCEPTED,
            )
            .options(
                selectinload(FriendModel.sender),
                selectinload(FriendModel.recipient),
            )
            .order_by(FriendModel.created_at.desc())
            .execution_options(populate_existing=True)
        )
        result = await session.execute(stmt)
        return result.scalars().all()


friend_crud = FriendCRUD()
