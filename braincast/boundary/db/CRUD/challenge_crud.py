"""
Challenge CRUD operations.

Recipient-scoped reads and writes for ChallengeModel plus the listing
queries behind the challenge inbox.

Dependencies: sqlalchemy, braincast.boundary.db.models
System role: Challenge persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from braincast.boundary.db.CRUD.base_crud import BaseCRUD
from braincast.boundary.db.models.challenge_model import ChallengeModel, ChallengeStatus


class ChallengeCRUD(BaseCRUD[ChallengeModel]):
    """CRUD operations for ChallengeModel."""

    def __init__(self) -> None:
        """Initialize ChallengeCRUD with ChallengeModel."""
        super().__init__(ChallengeModel)

    async def get_for_recipient(
        self,
        session: AsyncSession,
        challenge_id: UUID,
        recipient_id: UUID,
    ) -> ChallengeModel | None:
        """
        Retrieve a challenge only if recipient_id is its recipient.

        Returns:
            ChallengeModel, None if absent or addressed to someone else
        """
        return await self.get_where(
            session,
            ChallengeModel.id == challenge_id,
            ChallengeModel.recipient_id == recipient_id,
        )

    async def update_for_recipient(
        self,
        session: AsyncSession,
        challenge_id: UUID,
        recipient_id: UUID,
        expected_status: ChallengeStatus | None = None,
        **values,
    ) -> ChallengeModel | None:
        """
        Update a challenge addressed to recipient_id in one filtered statement.

        Args:
            session: Async database session
            challenge_id: Challenge UUID
            recipient_id: Acting user
            expected_status: When given, the row must still hold this status
            **values: Columns to write

        Returns:
            Updated ChallengeModel, None when the predicate matched no row
        """
        conditions = [
            ChallengeModel.id == challenge_id,
            ChallengeModel.recipient_id == recipient_id,
        ]
        if expected_status is not None:
            conditions.append(ChallengeModel.status == expected_status)
        return await self.update_where(session, *conditions, **values)

    def _with_details(self):
        return select(ChallengeModel).options(
            selectinload(ChallengeModel.sender),
            selectinload(ChallengeModel.recipient),
            selectinload(ChallengeModel.quiz),
        ).execution_options(populate_existing=True)

    async def list_active(self, session: AsyncSession, user_id: UUID) -> Sequence[ChallengeModel]:
        """Pending challenges waiting on user_id."""
        stmt = (
            self._with_details()
            .where(
                ChallengeModel.recipient_id == user_id,
                ChallengeModel.status == ChallengeStatus.PENDING,
            )
            .order_by(ChallengeModel.created_at.desc())
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def list_sent(self, session: AsyncSession, user_id: UUID) -> Sequence[ChallengeModel]:
        """Every challenge user_id has sent."""
        stmt = (
            self._with_details()
            .where(ChallengeModel.sender_id == user_id)
            .order_by(ChallengeModel.created_at.desc())
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def list_history(self, session: AsyncSession, user_id: UUID) -> Sequence[ChallengeModel]:
        """Completed challenges on either side of user_id."""
        stmt = (
            self._with_details()
            .where(
                or_(ChallengeModel.sender_id == user_id, ChallengeModel.recipient_id == user_id),
                ChallengeModel.status == ChallengeStatus.COMPLETED,
            )
            .order_by(ChallengeModel.updated_at.desc())
        )
        result = await session.execute(stmt)
        return result.scalars().all()


challenge_crud = ChallengeCRUD()
