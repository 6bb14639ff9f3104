"""
Profile CRUD operations.

Dependencies: sqlalchemy, braincast.boundary.db.models
System role: Profile persistence operations
"""

from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from braincast.boundary.db.CRUD.base_crud import BaseCRUD
from braincast.boundary.db.models.profile_model import ProfileModel

COUNTER_FIELDS = frozenset({"total_score", "quizzes_taken", "quizzes_created"})


class ProfileCRUD(BaseCRUD[ProfileModel]):
    """CRUD operations for ProfileModel."""

    def __init__(self) -> None:
        """Initialize ProfileCRUD with ProfileModel."""
        super().__init__(ProfileModel)

    async def get_by_fid(self, session: AsyncSession, fid: int) -> ProfileModel | None:
        """Retrieve the profile linked to a Farcaster id."""
        result = await session.execute(select(ProfileModel).where(ProfileModel.fid == fid))
        return result.scalar_one_or_none()

    async def increment_counter(
        self,
        session: AsyncSession,
        profile_id: UUID,
        field: str,
        amount: int = 1,
    ) -> None:
        """
        Add amount to one of the profile's counters in a single UPDATE.

        Args:
            session: Async database session
            profile_id: Profile UUID
            field: One of total_score, quizzes_taken, quizzes_created
            amount: Value to add

        Raises:
            ValueError: If field is not a counter column
        """
        if field not in COUNTER_FIELDS:
            raise ValueError(f"{field} is not a profile counter")
        column = getattr(ProfileModel, field)
        stmt = (
            update(ProfileModel)
            .where(ProfileModel.id == profile_id)
            .values({column: column + amount})
        )
        await session.execute(stmt)


profile_crud = ProfileCRUD()
