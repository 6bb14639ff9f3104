"""
Profile service.

Links Farcaster identities to profiles and resolves session users.

Dependencies: braincast.boundary.db.CRUD
System role: Identity and profile management
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from braincast.boundary.db.CRUD.profile_crud import profile_crud
from braincast.boundary.db.models.profile_model import ProfileModel
from braincast.core.exceptions import NotFoundError
from braincast.models.auth import FarcasterProfileRequest

logger = logging.getLogger(__name__)


class ProfileService:
    """Profile lookups and Farcaster identity upserts."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_profile(self, profile_id: UUID) -> ProfileModel:
        """
        Fetch a profile by id.

        Raises:
            NotFoundError: Profile does not exist
        """
        profile = await profile_crud.get_by_id(self.db, profile_id)
        if profile is None:
            raise NotFoundError("User not found", entity="profile", entity_id=profile_id)
        return profile

    async def upsert_farcaster_profile(self, request: FarcasterProfileRequest) -> ProfileModel:
        """
        Create or refresh the profile linked to a Farcaster id.

        Only fields present in the request overwrite stored values.

        Args:
            request: Farcaster identity fields

        Returns:
            ProfileModel: The stored profile
        """
        values = {
            "username": request.username,
            "display_name": request.display_name,
            "avatar_url": request.pfp_url,
        }
        values = {key: value for key, value in values.items() if value is not None}

        existing = await profile_crud.get_by_fid(self.db, request.fid)
        if existing is None:
            profile = await profile_crud.create(self.db, fid=request.fid, **values)
            logger.info("Profile created", extra={"fid": request.fid})
        elif values:
            profile = await profile_crud.update_by_id(self.db, existing.id, **values)
            logger.info("Profile refreshed", extra={"fid": request.fid})
        else:
            profile = existing

        await self.db.commit()
        return profile
