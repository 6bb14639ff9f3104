"""
Friend service orchestrator.

Runs the friend request lifecycle: send, accept, decline and listing.

Accept and decline use one filtered statement over (id, recipient, pending).
A wrong id, a request addressed to someone else and an already resolved
request are indistinguishable to the caller: all raise the same NotFoundError.

Dependencies: braincast.boundary.db.CRUD, braincast.core.exceptions
System role: Relationship state machine
"""

import logging
from typing import Literal
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from braincast.boundary.db.CRUD.friend_crud import friend_crud
from braincast.boundary.db.CRUD.profile_crud import profile_crud
from braincast.boundary.db.models.friend_model import FriendModel, FriendStatus
from braincast.core.exceptions import NotFoundError, ValidationError
from braincast.models.common import ProfileSummary
from braincast.models.friend import FriendEntryResponse

logger = logging.getLogger(__name__)

FriendListFilter = Literal["pending", "sent", "accepted"]

FRIEND_REQUEST_NOT_FOUND = "Friend request not found"


class FriendService:
    """Friend request service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize friend service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def accept_request(self, request_id: UUID, user_id: UUID) -> FriendModel:
        """
        Accept a pending friend request addressed to user_id.

        Args:
            request_id: Friend request UUID
            user_id: Acting user

        Returns:
            FriendModel: The accepted request

        Raises:
            NotFoundError: No pending request with this id is addressed to user_id
        """
        friend_request = await friend_crud.accept_pending(self.db, request_id, user_id)
        if friend_request is None:
            raise NotFoundError(
                FRIEND_REQUEST_NOT_FOUND,
                entity="friend_request",
                entity_id=request_id,
            )

        await self.db.commit()
        logger.info(
            "Friend request accepted",
            extra={"request_id": str(request_id), "user_id": str(user_id)},
        )
        return friend_request

    async def decline_request(self, request_id: UUID, user_id: UUID) -> None:
        """
        Decline a pending friend request by deleting it.

        Raises:
            NotFoundError: No pending request with this id is addressed to user_id
        """
        deleted = await friend_crud.delete_pending(self.db, request_id, user_id)
        if not deleted:
            raise NotFoundError(
                FRIEND_REQUEST_NOT_FOUND,
                entity="friend_request",
                entity_id=request_id,
            )

        await self.db.commit()
        logger.info(
            "Friend request declined",
            extra={"request_id": str(request_id), "user_id": str(user_id)},
        )

    async def send_request(self, sender_id: UUID, recipient_id: UUID) -> FriendModel:
        """
        Send a friend request.

        Args:
            sender_id: Acting user
            recipient_id: Profile to befriend

        Returns:
            FriendModel: The new pending request

        Raises:
            ValidationError: Self-request, already friends, or a request already exists
            NotFoundError: Recipient profile does not exist
        """
        if sender_id == recipient_id:
            raise ValidationError(
                "You cannot send a friend request to yourself",
                field="recipient_id",
            )

        if not await profile_crud.exists(self.db, recipient_id):
            raise NotFoundError("User not found", entity="profile", entity_id=recipient_id)

        existing = await friend_crud.find_between(self.db, sender_id, recipient_id)
        if existing is not None:
            if existing.status == FriendStatus.ACCEPTED:
                raise ValidationError("Already friends")
            raise ValidationError("Friend request already sent")

        friend_request = await friend_crud.create(
            self.db,
            sender_id=sender_id,
            recipient_id=recipient_id,
            status=FriendStatus.PENDING,
        )
        await self.db.commit()
        logger.info(
            "Friend request sent",
            extra={"request_id": str(friend_request.id), "sender_id": str(sender_id)},
        )
        return friend_request

    async def list_friends(
        self,
        user_id: UUID,
        status: FriendListFilter = "accepted",
    ) -> list[FriendEntryResponse]:
        """
        List friend entries for user_id.

        Args:
            user_id: Acting user
            status: "pending" (received), "sent", or "accepted" (default)

        Returns:
            list[FriendEntryResponse]: Entries shaped for the requested view
        """
        if status == "pending":
            rows = await friend_crud.list_received_pending(self.db, user_id)
            return [
                FriendEntryResponse(
                    id=row.id,
                    created_at=row.created_at,
                    sender=ProfileSummary.model_validate(row.sender),
                )
                for row in rows
            ]

        if status == "sent":
            rows = await friend_crud.list_sent_pending(self.db, user_id)
            return [
                FriendEntryResponse(
                    id=row.id,
                    created_at=row.created_at,
                    recipient=ProfileSummary.model_validate(row.recipient),
                )
                for row in rows
            ]

        rows = await friend_crud.list_accepted(self.db, user_id)
        return [
            FriendEntryResponse(
                id=row.id,
                created_at=row.created_at,
                friend=ProfileSummary.model_validate(
                    row.recipient if row.sender_id == user_id else row.sender
                ),
            )
            for row in rows
        ]
