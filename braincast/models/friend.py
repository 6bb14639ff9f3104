"""
Friend request schemas.

Dependencies: pydantic, braincast.boundary.db.models
System role: Friend API contracts
"""

from datetime import datetime
import uuid

from pydantic import BaseModel, ConfigDict

from braincast.boundary.db.models.friend_model import FriendStatus
from braincast.models.common import ProfileSummary


class SendFriendRequest(BaseModel):
    """Request schema for sending a friend request."""

    recipient_id: uuid.UUID


class FriendRequestResponse(BaseModel):
    """A friend request row."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    sender_id: uuid.UUID
    recipient_id: uuid.UUID
    status: FriendStatus
    created_at: datetime
    updated_at: datetime


class FriendEntryResponse(BaseModel):
    """
    Friend list entry.

    Received requests carry ``sender``, sent requests carry ``recipient`` and
    accepted friendships carry ``friend`` (the other party).
    """

    id: uuid.UUID
    created_at: datetime
    sender: ProfileSummary | None = None
    recipient: ProfileSummary | None = None
    friend: ProfileSummary | None = None
