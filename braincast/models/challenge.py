"""
Challenge schemas.

Dependencies: pydantic, braincast.boundary.db.models
System role: Challenge API contracts
"""

from datetime import datetime
import uuid

from pydantic import BaseModel, ConfigDict, Field

from braincast.boundary.db.models.challenge_model import ChallengeStatus
from braincast.models.common import ProfileSummary


class CreateChallengeRequest(BaseModel):
    """Request schema for challenging another user on a quiz."""

    recipient_id: uuid.UUID
    quiz_id: uuid.UUID
    sender_score: int | None = Field(None, ge=0, description="Sender's score to beat")


class UpdateChallengeRequest(BaseModel):
    """Request schema for the recipient resolving a challenge."""

    status: ChallengeStatus
    recipient_score: int | None = Field(None, ge=0)


class ChallengeResponse(BaseModel):
    """A challenge row."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    quiz_id: uuid.UUID
    sender_id: uuid.UUID
    recipient_id: uuid.UUID
    status: ChallengeStatus
    sender_score: int | None
    recipient_score: int | None
    expires_at: datetime | None
    created_at: datetime
    updated_at: datetime


class ChallengeQuizSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    title: str
    emoji: str | None = None


class ChallengeDetailResponse(ChallengeResponse):
    """Challenge with both parties and the quiz joined in."""

    sender: ProfileSummary | None = None
    recipient: ProfileSummary | None = None
    quiz: ChallengeQuizSummary | None = None
