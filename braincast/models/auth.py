"""
Auth and profile schemas.

Dependencies: pydantic
System role: Auth API contracts
"""

import uuid

from pydantic import BaseModel, ConfigDict, Field

from braincast.models.common import ProfileSummary


class FarcasterProfileRequest(BaseModel):
    """Farcaster identity fields reported by the mini-app context."""

    model_config = ConfigDict(populate_by_name=True)

    fid: int = Field(..., gt=0)
    username: str | None = None
    display_name: str | None = Field(None, alias="displayName")
    pfp_url: str | None = Field(None, alias="pfpUrl")


class ProfileResponse(ProfileSummary):
    """Full profile including score counters."""

    fid: int | None = None
    total_score: int
    quizzes_taken: int
    quizzes_created: int


class DevSessionRequest(BaseModel):
    """Development sign-in request."""

    user_id: uuid.UUID


class SessionInfoResponse(BaseModel):
    user_id: uuid.UUID


class VerifySignInRequest(BaseModel):
    """Signed SIWF message plus the identity it signs in."""

    model_config = ConfigDict(populate_by_name=True)

    message: str = Field(..., min_length=1)
    signature: str = Field(..., min_length=1)
    fid: int = Field(..., gt=0)
    username: str | None = None
    display_name: str | None = Field(None, alias="displayName")
    pfp_url: str | None = Field(None, alias="pfpUrl")


class SignInResponse(BaseModel):
    """Session started for a verified profile."""

    user_id: uuid.UUID
    profile: ProfileResponse
