"""
Common response models.

Dependencies: pydantic
System role: Common API response structures
"""

from pydantic import BaseModel, ConfigDict, Field
import uuid


class SuccessResponse(BaseModel):
    """Acknowledgement with no entity body."""

    success: bool = True


class ErrorResponse(BaseModel):
    """Error response schema."""

    error: str = Field(description="Error message")


class ProfileSummary(BaseModel):
    """Public profile fields joined into other payloads."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    username: str | None = None
    display_name: str | None = None
    avatar_url: str | None = None
