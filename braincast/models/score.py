"""
Score schemas.

Dependencies: pydantic
System role: Score API contracts
"""

from datetime import datetime
import uuid

from pydantic import BaseModel, ConfigDict, Field


class RecordScoreRequest(BaseModel):
    """A finished quiz play."""

    quiz_id: uuid.UUID
    score: int = Field(..., ge=0, description="Points earned")
    max_score: int = Field(..., gt=0, description="Points available")
    time_taken: int | None = Field(None, ge=0, description="Seconds spent")


class ScoreResponse(BaseModel):
    """A stored score row."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    user_id: uuid.UUID
    quiz_id: uuid.UUID
    score: int
    max_score: int
    percentage: int
    time_taken: int | None
    created_at: datetime
