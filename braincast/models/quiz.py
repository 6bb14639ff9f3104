"""
Quiz and category schemas.

Dependencies: pydantic
System role: Quiz API contracts
"""

from datetime import datetime
from typing import Any
import uuid

from pydantic import BaseModel, ConfigDict, Field


class CategoryResponse(BaseModel):
    """A quiz category."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    emoji: str | None = None
    description: str | None = None
    created_at: datetime


class CategorySummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    emoji: str | None = None


class AuthorSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    username: str | None = None
    display_name: str | None = None
    avatar_url: str | None = None


class QuestionResponse(BaseModel):
    """A quiz question."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    quiz_id: uuid.UUID
    text: str
    question_type: str
    options: list[Any] | None = None
    correct_answer: str | None = None
    correct_answers: list[str] | None = None
    image_url: str | None = None
    map_url: str | None = None
    map_coordinates: dict[str, Any] | None = None
    order_index: int | None = None


class QuizResponse(BaseModel):
    """A quiz with its category and author display fields."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    title: str
    description: str | None = None
    emoji: str | None = None
    category_id: int | None = None
    creator_id: uuid.UUID | None = None
    time_limit: int
    is_published: bool
    plays: int
    created_at: datetime
    updated_at: datetime
    category: CategorySummary | None = None
    creator: AuthorSummary | None = None


class QuizDetailResponse(QuizResponse):
    """A quiz with its ordered questions."""

    questions: list[QuestionResponse] = Field(default_factory=list)


class CreateQuestionRequest(BaseModel):
    """One question inside a quiz creation request."""

    model_config = ConfigDict(populate_by_name=True)

    text: str = Field(..., min_length=1)
    type: str = Field(..., min_length=1, description="Question type (multiple-choice, list, map, ...)")
    options: list[Any] | None = None
    correct_answer: str | None = Field(None, alias="correctAnswer")
    correct_answers: list[str] | None = Field(None, alias="correctAnswers")
    image_url: str | None = Field(None, alias="imageUrl")
    map_url: str | None = Field(None, alias="mapUrl")
    correct_coordinates: dict[str, Any] | None = Field(None, alias="correctCoordinates")


class CreateQuizRequest(BaseModel):
    """Request schema for creating a quiz."""

    title: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    emoji: str | None = Field(None, max_length=32)
    category_id: int | None = None
    time_limit: int | None = Field(None, gt=0, description="Seconds; defaults to 60")
    questions: list[CreateQuestionRequest] = Field(default_factory=list)
