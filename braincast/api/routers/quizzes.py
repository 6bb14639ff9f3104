"""
Quiz API endpoints.

Routes:
- GET /quizzes - List published quizzes
- POST /quizzes - Create a quiz
- GET /quizzes/{quiz_id} - Get a quiz with its questions (counts a play)

Dependencies: braincast.application.services, braincast.models
System role: Quiz catalogue HTTP API
"""

import logging
from typing import Literal
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from braincast.api.deps.dependencies import get_current_user_id, get_quiz_service
from braincast.application.services.quiz_service import QuizService
from braincast.core.exceptions import ValidationError
from braincast.models.quiz import CreateQuizRequest, QuizDetailResponse, QuizResponse

from .router_utils import handle_route_errors
from .router_utils.responses import map_quiz_to_detail_response, map_quizzes_to_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/quizzes", tags=["quizzes"])


def parse_category(category: str | None) -> int | None:
    """Category filter from the query string; "all" or missing means no filter."""
    if category is None or category == "all":
        return None
    try:
        return int(category)
    except ValueError:
        raise ValidationError("Invalid category", field="category")


@router.get("", response_model=list[QuizResponse])
@handle_route_errors("Failed to fetch quizzes")
async def list_quizzes(
    category: str | None = Query(None, description="Category id or 'all'"),
    sort: Literal["all", "popular", "new", "trending"] = Query("all", alias="filter"),
    limit: int = Query(10, ge=1, le=100),
    page: int = Query(0, ge=0),
    quiz_service: QuizService = Depends(get_quiz_service),
) -> list[QuizResponse]:
    """List published quizzes, optionally filtered by category and ordered."""
    quizzes = await quiz_service.list_quizzes(
        category_id=parse_category(category),
        sort=sort,
        limit=limit,
        page=page,
    )
    return map_quizzes_to_response(quizzes)


@router.post("", response_model=QuizDetailResponse, status_code=201)
@handle_route_errors("Failed to create quiz")
async def create_quiz(
    request: CreateQuizRequest,
    user_id: UUID = Depends(get_current_user_id),
    quiz_service: QuizService = Depends(get_quiz_service),
) -> QuizDetailResponse:
    """
    Create a published quiz authored by the acting user.

    Raises:
        400: No questions
        401: No session
        404: Category not found
    """
    logger.info(
        "Creating quiz",
        extra={"title": request.title, "question_count": len(request.questions)},
    )
    quiz = await quiz_service.create_quiz(user_id, request)
    return map_quiz_to_detail_response(quiz)


@router.get("/{quiz_id}", response_model=QuizDetailResponse)
@handle_route_errors("Failed to fetch quiz")
async def get_quiz(
    quiz_id: UUID,
    quiz_service: QuizService = Depends(get_quiz_service),
) -> QuizDetailResponse:
    """
    Get a quiz with category, author and ordered questions.

    Every successful read increments the quiz's play counter.

    Raises:
        404: Quiz not found
    """
    quiz = await quiz_service.get_quiz(quiz_id)
    return map_quiz_to_detail_response(quiz)
