"""
Category API endpoints.

Routes: GET /categories

Dependencies: braincast.application.services, braincast.models
System role: Category listing HTTP API
"""

from fastapi import APIRouter, Depends

from braincast.api.deps.dependencies import get_quiz_service
from braincast.application.services.quiz_service import QuizService
from braincast.models.quiz import CategoryResponse

from .router_utils import handle_route_errors
from .router_utils.responses import map_categories_to_response

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("", response_model=list[CategoryResponse])
@handle_route_errors("Failed to fetch categories")
async def list_categories(
    quiz_service: QuizService = Depends(get_quiz_service),
) -> list[CategoryResponse]:
    """All categories ordered by name."""
    categories = await quiz_service.list_categories()
    return map_categories_to_response(categories)
