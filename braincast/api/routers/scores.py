"""
Score API endpoints.

Routes:
- POST /scores - Record a finished quiz play

Dependencies: braincast.application.services, braincast.models
System role: Score HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, BackgroundTasks, Depends

from braincast.api.deps.dependencies import (
    get_current_user_id,
    get_notification_service,
    get_score_service,
)
from braincast.application.services.notification_service import NotificationService
from braincast.application.services.score_service import ScoreService
from braincast.models.score import RecordScoreRequest, ScoreResponse

from .router_utils import handle_route_errors

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/scores", tags=["scores"])


@router.post("", response_model=ScoreResponse, status_code=201)
@handle_route_errors("Failed to save score")
async def record_score(
    request: RecordScoreRequest,
    background_tasks: BackgroundTasks,
    user_id: UUID = Depends(get_current_user_id),
    score_service: ScoreService = Depends(get_score_service),
    notification_service: NotificationService = Depends(get_notification_service),
) -> ScoreResponse:
    """
    Record a quiz result for the acting user.

    The player gets a completion notification after the response is sent.

    Raises:
        400: Score exceeds max_score
        401: No session
        404: Quiz not found
    """
    record = await score_service.record_score(
        user_id,
        request.quiz_id,
        request.score,
        request.max_score,
        time_taken=request.time_taken,
    )
    background_tasks.add_task(
        notification_service.notify_quiz_completed,
        user_id=user_id,
        quiz_id=record.quiz_id,
        score=record.score,
        max_score=record.max_score,
    )
    return ScoreResponse.model_validate(record)
