"""
Challenge API endpoints.

Routes:
- GET /challenges - List active, sent or completed challenges
- POST /challenges - Challenge another user on a quiz
- PATCH /challenges/{challenge_id} - Recipient updates status and score
- POST /challenges/{challenge_id}/decline - Recipient declines

Dependencies: braincast.application.services, braincast.models
System role: Challenge HTTP API
"""

import logging
from typing import Literal
from uuid import UUID

from fastapi import APIRouter, BackgroundTasks, Depends, Query

from braincast.api.deps.dependencies import (
    get_challenge_service,
    get_current_user_id,
    get_notification_service,
)
from braincast.application.services.challenge_service import ChallengeService
from braincast.application.services.notification_service import NotificationService
from braincast.models.challenge import (
    ChallengeDetailResponse,
    ChallengeResponse,
    CreateChallengeRequest,
    UpdateChallengeRequest,
)
from braincast.models.common import SuccessResponse

from .router_utils import handle_route_errors
from .router_utils.responses import map_challenge_to_response, map_challenges_to_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/challenges", tags=["challenges"])


@router.get("", response_model=list[ChallengeDetailResponse])
@handle_route_errors("Failed to fetch challenges")
async def list_challenges(
    status: Literal["active", "sent", "history"] = Query("active"),
    user_id: UUID = Depends(get_current_user_id),
    challenge_service: ChallengeService = Depends(get_challenge_service),
) -> list[ChallengeDetailResponse]:
    """
    List the acting user's challenges.

    Args:
        status: "active" (pending, received; default), "sent" or "history"
    """
    challenges = await challenge_service.list_challenges(user_id, status)
    return map_challenges_to_response(challenges)


@router.post("", response_model=ChallengeResponse, status_code=201)
@handle_route_errors("Failed to create challenge")
async def create_challenge(
    request: CreateChallengeRequest,
    background_tasks: BackgroundTasks,
    user_id: UUID = Depends(get_current_user_id),
    challenge_service: ChallengeService = Depends(get_challenge_service),
    notification_service: NotificationService = Depends(get_notification_service),
) -> ChallengeResponse:
    """
    Challenge another user on a quiz.

    The recipient is notified after the response is sent; notification
    failures never affect this request.

    Raises:
        400: Self-challenge
        404: Recipient or quiz not found
    """
    challenge = await challenge_service.create_challenge(
        sender_id=user_id,
        recipient_id=request.recipient_id,
        quiz_id=request.quiz_id,
        sender_score=request.sender_score,
    )
    background_tasks.add_task(
        notification_service.notify_challenge_received,
        challenge_id=challenge.id,
        recipient_id=challenge.recipient_id,
        sender_id=user_id,
        quiz_id=challenge.quiz_id,
    )
    return map_challenge_to_response(challenge)


@router.patch("/{challenge_id}", response_model=ChallengeResponse)
@handle_route_errors("Failed to update challenge")
async def update_challenge(
    challenge_id: UUID,
    request: UpdateChallengeRequest,
    user_id: UUID = Depends(get_current_user_id),
    challenge_service: ChallengeService = Depends(get_challenge_service),
) -> ChallengeResponse:
    """
    Move a challenge forward and optionally attach the recipient's score.

    Raises:
        401: No session, or acting user is not the recipient
        404: Challenge not found
        400: Transition not allowed, or score given for a non-scoring status
    """
    challenge = await challenge_service.update_status(
        challenge_id,
        user_id,
        request.status,
        recipient_score=request.recipient_score,
    )
    return map_challenge_to_response(challenge)


@router.post("/{challenge_id}/decline", response_model=SuccessResponse)
@handle_route_errors("Failed to decline challenge")
async def decline_challenge(
    challenge_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    challenge_service: ChallengeService = Depends(get_challenge_service),
) -> SuccessResponse:
    """
    Decline a pending challenge addressed to the acting user.

    Raises:
        401: No session
        404: Challenge not found or acting user is not the recipient
        400: Challenge is not pending
    """
    await challenge_service.decline_challenge(challenge_id, user_id)
    return SuccessResponse()
