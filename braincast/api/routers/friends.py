"""
Friend API endpoints.

Routes:
- GET /friends - List friends, received or sent requests
- POST /friends - Send a friend request
- POST /friends/{request_id}/accept - Accept a received request
- POST /friends/{request_id}/decline - Decline a received request

Dependencies: braincast.application.services, braincast.models
System role: Social graph HTTP API
"""

import logging
from typing import Literal
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from braincast.api.deps.dependencies import get_current_user_id, get_friend_service
from braincast.application.services.friend_service import FriendService
from braincast.models.common import SuccessResponse
from braincast.models.friend import (
    FriendEntryResponse,
    FriendRequestResponse,
    SendFriendRequest,
)

from .router_utils import handle_route_errors
from .router_utils.responses import map_friend_request_to_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/friends", tags=["friends"])


@router.get("", response_model=list[FriendEntryResponse], response_model_exclude_none=True)
@handle_route_errors("Failed to fetch friends")
async def list_friends(
    status: Literal["pending", "sent", "accepted"] = Query("accepted"),
    user_id: UUID = Depends(get_current_user_id),
    friend_service: FriendService = Depends(get_friend_service),
) -> list[FriendEntryResponse]:
    """
    List the acting user's friends or pending requests.

    Args:
        status: "accepted" (default), "pending" (received) or "sent"
    """
    return await friend_service.list_friends(user_id, status)


@router.post("", response_model=FriendRequestResponse, status_code=201)
@handle_route_errors("Failed to send friend request")
async def send_friend_request(
    request: SendFriendRequest,
    user_id: UUID = Depends(get_current_user_id),
    friend_service: FriendService = Depends(get_friend_service),
) -> FriendRequestResponse:
    """
    Send a friend request to another user.

    Raises:
        400: Self-request, already friends, or request already sent
        404: Recipient not found
    """
    friend_request = await friend_service.send_request(user_id, request.recipient_id)
    return map_friend_request_to_response(friend_request)


@router.post("/{request_id}/accept", response_model=FriendRequestResponse)
@handle_route_errors("Failed to accept friend request")
async def accept_friend_request(
    request_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    friend_service: FriendService = Depends(get_friend_service),
) -> FriendRequestResponse:
    """
    Accept a pending friend request addressed to the acting user.

    Raises:
        401: No session
        404: No pending request with this id addressed to the acting user
    """
    friend_request = await friend_service.accept_request(request_id, user_id)
    return map_friend_request_to_response(friend_request)


@router.post("/{request_id}/decline", response_model=SuccessResponse)
@handle_route_errors("Failed to decline friend request")
async def decline_friend_request(
    request_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    friend_service: FriendService = Depends(get_friend_service),
) -> SuccessResponse:
    """
    Decline (delete) a pending friend request addressed to the acting user.

    Raises:
        401: No session
        404: No pending request with this id addressed to the acting user
    """
    await friend_service.decline_request(request_id, user_id)
    return SuccessResponse()
