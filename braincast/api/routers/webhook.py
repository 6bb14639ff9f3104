"""
Mini-app webhook endpoint.

Routes: POST /webhook

Dependencies: braincast.application.services, braincast.models
System role: Host event intake
"""

from uuid import UUID

from fastapi import APIRouter, Depends

from braincast.api.deps.dependencies import get_optional_user_id, get_webhook_service
from braincast.application.services.webhook_service import WebhookService
from braincast.models.common import SuccessResponse
from braincast.models.webhook import WebhookEvent

from .router_utils import handle_route_errors

router = APIRouter(prefix="/webhook", tags=["webhook"])


@router.post("", response_model=SuccessResponse)
@handle_route_errors("Failed to process webhook")
async def receive_webhook(
    event: WebhookEvent,
    user_id: UUID | None = Depends(get_optional_user_id),
    webhook_service: WebhookService = Depends(get_webhook_service),
) -> SuccessResponse:
    """Apply a host event to the session user's notification tokens."""
    await webhook_service.handle_event(event, user_id)
    return SuccessResponse()
