"""
Auth API endpoints.

Routes:
- POST /auth/verify - Verify a Sign In With Farcaster message and start a session
- POST /auth/farcaster-profile - Upsert the profile linked to a Farcaster id
- POST /auth/dev-session - Development sign-in for an existing profile
- POST /auth/logout - End the session
- GET /auth/session - Current session user

Dependencies: braincast.application.services, braincast.boundary.session_store
System role: Session and identity HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Request

from braincast.api.deps.dependencies import (
    get_current_user_id,
    get_profile_service,
    get_settings_dependency,
    get_sign_in_verifier,
)
from braincast.application.services.profile_service import ProfileService
from braincast.boundary.farcaster import SignInVerifier, VerifiedIdentity
from braincast.boundary.session_store import end_session, start_session
from braincast.configs import Settings
from braincast.core.exceptions import ForbiddenError
from braincast.models.auth import (
    DevSessionRequest,
    FarcasterProfileRequest,
    ProfileResponse,
    SessionInfoResponse,
    SignInResponse,
    VerifySignInRequest,
)
from braincast.models.common import SuccessResponse

from .router_utils import handle_route_errors

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/verify", response_model=SignInResponse)
@handle_route_errors("Authentication failed")
async def verify_sign_in(
    request: VerifySignInRequest,
    http_request: Request,
    verifier: SignInVerifier = Depends(get_sign_in_verifier),
    profile_service: ProfileService = Depends(get_profile_service),
) -> SignInResponse:
    """
    Sign in with a Farcaster message.

    Verifies the message, upserts the profile for the signed-in fid and binds
    it to the session.

    Raises:
        400: Malformed sign-in message
        401: Signature rejected
    """
    identity = await verifier.verify(
        request.message,
        request.signature,
        VerifiedIdentity(
            fid=request.fid,
            username=request.username,
            display_name=request.display_name,
            pfp_url=request.pfp_url,
        ),
    )
    profile = await profile_service.upsert_farcaster_profile(
        FarcasterProfileRequest(
            fid=identity.fid,
            username=identity.username,
            display_name=identity.display_name,
            pfp_url=identity.pfp_url,
        )
    )
    start_session(http_request, str(profile.id))
    logger.info("Session started", extra={"user_id": str(profile.id), "fid": identity.fid})
    return SignInResponse(user_id=profile.id, profile=ProfileResponse.model_validate(profile))


@router.post("/farcaster-profile", response_model=ProfileResponse)
@handle_route_errors("Failed to save profile")
async def upsert_farcaster_profile(
    request: FarcasterProfileRequest,
    profile_service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """Create or refresh the profile for a Farcaster user."""
    profile = await profile_service.upsert_farcaster_profile(request)
    return ProfileResponse.model_validate(profile)


@router.post("/dev-session", response_model=SessionInfoResponse)
@handle_route_errors("Failed to create session")
async def create_dev_session(
    request: DevSessionRequest,
    http_request: Request,
    settings: Settings = Depends(get_settings_dependency),
    profile_service: ProfileService = Depends(get_profile_service),
) -> SessionInfoResponse:
    """
    Sign in as an existing profile without credentials.

    Raises:
        403: Not running in development
        404: Profile not found
    """
    if not settings.is_development:
        raise ForbiddenError("Dev sign-in is only available in development")

    profile = await profile_service.get_profile(request.user_id)
    start_session(http_request, str(profile.id))
    logger.info("Dev session started", extra={"user_id": str(profile.id)})
    return SessionInfoResponse(user_id=profile.id)


@router.post("/logout", response_model=SuccessResponse)
async def logout(http_request: Request) -> SuccessResponse:
    """End the current session."""
    end_session(http_request)
    return SuccessResponse()


@router.get("/session", response_model=SessionInfoResponse)
async def get_session(user_id: UUID = Depends(get_current_user_id)) -> SessionInfoResponse:
    """Return the signed-in user id; 401 when there is no session."""
    return SessionInfoResponse(user_id=user_id)
