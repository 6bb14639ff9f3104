"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: braincast.configs, braincast.application, braincast.boundary
System role: DI container for service injection and request identity
"""

from functools import lru_cache
from uuid import UUID

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from braincast.application.services import (
    ChallengeService,
    FriendService,
    NotificationService,
    ProfileService,
    QuizService,
    ScoreService,
    WebhookService,
)
from braincast.boundary.db import get_async_db, get_async_session_factory
from braincast.boundary.farcaster import NotificationClient, SignInVerifier
from braincast.boundary.session_store import get_session_user_id
from braincast.configs import Settings, get_settings
from braincast.core.exceptions import UnauthorizedError


class ServiceCache:
    """Container for cached, request-independent service instances."""

    def __init__(self):
        self._notification_service = None

    @property
    def notification_service(self) -> NotificationService:
        """Get cached notification dispatcher."""
        if self._notification_service is None:
            settings = get_settings()
            self._notification_service = NotificationService(
                session_factory=get_async_session_factory(),
                client=NotificationClient(timeout=settings.notifications.request_timeout),
                app_url=settings.notifications.app_url,
                enabled=settings.notifications.enabled,
            )
        return self._notification_service

    def clear(self) -> None:
        """Clear all cached instances."""
        self._notification_service = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_optional_user_id(request: Request) -> UUID | None:
    """
    Resolve the signed-in user from the session, if any.

    A session value that is not a UUID is treated as no session.
    """
    raw = get_session_user_id(request)
    if not raw:
        return None
    try:
        return UUID(raw)
    except ValueError:
        return None


def get_current_user_id(
    user_id: UUID | None = Depends(get_optional_user_id),
) -> UUID:
    """
    Require a signed-in user.

    Raises:
        UnauthorizedError: No valid session
    """
    if user_id is None:
        raise UnauthorizedError()
    return user_id


def get_friend_service(db: AsyncSession = Depends(get_async_db)) -> FriendService:
    """Get FriendService instance with async database session."""
    return FriendService(db=db)


def get_challenge_service(db: AsyncSession = Depends(get_async_db)) -> ChallengeService:
    """Get ChallengeService instance with async database session."""
    return ChallengeService(db=db)


def get_quiz_service(db: AsyncSession = Depends(get_async_db)) -> QuizService:
    """Get QuizService instance with async database session."""
    return QuizService(db=db)


def get_score_service(db: AsyncSession = Depends(get_async_db)) -> ScoreService:
    """Get ScoreService instance with async database session."""
    return ScoreService(db=db)


def get_webhook_service(db: AsyncSession = Depends(get_async_db)) -> WebhookService:
    """Get WebhookService instance with async database session."""
    return WebhookService(db=db)


def get_profile_service(db: AsyncSession = Depends(get_async_db)) -> ProfileService:
    """Get ProfileService instance with async database session."""
    return ProfileService(db=db)


def get_notification_service() -> NotificationService:
    """Get the cached notification dispatcher."""
    return get_service_cache().notification_service


def get_sign_in_verifier(
    settings: Settings = Depends(get_settings_dependency),
) -> SignInVerifier:
    """Get the sign-in message verifier."""
    return SignInVerifier(domain=settings.auth.sign_in_domain)
