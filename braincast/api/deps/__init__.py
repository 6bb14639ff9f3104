"""FastAPI dependency factories."""

from braincast.api.deps.dependencies import (
    get_challenge_service,
    get_current_user_id,
    get_friend_service,
    get_notification_service,
    get_optional_user_id,
    get_profile_service,
    get_quiz_service,
    get_score_service,
    get_settings_dependency,
    get_sign_in_verifier,
    get_webhook_service,
)

__all__ = [
    "get_challenge_service",
    "get_current_user_id",
    "get_friend_service",
    "get_notification_service",
    "get_optional_user_id",
    "get_profile_service",
    "get_quiz_service",
    "get_score_service",
    "get_settings_dependency",
    "get_sign_in_verifier",
    "get_webhook_service",
]
