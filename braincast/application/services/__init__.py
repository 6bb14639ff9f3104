"""
Application services.

Use-case orchestrators over the database boundary. Each service takes a
request-scoped AsyncSession and commits its own writes.
"""

from braincast.application.services.challenge_service import ChallengeService
from braincast.application.services.friend_service import FriendService
from braincast.application.services.notification_service import NotificationService
from braincast.application.services.profile_service import ProfileService
from braincast.application.services.quiz_service import QuizService
from braincast.application.services.score_service import ScoreService
from braincast.application.services.webhook_service import WebhookService

__all__ = [
    "ChallengeService",
    "FriendService",
    "NotificationService",
    "ProfileService",
    "QuizService",
    "ScoreService",
    "WebhookService",
]
