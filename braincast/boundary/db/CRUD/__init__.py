"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from braincast.boundary.db.CRUD import friend_crud, challenge_crud

    # Use singleton instances
    request = await friend_crud.accept_pending(db, request_id, user_id)

    # Or instantiate classes directly for custom behavior
    from braincast.boundary.db.CRUD import FriendCRUD
    custom_crud = FriendCRUD()
"""

from braincast.boundary.db.CRUD.base_crud import BaseCRUD
from braincast.boundary.db.CRUD.profile_crud import ProfileCRUD, profile_crud
from braincast.boundary.db.CRUD.friend_crud import FriendCRUD, friend_crud
from braincast.boundary.db.CRUD.challenge_crud import ChallengeCRUD, challenge_crud
from braincast.boundary.db.CRUD.quiz_crud import (
    CategoryCRUD,
    QuestionCRUD,
    QuizCRUD,
    category_crud,
    question_crud,
    quiz_crud,
)
from braincast.boundary.db.CRUD.notification_token_crud import (
    NotificationTokenCRUD,
    notification_token_crud,
)
from braincast.boundary.db.CRUD.score_crud import UserScoreCRUD, score_crud

__all__ = [
    "BaseCRUD",
    "ProfileCRUD",
    "profile_crud",
    "FriendCRUD",
    "friend_crud",
    "ChallengeCRUD",
    "challenge_crud",
    "QuizCRUD",
    "quiz_crud",
    "QuestionCRUD",
    "question_crud",
    "CategoryCRUD",
    "category_crud",
    "NotificationTokenCRUD",
    "notification_token_crud",
    "UserScoreCRUD",
    "score_crud",
]
