"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Async connection management
  - Profile, Friend, Challenge, Quiz, Question, Category, NotificationToken models
  - FriendStatus, ChallengeStatus: Enum types for state tracking
  - CRUD singletons for every model

Dependencies: sqlalchemy, braincast.configs
System role: Relational store adapter for profiles, social graph, challenges
and the quiz catalogue.
"""

from braincast.boundary.db.base import Base, CreatedAtMixin, TimestampMixin, UUIDMixin
from braincast.boundary.db.connection import (
    dispose_engine,
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from braincast.boundary.db.models import (
    CategoryModel,
    ChallengeModel,
    ChallengeStatus,
    FriendModel,
    FriendStatus,
    NotificationTokenModel,
    ProfileModel,
    QuestionModel,
    QuizModel,
)
from braincast.boundary.db.CRUD import (
    BaseCRUD,
    category_crud,
    challenge_crud,
    friend_crud,
    notification_token_crud,
    profile_crud,
    question_crud,
    quiz_crud,
)

__all__ = [
    # Base classes
    "Base",
    "CreatedAtMixin",
    "TimestampMixin",
    "UUIDMixin",
    # Connection
    "dispose_engine",
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "CategoryModel",
    "ChallengeModel",
    "ChallengeStatus",
    "FriendModel",
    "FriendStatus",
    "NotificationTokenModel",
    "ProfileModel",
    "QuestionModel",
    "QuizModel",
    # CRUD
    "BaseCRUD",
    "category_crud",
    "challenge_crud",
    "friend_crud",
    "notification_token_crud",
    "profile_crud",
    "question_crud",
    "quiz_crud",
]
