"""
Database models package.

Exports:
  - ProfileModel: User profile
  - FriendModel, FriendStatus: Friend request and its states
  - ChallengeModel, ChallengeStatus: Challenge and its states
  - QuizModel, QuestionModel, CategoryModel: Quiz catalogue
  - NotificationTokenModel: Mini-app notification targets
  - UserScoreModel: Finished quiz plays

Dependencies: sqlalchemy, braincast.boundary.db.base
System role: Database model definitions for domain entities
"""

from braincast.boundary.db.models.profile_model import ProfileModel
from braincast.boundary.db.models.friend_model import FriendModel, FriendStatus
from braincast.boundary.db.models.challenge_model import ChallengeModel, ChallengeStatus
from braincast.boundary.db.models.quiz_model import CategoryModel, QuestionModel, QuizModel
from braincast.boundary.db.models.notification_token_model import NotificationTokenModel
from braincast.boundary.db.models.score_model import UserScoreModel

__all__ = [
    "ProfileModel",
    "FriendModel",
    "FriendStatus",
    "ChallengeModel",
    "ChallengeStatus",
    "QuizModel",
    "QuestionModel",
    "CategoryModel",
    "NotificationTokenModel",
    "UserScoreModel",
]
