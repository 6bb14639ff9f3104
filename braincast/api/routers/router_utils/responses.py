"""
Response mappers.

Convert ORM entities into API response models.
"""

from typing import Iterable

from braincast.boundary.db.models.challenge_model import ChallengeModel
from braincast.boundary.db.models.friend_model import FriendModel
from braincast.boundary.db.models.quiz_model import CategoryModel, QuizModel
from braincast.models.challenge import ChallengeDetailResponse, ChallengeResponse
from braincast.models.friend import FriendRequestResponse
from braincast.models.quiz import CategoryResponse, QuizDetailResponse, QuizResponse


def map_friend_request_to_response(friend_request: FriendModel) -> FriendRequestResponse:
    return FriendRequestResponse.model_validate(friend_request)


def map_challenge_to_response(challenge: ChallengeModel) -> ChallengeResponse:
    return ChallengeResponse.model_validate(challenge)


def map_challenges_to_response(
    challenges: Iterable[ChallengeModel],
) -> list[ChallengeDetailResponse]:
    """Map challenges whose sender, recipient and quiz are already loaded."""
    return [ChallengeDetailResponse.model_validate(challenge) for challenge in challenges]


def map_quiz_to_detail_response(quiz: QuizModel) -> QuizDetailResponse:
    """Map a quiz whose category, creator and questions are already loaded."""
    return QuizDetailResponse.model_validate(quiz)


def map_quizzes_to_response(quizzes: Iterable[QuizModel]) -> list[QuizResponse]:
    return [QuizResponse.model_validate(quiz) for quiz in quizzes]


def map_categories_to_response(categories: Iterable[CategoryModel]) -> list[CategoryResponse]:
    return [CategoryResponse.model_validate(category) for category in categories]
