from datetime import datetime, timezone
from types import SimpleNamespace
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from braincast.api.deps.dependencies import get_notification_service, get_score_service
from braincast.core.exceptions import NotFoundError


@pytest.fixture
def mock_score_service():
    return AsyncMock()


@pytest.fixture
def mock_notification_service():
    return AsyncMock()


@pytest.fixture
def user_id():
    return uuid4()


def make_score(user_id, quiz_id, score=7, max_score=10):
    return SimpleNamespace(
        id=uuid4(),
        user_id=user_id,
        quiz_id=quiz_id,
        score=score,
        max_score=max_score,
        percentage=70,
        time_taken=None,
        created_at=datetime.now(timezone.utc),
    )


def test_record_score_without_session_returns_401(app, client, mock_score_service):
    app.dependency_overrides[get_score_service] = lambda: mock_score_service

    response = client.post("/api/scores", json={"quiz_id": str(uuid4()), "score": 1, "max_score": 1})

    assert response.status_code == 401
    mock_score_service.record_score.assert_not_called()


def test_record_score_schedules_completion_notification(
    app, signed_in_client, mock_score_service, mock_notification_service, user_id
):
    client = signed_in_client(user_id)
    quiz_id = uuid4()
    mock_score_service.record_score.return_value = make_score(user_id, quiz_id)
    app.dependency_overrides[get_score_service] = lambda: mock_score_service
    app.dependency_overrides[get_notification_service] = lambda: mock_notification_service

    response = client.post(
        "/api/scores",
        json={"quiz_id": str(quiz_id), "score": 7, "max_score": 10},
    )

    assert response.status_code == 201
    assert response.json()["percentage"] == 70
    mock_score_service.record_score.assert_awaited_once_with(user_id, quiz_id, 7, 10, time_taken=None)
    mock_notification_service.notify_quiz_completed.assert_awaited_once_with(
        user_id=user_id,
        quiz_id=quiz_id,
        score=7,
        max_score=10,
    )


def test_record_score_unknown_quiz_returns_404(
    app, signed_in_client, mock_score_service, mock_notification_service, user_id
):
    client = signed_in_client(user_id)
    mock_score_service.record_score.side_effect = NotFoundError("Quiz not found")
    app.dependency_overrides[get_score_service] = lambda: mock_score_service
    app.dependency_overrides[get_notification_service] = lambda: mock_notification_service

    response = client.post("/api/scores", json={"quiz_id": str(uuid4()), "score": 1, "max_score": 1})

    assert response.status_code == 404
    assert response.json() == {"error": "Quiz not found"}
    mock_notification_service.notify_quiz_completed.assert_not_called()


@pytest.mark.parametrize(
    "body",
    [
        {"score": -1, "max_score": 10},
        {"score": 1, "max_score": 0},
    ],
)
def test_record_score_rejects_invalid_numbers(app, signed_in_client, mock_score_service, user_id, body):
    client = signed_in_client(user_id)
    app.dependency_overrides[get_score_service] = lambda: mock_score_service

    response = client.post("/api/scores", json={"quiz_id": str(uuid4()), **body})

    assert response.status_code == 422
    mock_score_service.record_score.assert_not_called()
