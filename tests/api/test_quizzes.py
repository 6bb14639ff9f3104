from datetime import datetime, timezone
from types import SimpleNamespace
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from braincast.api.deps.dependencies import get_quiz_service
from braincast.core.exceptions import NotFoundError


@pytest.fixture
def mock_quiz_service():
    return AsyncMock()


def make_quiz(plays=0, questions=None):
    now = datetime.now(timezone.utc)
    quiz_id = uuid4()
    return SimpleNamespace(
        id=quiz_id,
        title="World Capitals",
        description=None,
        emoji="🌍",
        category_id=1,
        creator_id=uuid4(),
        time_limit=60,
        is_published=True,
        plays=plays,
        created_at=now,
        updated_at=now,
        category=SimpleNamespace(name="Geography", emoji="🗺️"),
        creator=SimpleNamespace(username="ann", display_name="Ann", avatar_url=None),
        questions=[
            SimpleNamespace(
                id=uuid4(),
                quiz_id=quiz_id,
                text=text,
                question_type="multiple-choice",
                options=["a", "b"],
                correct_answer="a",
                correct_answers=None,
                image_url=None,
                map_url=None,
                map_coordinates=None,
                order_index=index,
            )
            for index, text in enumerate(questions or [])
        ],
    )


def test_get_quiz_returns_details(app, client, mock_quiz_service):
    quiz = make_quiz(plays=4, questions=["First?", "Second?"])
    mock_quiz_service.get_quiz.return_value = quiz
    app.dependency_overrides[get_quiz_service] = lambda: mock_quiz_service

    response = client.get(f"/api/quizzes/{quiz.id}")

    assert response.status_code == 200
    data = response.json()
    assert data["plays"] == 4
    assert data["category"] == {"name": "Geography", "emoji": "🗺️"}
    assert data["creator"]["username"] == "ann"
    assert [q["text"] for q in data["questions"]] == ["First?", "Second?"]
    mock_quiz_service.get_quiz.assert_awaited_once_with(quiz.id)


def test_get_quiz_needs_no_session(app, client, mock_quiz_service):
    quiz = make_quiz()
    mock_quiz_service.get_quiz.return_value = quiz
    app.dependency_overrides[get_quiz_service] = lambda: mock_quiz_service

    response = client.get(f"/api/quizzes/{quiz.id}", follow_redirects=False)

    assert response.status_code == 200


def test_get_missing_quiz_returns_404(app, client, mock_quiz_service):
    mock_quiz_service.get_quiz.side_effect = NotFoundError("Quiz not found")
    app.dependency_overrides[get_quiz_service] = lambda: mock_quiz_service

    response = client.get(f"/api/quizzes/{uuid4()}")

    assert response.status_code == 404
    assert response.json() == {"error": "Quiz not found"}


def test_get_quiz_store_failure_returns_generic_500(app, client, mock_quiz_service):
    mock_quiz_service.get_quiz.side_effect = RuntimeError("timeout")
    app.dependency_overrides[get_quiz_service] = lambda: mock_quiz_service

    response = client.get(f"/api/quizzes/{uuid4()}")

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to fetch quiz"}


def test_list_quizzes_passes_filters(app, client, mock_quiz_service):
    mock_quiz_service.list_quizzes.return_value = [make_quiz(), make_quiz()]
    app.dependency_overrides[get_quiz_service] = lambda: mock_quiz_service

    response = client.get(
        "/api/quizzes",
        params={"category": "3", "filter": "popular", "limit": 5, "page": 2},
    )

    assert response.status_code == 200
    assert len(response.json()) == 2
    mock_quiz_service.list_quizzes.assert_awaited_once_with(
        category_id=3, sort="popular", limit=5, page=2
    )


def test_list_quizzes_defaults(app, client, mock_quiz_service):
    mock_quiz_service.list_quizzes.return_value = []
    app.dependency_overrides[get_quiz_service] = lambda: mock_quiz_service

    response = client.get("/api/quizzes", params={"category": "all"})

    assert response.status_code == 200
    mock_quiz_service.list_quizzes.assert_awaited_once_with(
        category_id=None, sort="all", limit=10, page=0
    )


def test_list_quizzes_rejects_non_numeric_category(app, client, mock_quiz_service):
    app.dependency_overrides[get_quiz_service] = lambda: mock_quiz_service

    response = client.get("/api/quizzes", params={"category": "science"})

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid category"}


def test_create_quiz_requires_session(app, client, mock_quiz_service):
    app.dependency_overrides[get_quiz_service] = lambda: mock_quiz_service

    response = client.post(
        "/api/quizzes",
        json={"title": "New", "questions": [{"text": "Q?", "type": "multiple-choice"}]},
    )

    assert response.status_code == 401
    mock_quiz_service.create_quiz.assert_not_called()


def test_create_quiz(app, signed_in_client, mock_quiz_service):
    user_id = uuid4()
    client = signed_in_client(user_id)
    mock_quiz_service.create_quiz.return_value = make_quiz(questions=["Q?"])
    app.dependency_overrides[get_quiz_service] = lambda: mock_quiz_service

    response = client.post(
        "/api/quizzes",
        json={
            "title": "World Capitals",
            "questions": [
                {
                    "text": "Q?",
                    "type": "multiple-choice",
                    "options": ["a", "b"],
                    "correctAnswer": "a",
                }
            ],
        },
    )

    assert response.status_code == 201
    assert response.json()["title"] == "World Capitals"
    creator_id, request = mock_quiz_service.create_quiz.await_args.args
    assert creator_id == user_id
    assert request.questions[0].correct_answer == "a"


def test_list_categories(app, client, mock_quiz_service):
    now = datetime.now(timezone.utc)
    mock_quiz_service.list_categories.return_value = [
        SimpleNamespace(id=1, name="Geography", emoji="🌍", description=None, created_at=now),
        SimpleNamespace(id=2, name="History", emoji="📜", description=None, created_at=now),
    ]
    app.dependency_overrides[get_quiz_service] = lambda: mock_quiz_service

    response = client.get("/api/categories")

    assert response.status_code == 200
    assert [c["name"] for c in response.json()] == ["Geography", "History"]


def test_list_categories_failure(app, client, mock_quiz_service):
    mock_quiz_service.list_categories.side_effect = RuntimeError("down")
    app.dependency_overrides[get_quiz_service] = lambda: mock_quiz_service

    response = client.get("/api/categories")

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to fetch categories"}
