"""
Test suite for NotificationService.

Runs the dispatcher on its own sessions from the test session factory with
an httpx.MockTransport behind the notification client.

System role: Verification of fire-and-forget notification fan-out
"""

import json
import uuid

import httpx
import pytest

from braincast.application.services.notification_service import NotificationService
from braincast.boundary.db.CRUD.notification_token_crud import notification_token_crud
from braincast.boundary.farcaster import NotificationClient


class RecordingHost:
    """Mock notification host; URLs listed in failing answer 500."""

    def __init__(self, failing: tuple[str, ...] = ()) -> None:
        self.requests: list[httpx.Request] = []
        self.failing = failing

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if str(request.url) in self.failing:
            return httpx.Response(500)
        return httpx.Response(200, json={"result": {"successfulTokens": []}})


@pytest.fixture
async def parties(test_async_db, make_profile, make_quiz):
    sender = await make_profile(username="ann", display_name="Ann")
    recipient = await make_profile(username="bob")
    quiz = await make_quiz(title="Capitals")
    return sender, recipient, quiz


async def add_token(db, user_id, token, url, enabled=True):
    await notification_token_crud.create(db, user_id=user_id, token=token, url=url, enabled=enabled)
    await db.commit()


def build_service(session_factory, host: RecordingHost, enabled: bool = True) -> NotificationService:
    return NotificationService(
        session_factory=session_factory,
        client=NotificationClient(transport=httpx.MockTransport(host)),
        app_url="https://braincast.example/",
        enabled=enabled,
    )


class TestNotifyChallengeReceived:
    """Test suite for NotificationService.notify_challenge_received()."""

    @pytest.mark.asyncio
    async def test_sends_to_each_enabled_token(
        self, test_async_db, test_session_factory, parties
    ) -> None:
        # Arrange
        sender, recipient, quiz = parties
        await add_token(test_async_db, recipient.id, "tok-1", "https://host-a.example/notify")
        await add_token(test_async_db, recipient.id, "tok-2", "https://host-b.example/notify")
        await add_token(test_async_db, recipient.id, "tok-3", "https://host-c.example/notify", enabled=False)
        host = RecordingHost()
        service = build_service(test_session_factory, host)
        challenge_id = uuid.uuid4()

        # Act
        results = await service.notify_challenge_received(challenge_id, recipient.id, sender.id, quiz.id)

        # Assert
        assert len(results) == 2
        assert sorted(str(r.url) for r in host.requests) == [
            "https://host-a.example/notify",
            "https://host-b.example/notify",
        ]
        body = json.loads(host.requests[0].content)
        assert body["notificationId"] == f"challenge-received-{challenge_id}"
        assert body["title"] == "New Quiz Challenge!"
        assert body["body"] == "Ann has challenged you to beat their score on Capitals"
        assert body["targetUrl"] == "https://braincast.example/challenges"

    @pytest.mark.asyncio
    async def test_failed_token_yields_none_and_others_still_sent(
        self, test_async_db, test_session_factory, parties
    ) -> None:
        sender, recipient, quiz = parties
        await add_token(test_async_db, recipient.id, "tok-1", "https://down.example/notify")
        await add_token(test_async_db, recipient.id, "tok-2", "https://up.example/notify")
        host = RecordingHost(failing=("https://down.example/notify",))
        service = build_service(test_session_factory, host)

        results = await service.notify_challenge_received(uuid.uuid4(), recipient.id, sender.id, quiz.id)

        assert len(host.requests) == 2
        assert sum(result is None for result in results) == 1

    @pytest.mark.asyncio
    async def test_no_tokens_sends_nothing(self, test_session_factory, parties) -> None:
        sender, recipient, quiz = parties
        host = RecordingHost()

        results = await build_service(test_session_factory, host).notify_challenge_received(
            uuid.uuid4(), recipient.id, sender.id, quiz.id
        )

        assert results == []
        assert host.requests == []

    @pytest.mark.asyncio
    async def test_disabled_dispatcher_sends_nothing(
        self, test_async_db, test_session_factory, parties
    ) -> None:
        sender, recipient, quiz = parties
        await add_token(test_async_db, recipient.id, "tok-1", "https://host-a.example/notify")
        host = RecordingHost()

        results = await build_service(test_session_factory, host, enabled=False).notify_challenge_received(
            uuid.uuid4(), recipient.id, sender.id, quiz.id
        )

        assert results == []
        assert host.requests == []

    @pytest.mark.asyncio
    async def test_store_failure_is_swallowed(self) -> None:
        def broken_factory():
            raise RuntimeError("database unavailable")

        service = build_service(broken_factory, RecordingHost())

        results = await service.notify_challenge_received(
            uuid.uuid4(), uuid.uuid4(), uuid.uuid4(), uuid.uuid4()
        )

        assert results == []


class TestNotifyQuizCompleted:
    """Test suite for NotificationService.notify_quiz_completed()."""

    @pytest.mark.asyncio
    async def test_sends_result_to_player(self, test_async_db, test_session_factory, parties) -> None:
        _, player, quiz = parties
        await add_token(test_async_db, player.id, "tok-1", "https://host-a.example/notify")
        host = RecordingHost()

        results = await build_service(test_session_factory, host).notify_quiz_completed(
            player.id, quiz.id, score=2, max_score=3
        )

        assert len(results) == 1
        body = json.loads(host.requests[0].content)
        assert body["notificationId"] == f"quiz-completion-{quiz.id}-{player.id}"
        assert body["title"] == "Quiz Completed!"
        assert body["body"] == "You scored 2/3 (67%) on Capitals"
        assert body["targetUrl"] == f"https://braincast.example/quiz/{quiz.id}/results"

    @pytest.mark.asyncio
    async def test_store_failure_is_swallowed(self) -> None:
        def broken_factory():
            raise RuntimeError("database unavailable")

        results = await build_service(broken_factory, RecordingHost()).notify_quiz_completed(
            uuid.uuid4(), uuid.uuid4(), score=1, max_score=1
        )

        assert results == []
