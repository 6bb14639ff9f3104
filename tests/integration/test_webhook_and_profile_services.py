"""
Test suite for WebhookService and ProfileService against an in-memory database.

System role: Verification of notification token registration and profile upserts
"""

import uuid

import pytest

from braincast.application.services.profile_service import ProfileService
from braincast.application.services.webhook_service import WebhookService
from braincast.boundary.db.CRUD.notification_token_crud import notification_token_crud
from braincast.core.exceptions import NotFoundError
from braincast.models.auth import FarcasterProfileRequest
from braincast.models.webhook import WebhookEvent


@pytest.fixture
def webhook_service(test_async_db) -> WebhookService:
    return WebhookService(test_async_db)


@pytest.fixture
def profile_service(test_async_db) -> ProfileService:
    return ProfileService(test_async_db)


def enable_event(token: str = "tok-1") -> WebhookEvent:
    return WebhookEvent.model_validate(
        {
            "event": "frame_added",
            "notificationDetails": {"token": token, "url": "https://host.example/notify"},
        }
    )


class TestWebhookService:
    """Test suite for WebhookService.handle_event()."""

    @pytest.mark.asyncio
    async def test_enable_event_stores_token(
        self, webhook_service: WebhookService, test_async_db, make_profile
    ) -> None:
        user = await make_profile()

        changed = await webhook_service.handle_event(enable_event(), user.id)

        assert changed is True
        tokens = await notification_token_crud.list_enabled(test_async_db, user.id)
        assert [(t.token, t.url) for t in tokens] == [("tok-1", "https://host.example/notify")]

    @pytest.mark.asyncio
    async def test_disable_event_disables_every_token(
        self, webhook_service: WebhookService, test_async_db, make_profile
    ) -> None:
        user = await make_profile()
        await webhook_service.handle_event(enable_event("tok-1"), user.id)
        await webhook_service.handle_event(enable_event("tok-2"), user.id)

        changed = await webhook_service.handle_event(
            WebhookEvent(event="notifications_disabled"), user.id
        )

        assert changed is True
        assert await notification_token_crud.list_enabled(test_async_db, user.id) == []

    @pytest.mark.asyncio
    async def test_event_without_session_is_ignored(
        self, webhook_service: WebhookService, test_async_db
    ) -> None:
        changed = await webhook_service.handle_event(enable_event(), None)

        assert changed is False
        assert await notification_token_crud.get_all(test_async_db) == []

    @pytest.mark.asyncio
    async def test_enable_without_details_and_unknown_events_are_ignored(
        self, webhook_service: WebhookService, make_profile
    ) -> None:
        user = await make_profile()

        assert await webhook_service.handle_event(WebhookEvent(event="frame_added"), user.id) is False
        assert await webhook_service.handle_event(WebhookEvent(event="mystery"), user.id) is False


class TestProfileService:
    """Test suite for ProfileService."""

    @pytest.mark.asyncio
    async def test_upsert_creates_then_refreshes_by_fid(
        self, profile_service: ProfileService
    ) -> None:
        created = await profile_service.upsert_farcaster_profile(
            FarcasterProfileRequest(fid=42, username="ann", displayName="Ann")
        )
        refreshed = await profile_service.upsert_farcaster_profile(
            FarcasterProfileRequest(fid=42, displayName="Ann B", pfpUrl="https://img/ann.png")
        )

        assert refreshed.id == created.id
        assert refreshed.username == "ann"
        assert refreshed.display_name == "Ann B"
        assert refreshed.avatar_url == "https://img/ann.png"

    @pytest.mark.asyncio
    async def test_get_profile_missing_is_not_found(self, profile_service: ProfileService) -> None:
        with pytest.raises(NotFoundError):
            await profile_service.get_profile(uuid.uuid4())
