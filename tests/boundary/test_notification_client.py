"""
Test suite for NotificationClient.

Uses httpx.MockTransport so no network is touched.

System role: Verification of outbound notification delivery
"""

import json

import httpx
import pytest

from braincast.boundary.farcaster import NotificationClient, NotificationPayload


@pytest.fixture
def payload() -> NotificationPayload:
    return NotificationPayload(
        notification_id="challenge-received-1",
        title="New Quiz Challenge!",
        body="Ann has challenged you to beat their score on Capitals",
        target_url="https://braincast.example/challenges",
    )


class TestNotificationPayload:
    """Test suite for NotificationPayload.to_request()."""

    def test_to_request_should_address_single_token(self, payload: NotificationPayload) -> None:
        assert payload.to_request("tok-1") == {
            "tokens": ["tok-1"],
            "notificationId": "challenge-received-1",
            "title": "New Quiz Challenge!",
            "body": "Ann has challenged you to beat their score on Capitals",
            "targetUrl": "https://braincast.example/challenges",
        }


class TestNotificationClientSend:
    """Test suite for NotificationClient.send()."""

    async def test_send_should_post_payload_and_return_response(
        self, payload: NotificationPayload
    ) -> None:
        # Arrange
        captured = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(200, json={"result": {"successfulTokens": ["tok-1"]}})

        client = NotificationClient(transport=httpx.MockTransport(handler))

        # Act
        result = await client.send("tok-1", "https://host.example/notify", payload)

        # Assert
        assert result == {"result": {"successfulTokens": ["tok-1"]}}
        assert len(captured) == 1
        assert captured[0].method == "POST"
        assert str(captured[0].url) == "https://host.example/notify"
        assert json.loads(captured[0].content)["tokens"] == ["tok-1"]

    async def test_send_should_return_none_on_error_status(
        self, payload: NotificationPayload
    ) -> None:
        client = NotificationClient(
            transport=httpx.MockTransport(lambda request: httpx.Response(500))
        )

        result = await client.send("tok-1", "https://host.example/notify", payload)

        assert result is None

    async def test_send_should_return_none_on_connection_error(
        self, payload: NotificationPayload
    ) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = NotificationClient(transport=httpx.MockTransport(handler))

        result = await client.send("tok-1", "https://host.example/notify", payload)

        assert result is None

    async def test_send_should_return_none_on_invalid_json(
        self, payload: NotificationPayload
    ) -> None:
        client = NotificationClient(
            transport=httpx.MockTransport(lambda request: httpx.Response(200, text="ok"))
        )

        result = await client.send("tok-1", "https://host.example/notify", payload)

        assert result is None
