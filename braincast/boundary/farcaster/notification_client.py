"""
Mini-app notification client.

POSTs one notification to the host endpoint a client registered for a token.

Dependencies: httpx
System role: Outbound notification delivery
"""

import logging
from dataclasses import dataclass
from typing import Any

import httpx

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NotificationPayload:
    """A single notification addressed to one token."""

    notification_id: str
    title: str
    body: str
    target_url: str

    def to_request(self, token: str) -> dict[str, Any]:
        """Body the host endpoint expects."""
        return {
            "tokens": [token],
            "notificationId": self.notification_id,
            "title": self.title,
            "body": self.body,
            "targetUrl": self.target_url,
        }


class NotificationClient:
    """
    HTTP client for mini-app notification endpoints.

    Failures never propagate: a failed delivery is logged and reported as None.
    """

    def __init__(
        self,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Args:
            timeout: Per-request timeout in seconds
            transport: Optional transport override (used by tests)
        """
        self.timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self._transport)

    async def send(
        self,
        token: str,
        url: str,
        payload: NotificationPayload,
    ) -> dict[str, Any] | None:
        """
        Deliver a notification to one token.

        Args:
            token: Device token
            url: Host endpoint registered with the token
            payload: Notification content

        Returns:
            dict | None: Host's JSON response, None on any failure
        """
        try:
            async with self._client() as client:
                response = await client.post(url, json=payload.to_request(token))
                response.raise_for_status()
                return response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(
                "Notification delivery failed",
                extra={
                    "notification_id": payload.notification_id,
                    "url": url,
                    "error": str(e),
                },
            )
            return None
