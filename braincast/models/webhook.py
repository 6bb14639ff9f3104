"""
Mini-app webhook schemas.

Dependencies: pydantic
System role: Webhook API contracts
"""

from pydantic import BaseModel, ConfigDict, Field


class NotificationDetails(BaseModel):
    token: str
    url: str


class WebhookEvent(BaseModel):
    """Event posted by the mini-app host."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    event: str
    notification_details: NotificationDetails | None = Field(None, alias="notificationDetails")
