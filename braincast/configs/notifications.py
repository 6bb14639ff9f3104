"""
Notification configuration settings.

Settings for the mini-app notification fan-out.

Dependencies: pydantic_settings
System role: Notification delivery configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class NotificationSettings(BaseSettings):
    """Notification delivery configuration."""

    app_url: str = Field(
        default="http://localhost:3000",
        description="Public app URL used to build notification target links",
    )
    request_timeout: float = Field(
        default=10.0,
        description="Timeout in seconds for each notification webhook call",
    )
    enabled: bool = Field(
        default=True,
        description="Send notifications at all",
    )

    class Config:
        """Pydantic config for environment variable loading."""

        env_prefix = "NOTIFICATIONS_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"
