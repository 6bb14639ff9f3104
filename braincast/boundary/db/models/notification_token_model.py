"""
Notification token ORM model.

Device tokens handed over by the mini-app host when a user adds the app or
enables notifications.

Dependencies: sqlalchemy, braincast.boundary.db.base
System role: Notification target persistence
"""

from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from braincast.boundary.db.base import Base, UUIDMixin, TimestampMixin


class NotificationTokenModel(Base, UUIDMixin, TimestampMixin):
    """
    Notification token ORM model.

    Attributes:
        user_id: Profile the token delivers to
        token: Opaque token issued by the host client
        url: Host endpoint notifications are POSTed to
        enabled: False once the user removed the app or muted notifications
    """

    __tablename__ = "notification_tokens"

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    token: Mapped[str] = mapped_column(String(512), nullable=False)
    url: Mapped[str] = mapped_column(String(2048), nullable=False)
    enabled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
