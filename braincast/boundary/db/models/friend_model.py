"""
Friend request ORM model.

A directed relationship proposal between two profiles.

Dependencies: sqlalchemy, braincast.boundary.db.base
System role: Persistence for the friend request lifecycle
"""

import enum
from uuid import UUID

from sqlalchemy import CheckConstraint, Enum, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from braincast.boundary.db.base import Base, UUIDMixin, TimestampMixin


class FriendStatus(str, enum.Enum):
    """
    Friend request states.

    PENDING: Sent, waiting for the recipient
    ACCEPTED: Recipient accepted; the pair are friends

    Declined requests are deleted rather than stored with a status.
    """

    PENDING = "pending"
    ACCEPTED = "accepted"


class FriendModel(Base, UUIDMixin, TimestampMixin):
    """
    Friend request ORM model.

    Only the recipient may resolve a pending request. Resolution either flips
    status to ACCEPTED or deletes the row.

    Attributes:
        id: UUID primary key
        sender_id: Profile that sent the request
        recipient_id: Profile that may accept or decline
        status: FriendStatus

    Constraints:
        sender_id != recipient_id
    """

    __tablename__ = "friends"
    __table_args__ = (
        CheckConstraint("sender_id <> recipient_id", name="ck_friends_not_self"),
    )

    sender_id: Mapped[UUID] = mapped_column(
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    recipient_id: Mapped[UUID] = mapped_column(
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    status: Mapped[FriendStatus] = mapped_column(
        Enum(
            FriendStatus,
            native_enum=False,
            values_callable=lambda statuses: [status.value for status in statuses],
        ),
        nullable=False,
        default=FriendStatus.PENDING,
    )

    sender = relationship("ProfileModel", foreign_keys=[sender_id])
    recipient = relationship("ProfileModel", foreign_keys=[recipient_id])
