"""Farcaster mini-app integration: sign-in verification and notification delivery."""

from braincast.boundary.farcaster.notification_client import (
    NotificationClient,
    NotificationPayload,
)
from braincast.boundary.farcaster.sign_in import (
    SignInMessage,
    SignInVerifier,
    VerifiedIdentity,
    parse_sign_in_message,
)

__all__ = [
    "NotificationClient",
    "NotificationPayload",
    "SignInMessage",
    "SignInVerifier",
    "VerifiedIdentity",
    "parse_sign_in_message",
]
