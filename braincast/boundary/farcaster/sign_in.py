"""
Sign In With Farcaster message verification.

Checks the shape of a SIWF message (``farcaster://`` URL carrying domain,
nonce, uri and issued_at) and resolves the identity it signs in. The
signature check itself is a pluggable collaborator: the default verifier
trusts the identity reported alongside a well-formed, signed message, and a
deployment can swap in a verifier that checks the signature against the
user's custody key.

Dependencies: braincast.core.exceptions
System role: Identity resolution for session sign-in
"""

import logging
from dataclasses import dataclass
from urllib.parse import parse_qs, urlparse

from braincast.core.exceptions import UnauthorizedError, ValidationError

logger = logging.getLogger(__name__)

REQUIRED_MESSAGE_PARAMS = ("domain", "nonce", "uri", "issued_at")


@dataclass(frozen=True)
class SignInMessage:
    """Parsed SIWF message parameters."""

    domain: str
    nonce: str
    uri: str
    issued_at: str


@dataclass(frozen=True)
class VerifiedIdentity:
    """Farcaster identity a verified message signs in."""

    fid: int
    username: str | None = None
    display_name: str | None = None
    pfp_url: str | None = None


def parse_sign_in_message(message: str) -> SignInMessage:
    """
    Parse a SIWF message.

    Args:
        message: ``farcaster://farcaster.xyz/login?domain=...&nonce=...&uri=...&issued_at=...``

    Returns:
        SignInMessage: The message parameters

    Raises:
        ValidationError: Wrong scheme or a required parameter is missing
    """
    parsed = urlparse(message.strip())
    if parsed.scheme != "farcaster":
        raise ValidationError("Invalid sign-in message", field="message")

    params = parse_qs(parsed.query)
    missing = [name for name in REQUIRED_MESSAGE_PARAMS if not params.get(name, [""])[0]]
    if missing:
        raise ValidationError("Invalid sign-in message", field="message", details={"missing": missing})

    return SignInMessage(**{name: params[name][0] for name in REQUIRED_MESSAGE_PARAMS})


class SignInVerifier:
    """
    Default SIWF verifier.

    Accepts a well-formed message with a non-empty signature, optionally bound
    to one domain, and returns the identity the client reported. Subclasses
    override verify_signature to add cryptographic checks.
    """

    def __init__(self, domain: str | None = None) -> None:
        """
        Args:
            domain: When set, messages issued for any other domain are rejected
        """
        self.domain = domain

    async def verify_signature(self, message: SignInMessage, raw_message: str, signature: str) -> bool:
        return bool(signature.strip())

    async def verify(
        self,
        message: str,
        signature: str,
        identity: VerifiedIdentity,
    ) -> VerifiedIdentity:
        """
        Verify a sign-in attempt.

        Args:
            message: Raw SIWF message
            signature: Signature over the message
            identity: Identity the client claims

        Returns:
            VerifiedIdentity: The identity to sign in

        Raises:
            ValidationError: Malformed message
            UnauthorizedError: Wrong domain or signature rejected
        """
        parsed = parse_sign_in_message(message)

        if self.domain and parsed.domain != self.domain:
            logger.warning(
                "Sign-in message for another domain rejected",
                extra={"message_domain": parsed.domain, "fid": identity.fid},
            )
            raise UnauthorizedError("Invalid signature")

        if not await self.verify_signature(parsed, message, signature):
            logger.warning("Sign-in signature rejected", extra={"fid": identity.fid})
            raise UnauthorizedError("Invalid signature")

        return identity
