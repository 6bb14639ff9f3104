"""
Route gate decision.

Decides, per request path, whether a page needs a signed-in user or the admin
flag, and where to send the visitor when it is missing. The decision is pure;
the Starlette middleware in braincast.api.middleware applies it.

Dependencies: braincast.configs
System role: Page-level access control
"""

import enum
from dataclasses import dataclass
from typing import Callable
from urllib.parse import urlencode

from braincast.configs.auth import AuthSettings


class GateAction(str, enum.Enum):
    """What the gate does with a request."""

    ALLOW = "allow"
    REDIRECT = "redirect"


@dataclass(frozen=True)
class GateDecision:
    """Outcome of evaluating one path."""

    action: GateAction
    location: str | None = None

    @property
    def allowed(self) -> bool:
        return self.action is GateAction.ALLOW


ALLOW = GateDecision(GateAction.ALLOW)


def path_matches(path: str, prefix: str) -> bool:
    """True when path is prefix itself or lies below it."""
    prefix = prefix.rstrip("/") or "/"
    return path == prefix or path.startswith(prefix + "/")


class RouteGate:
    """
    Path-prefix access rules.

    Rules, first match wins:
        1. Login pages always pass, so redirects cannot loop.
        2. API paths pass; their handlers answer 401 themselves.
        3. Admin paths need the admin cookie to hold the exact sentinel value.
        4. Protected page prefixes need a session user.
        5. Everything else passes.
    """

    def __init__(self, settings: AuthSettings) -> None:
        self.settings = settings

    def is_login_page(self, path: str) -> bool:
        return path in (self.settings.login_path, self.settings.admin_login_path)

    def is_api(self, path: str) -> bool:
        return path_matches(path, self.settings.api_prefix)

    def is_admin(self, path: str) -> bool:
        return path_matches(path, self.settings.admin_prefix)

    def is_protected(self, path: str) -> bool:
        return any(path_matches(path, prefix) for prefix in self.settings.protected_prefixes)

    def redirect_to(self, login_path: str, original_path: str) -> GateDecision:
        query = urlencode({self.settings.return_param: original_path}, safe="/")
        return GateDecision(GateAction.REDIRECT, f"{login_path}?{query}")

    def decide(
        self,
        path: str,
        session_user: Callable[[], str | None],
        admin_cookie: str | None,
    ) -> GateDecision:
        """
        Evaluate one request.

        Args:
            path: Request path
            session_user: Resolves the session's user id; only called for
                protected page paths
            admin_cookie: Raw value of the admin flag cookie, if any

        Returns:
            GateDecision: ALLOW, or REDIRECT with the login location
        """
        if self.is_login_page(path) or self.is_api(path):
            return ALLOW

        if self.is_admin(path):
            if admin_cookie != self.settings.admin_cookie_value:
                return GateDecision(GateAction.REDIRECT, self.settings.admin_login_path)
            return ALLOW

        if self.is_protected(path) and not session_user():
            return self.redirect_to(self.settings.login_path, path)

        return ALLOW
