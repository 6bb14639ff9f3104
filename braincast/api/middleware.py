"""
Route gate middleware.

Applies RouteGate to every request before routing. Fails open: if the
session cannot be evaluated the request goes through.

Dependencies: starlette, braincast.core.route_gate, braincast.boundary.session_store
System role: Page-level authentication enforcement
"""

import logging
from typing import Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import RedirectResponse
from starlette.types import ASGIApp

from braincast.boundary.session_store import get_session_user_id
from braincast.configs.auth import AuthSettings
from braincast.core.route_gate import RouteGate

logger = logging.getLogger(__name__)


class RouteGateMiddleware(BaseHTTPMiddleware):
    """Middleware redirecting anonymous visitors away from protected pages."""

    def __init__(
        self,
        app: ASGIApp,
        settings: AuthSettings,
        session_resolver: Callable[[Request], str | None] = get_session_user_id,
    ) -> None:
        super().__init__(app)
        self.settings = settings
        self.gate = RouteGate(settings)
        self.session_resolver = session_resolver

    async def dispatch(self, request: Request, call_next):
        """
        Redirect or pass the request through.

        Args:
            request: FastAPI request
            call_next: Next middleware in chain

        Returns:
            Response: Redirect to a login page, or the downstream response
        """
        path = request.url.path
        try:
            decision = self.gate.decide(
                path,
                session_user=lambda: self.session_resolver(request),
                admin_cookie=request.cookies.get(self.settings.admin_cookie),
            )
        except Exception as e:
            logger.exception(
                "Route gate evaluation failed, allowing request",
                extra={"path": path, "error": str(e)},
            )
            return await call_next(request)

        if not decision.allowed:
            logger.info(
                "Redirecting unauthenticated request",
                extra={"path": path, "location": decision.location},
            )
            return RedirectResponse(decision.location, status_code=307)

        return await call_next(request)
