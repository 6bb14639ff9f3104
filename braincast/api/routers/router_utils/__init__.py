"""Shared helpers for API routers."""

from braincast.api.routers.router_utils.error_handling import handle_route_errors

__all__ = ["handle_route_errors"]
