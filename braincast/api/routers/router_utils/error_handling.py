"""
Route error handling.

A decorator for consistent error handling across API endpoints. Domain
errors pass through unchanged (the app-level handler renders them); anything
else is logged with context and replaced by an UpstreamFailureError carrying
the operation's generic failure message.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from braincast.core.exceptions import BrainCastException, UpstreamFailureError
from braincast.observability.log_utils import log_exception_with_context, safe_log_value

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def handle_route_errors(failure_message: str) -> Callable[[F], F]:
    """
    Decorator factory mapping unexpected failures to a generic message.

    Args:
        failure_message: Message surfaced for non-domain failures,
            e.g. "Failed to accept friend request"

    Usage:
        @router.post("/{request_id}/accept")
        @handle_route_errors("Failed to accept friend request")
        async def accept(...): ...
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await func(*args, **kwargs)

            except BrainCastException as e:
                logger.warning(
                    e.message,
                    extra={
                        "operation": func.__name__,
                        "status_code": e.status_code,
                        **{key: safe_log_value(val) for key, val in e.details.items()},
                    },
                )
                raise

            except Exception as e:
                log_exception_with_context(
                    logger,
                    failure_message,
                    e,
                    operation=func.__name__,
                )
                raise UpstreamFailureError(failure_message) from e

        return wrapper  # type: ignore

    return decorator
