"""
Exception hierarchy for the BrainCast application.

Provides layered exception structure for domain-specific errors.
Each exception carries the HTTP status it surfaces as, so the API layer can
render every failure as a uniform ``{"error": message}`` body.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class BrainCastException(Exception):
    """Base exception for all BrainCast application errors."""

    status_code: int = 500

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class UnauthorizedError(BrainCastException):
    """Raised when there is no session, or the acting user is not the authorized party."""

    status_code = 401

    def __init__(
        self,
        message: str = "Unauthorized",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)


class ForbiddenError(BrainCastException):
    """Raised when an endpoint is disabled for the current environment."""

    status_code = 403


class NotFoundError(BrainCastException):
    """
    Raised when an entity is absent or does not match the full lookup predicate.

    Missing rows, rows owned by someone else and rows already resolved all
    surface as this same error.
    """

    status_code = 404

    def __init__(
        self,
        message: str,
        entity: str | None = None,
        entity_id: Any = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize not found error.

        Args:
            message: Error message shown to the caller
            entity: Entity kind (friend_request, challenge, quiz, ...)
            entity_id: ID that was looked up
            details: Additional context
        """
        details = details or {}
        if entity:
            details["entity"] = entity
        if entity_id is not None:
            details["entity_id"] = str(entity_id)
        super().__init__(message, details)


class InvalidStateError(BrainCastException):
    """Raised when an entity exists but its current status forbids the transition."""

    status_code = 400

    def __init__(
        self,
        message: str,
        current_status: str | None = None,
        requested_status: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize invalid state error.

        Args:
            message: Error message
            current_status: Status the entity currently holds
            requested_status: Status the caller asked for
            details: Additional context
        """
        details = details or {}
        if current_status:
            details["current_status"] = current_status
        if requested_status:
            details["requested_status"] = requested_status
        super().__init__(message, details)


class ValidationError(BrainCastException):
    """Raised when a request breaks a business rule (self-friending, duplicates)."""

    status_code = 400

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class UpstreamFailureError(BrainCastException):
    """Raised when a store call or other collaborator fails."""

    status_code = 500
