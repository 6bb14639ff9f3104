"""
Observability module.

Provides structured logging setup, correlation ID tracking and request
logging middleware.
"""

from braincast.observability.correlation import get_correlation_id, set_correlation_id
from braincast.observability.logger import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger", "get_correlation_id", "set_correlation_id"]
