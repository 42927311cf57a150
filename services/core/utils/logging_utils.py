"""
Centralized logging utilities
"""

import logging
from typing import Any

logger = logging.getLogger(__name__)


def log_error_with_context(
    operation: str,
    exception: Exception,
    context: dict[str, Any] | None = None,
    exc_info: bool = False,
):
    """Log an exception together with the operation it interrupted and its context."""
    context = context or {}
    details = ", ".join(f"{key}={value}" for key, value in context.items())
    error_msg = f"Error in {operation}: {exception!s}"
    if details:
        error_msg += f" ({details})"
    logger.error(
        error_msg,
        extra={
            **context,
            "operation": operation,
            "exception_type": type(exception).__name__,
            "exception_message": str(exception),
        },
        exc_info=exc_info,
    )
