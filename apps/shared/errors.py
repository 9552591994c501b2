"""
Error taxonomy and secure error handling

Domain errors carry the HTTP status and category they map to, so route
handlers can raise them and a single exception handler renders them.
Unexpected errors are logged in full server-side and returned sanitized.
"""

import logging
import uuid
from typing import Optional

logger = logging.getLogger(__name__)


class BlogServiceError(Exception):
    """Base class for errors the API reports to clients."""

    status_code = 500
    category = "server_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(BlogServiceError):
    """Missing or invalid required field, or path/body id mismatch."""

    status_code = 400
    category = "validation"

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class NotFoundError(BlogServiceError):
    """Operation targets an id that does not exist."""

    status_code = 404
    category = "not_found"


class StoreUnavailableError(BlogServiceError):
    """The backing store could not be reached."""

    status_code = 500
    category = "database"


def missing_field_message(field: str) -> str:
    return f"Missing `{field}` in request body"


def log_and_sanitize_error(
    error: Exception,
    context: str,
    user_message: Optional[str] = None
) -> tuple[str, str]:
    """
    Log full error details server-side and return sanitized message for client.

    Args:
        error: The exception that occurred
        context: Description of what operation failed (e.g., "Create post")
        user_message: Optional custom message to show user. If None, uses generic message.

    Returns:
        Tuple of (sanitized_message, error_id) for client response
    """
    # Generate unique error ID for correlation
    error_id = str(uuid.uuid4())[:8]

    # Log full error server-side
    logger.error(
        f"{context} failed [{error_id}]: {type(error).__name__}: {str(error)}",
        exc_info=error
    )

    # Return sanitized message for client
    if user_message:
        sanitized = f"{user_message} (Error ID: {error_id})"
    else:
        sanitized = f"{context} failed. Please try again later. (Error ID: {error_id})"

    return sanitized, error_id
