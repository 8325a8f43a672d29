"""
Common API utilities shared by the route modules.
"""
import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError

from ..errors import InternalError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)

SERVER_ERROR = "Server error."
SERVER_ERROR_RETRY = "Server error. Please try again."


def is_missing(value: Optional[str]) -> bool:
    # Presence only: whitespace counts as a submitted value.
    return value is None or value == ""


def require_fields(message: str, *values: Optional[str]) -> None:
    """
    Raise a ValidationError with ``message`` if any value is missing or empty.

    Args:
        message: Error message returned to the client
        values: The submitted field values

    Raises:
        ValidationError: If a value is None or empty
    """
    if any(is_missing(value) for value in values):
        raise ValidationError(message)


def check_resource_exists(resource: Optional[object], resource_type: str) -> None:
    """
    Raise NotFoundError if ``resource`` is None.

    Args:
        resource: The resource to check
        resource_type: Type of resource for the error message
    """
    if resource is None:
        raise NotFoundError(f"{resource_type} not found.")


def is_duplicate_key(error: Exception) -> bool:
    """True when the storage layer rejected a write on a uniqueness constraint."""
    return isinstance(error, IntegrityError)


def handle_storage_error(error: Exception, operation: str, message: str = SERVER_ERROR) -> InternalError:
    """
    Log a storage failure and return the generic error sent to the client.

    Args:
        error: The exception that occurred
        operation: Name of the operation for the log line
        message: Client-facing message

    Returns:
        InternalError carrying only the generic message
    """
    logger.error("%s error: %s", operation, error)
    return InternalError(message)
