"""
Translation of Supabase/PostgREST errors into HTTP errors.

Services let postgrest APIError propagate untouched. Routes call
http_error_from_api_error() to turn the Postgres SQLSTATE into a status code
and the standard {"error": ..., "details": ...} body.
"""

import logging

from fastapi import HTTPException, status
from postgrest.exceptions import APIError

from catalog.utils.constants import CHECK_VIOLATION, FOREIGN_KEY_VIOLATION, UNIQUE_VIOLATION

logger = logging.getLogger(__name__)


def http_error_from_api_error(
    e: APIError,
    error: str,
    details: str,
    conflict_details: str = "Resource already exists"
) -> HTTPException:
    """
    Map a PostgREST APIError to an HTTPException.

    Args:
        e: The error raised by the Supabase client
        error: Error slug used for unexpected database failures (500)
        details: Human-readable message for unexpected failures
        conflict_details: Message used for unique violations (409)

    Returns:
        HTTPException ready to be raised by the route
    """
    if e.code == UNIQUE_VIOLATION:
        logger.warning(f"Unique constraint violated: {e.message}")
        return HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail={"error": "conflict", "details": conflict_details}
        )

    if e.code == CHECK_VIOLATION:
        logger.warning(f"Check constraint violated: {e.message}")
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error": "invalid_request", "details": "Value violates a table constraint"}
        )

    if e.code == FOREIGN_KEY_VIOLATION:
        logger.warning(f"Foreign key violated: {e.message}")
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"error": "not_found", "details": "Referenced record does not exist"}
        )

    logger.error(f"Database error ({e.code}): {e.message}", exc_info=True)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail={"error": error, "details": details}
    )
