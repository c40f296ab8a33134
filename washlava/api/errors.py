"""
Mapping from domain exceptions to HTTP errors.
"""

import logging

from fastapi import HTTPException, status

from washlava.core.exceptions import (
    DatabaseError,
    DocumentNotFoundError,
    EmptyUpdateError,
    IllegalStatusTransitionError,
    InvalidObjectIdError,
    InvalidRoleError,
    InvalidStatusError,
    WashlavaException,
)

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal Server Error"

_BAD_REQUEST = (
    InvalidObjectIdError,
    InvalidStatusError,
    InvalidRoleError,
    EmptyUpdateError,
    IllegalStatusTransitionError,
)


def http_error(exc: WashlavaException) -> HTTPException:
    """
    Translate a domain exception into an HTTPException.

    Store faults are logged with their cause and reported with a generic
    message only.
    """
    if isinstance(exc, _BAD_REQUEST):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    if isinstance(exc, DocumentNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not found")
    if isinstance(exc, DatabaseError):
        logger.error(f"{exc}", exc_info=exc.original_error or exc)
    else:
        logger.error(f"Unhandled domain error: {exc}", exc_info=exc)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=INTERNAL_ERROR_MESSAGE,
    )
