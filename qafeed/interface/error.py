"""Interface layer errors.

Maps domain errors onto HTTP responses.
"""

import logfire
from fastapi import HTTPException, status

from qafeed.domain.error import (
    BusinessRuleViolationError,
    DomainError,
    NotAuthorizedError,
    NotFoundError,
    StorageError,
    ValidationError,
)

_STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (NotAuthorizedError, status.HTTP_403_FORBIDDEN),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (BusinessRuleViolationError, status.HTTP_409_CONFLICT),
    (StorageError, status.HTTP_500_INTERNAL_SERVER_ERROR),
]


def to_http_exception(error: DomainError, action: str) -> HTTPException:
    """Translate a domain error raised while performing ``action``.

    Storage failures are logged as errors and reported without their
    cause; every other domain error is reported to the client as is.

    Args:
        error: Domain error to translate
        action: Short description of the request, used in logs

    Returns:
        HTTPException to raise
    """
    status_code = next(
        (code for kind, code in _STATUS_BY_ERROR if isinstance(error, kind)),
        status.HTTP_400_BAD_REQUEST,
    )

    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logfire.error(f"Storage failure while trying to {action}", error=str(error))
        return HTTPException(status_code=status_code, detail=f"Failed to {action}")

    logfire.warn(
        f"Could not {action}", error=str(error), error_type=type(error).__name__
    )
    detail: str | dict[str, str] = str(error)
    if isinstance(error, ValidationError) and error.field:
        detail = {"message": str(error), "field": error.field}
    return HTTPException(status_code=status_code, detail=detail)


def unexpected_error(error: Exception, action: str) -> HTTPException:
    """Log an unexpected failure and return an opaque 500."""
    logfire.error(f"Unexpected error while trying to {action}", error=str(error))
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Failed to {action}",
    )
