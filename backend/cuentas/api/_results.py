"""Translate service results into HTTP errors."""
import logging

from fastapi import HTTPException, status

from ..services.results import (
    ConflictError,
    Failure,
    InvalidCredentials,
    NotFound,
    Result,
    Success,
    ValidationError,
)

logger = logging.getLogger(__name__)


def unwrap(result: Result):
    """Return the payload of a Success, raise the matching HTTPException otherwise."""
    if isinstance(result, Success):
        return result.payload
    if isinstance(result, NotFound):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=result.message)
    if isinstance(result, ValidationError):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"message": "Validation error", "errors": result.messages},
        )
    if isinstance(result, ConflictError):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail={"field": result.field, "message": result.message},
        )
    if isinstance(result, InvalidCredentials):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=result.message,
            headers={"WWW-Authenticate": "Bearer"},
        )
    if isinstance(result, Failure):
        # Internal detail stays in the log
        logger.error("Request failed: %s (%r)", result.reason, result.cause)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal server error")
    raise TypeError(f"Unknown result type: {type(result).__name__}")
