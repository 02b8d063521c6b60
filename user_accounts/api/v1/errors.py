# Standard library imports
import logging
from typing import Dict, Type

# External package imports
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse

# Local application imports
from ...domain.exceptions import (
    AccountError,
    DuplicateRecordError,
    ExistingUserError,
    InvalidCredentialsError,
    InvalidTokenError,
    NonExistingUserError,
    ValidationError,
    get_user_message,
)

logger = logging.getLogger(__name__)

# Domain errors returned by use cases -> HTTP status
_ERROR_STATUS: Dict[Type[AccountError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    InvalidCredentialsError: status.HTTP_401_UNAUTHORIZED,
    InvalidTokenError: status.HTTP_401_UNAUTHORIZED,
    ExistingUserError: status.HTTP_403_FORBIDDEN,
    NonExistingUserError: status.HTTP_403_FORBIDDEN,
}


def error_body(error: AccountError) -> Dict[str, str]:
    return {"error": type(error).__name__, "message": get_user_message(error)}


def to_http_exception(error: AccountError) -> HTTPException:
    """
    Translate a domain error returned by a use case into an HTTPException

    Args:
        error: Error carried by an Err result

    Returns:
        HTTPException ready to be raised from a route
    """
    for error_type, status_code in _ERROR_STATUS.items():
        if isinstance(error, error_type):
            return HTTPException(status_code=status_code, detail=error_body(error))
    logger.error(f"Unmapped domain error returned by use case: {error!r}")
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=error_body(error),
    )


def register_exception_handlers(application: FastAPI) -> None:
    """Translate infrastructure failures raised below the use cases"""

    @application.exception_handler(DuplicateRecordError)
    async def handle_duplicate_record(request: Request, exc: DuplicateRecordError) -> JSONResponse:
        logger.warning(f"{request.method} {request.url.path} hit a uniqueness conflict: {exc.message}")
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content={"detail": {"error": "ExistingUserError", "message": get_user_message(exc)}},
        )

    @application.exception_handler(AccountError)
    async def handle_account_error(request: Request, exc: AccountError) -> JSONResponse:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}", exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": {"error": type(exc).__name__, "message": get_user_message(exc)}},
        )
