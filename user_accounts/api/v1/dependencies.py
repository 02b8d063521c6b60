# Standard library imports
from typing import Optional

# External package imports
from fastapi import Depends, HTTPException, status
from fastapi.security import APIKeyHeader

# Local application imports
from ...application.use_cases.user.authenticate_user import AuthenticateUserUseCase
from ...application.dto.user_dto import UserResponse
from ...domain.exceptions import InvalidTokenError
from ...domain.result import Err, Ok
from ...di.container import get_container
from .errors import error_body, to_http_exception


ACCESS_TOKEN_HEADER = "x-access-token"

access_token_scheme = APIKeyHeader(name=ACCESS_TOKEN_HEADER, auto_error=False)


async def get_current_user(
    access_token: Optional[str] = Depends(access_token_scheme),
) -> UserResponse:
    """
    FastAPI dependency to get current authenticated user from the access token header

    Args:
        access_token: Value of the x-access-token header

    Returns:
        UserResponse with user information

    Raises:
        HTTPException: If the header is missing, the token is invalid or superseded
    """
    if not access_token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=error_body(InvalidTokenError("Missing access token")),
        )

    container = get_container()
    authenticate_use_case = container.get(AuthenticateUserUseCase)

    match await authenticate_use_case.execute(access_token):
        case Ok(user):
            return user
        case Err(error):
            raise to_http_exception(error)
