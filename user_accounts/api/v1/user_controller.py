# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter, Depends, status

# Local application imports
from ...application.dto.auth_dto import SignUpRequest, SignInRequest, ExternalSignInRequest
from ...application.dto.user_dto import UserResponse, UserUpdateRequest
from ...application.use_cases.user import (
    SignUpUseCase,
    SignInUseCase,
    ExternalSignInUseCase,
    UpdateUserUseCase,
    ReadUserUseCase,
    ReadAllUsersUseCase,
)
from ...domain.result import Err, Ok
from ...di.container import get_container
from .dependencies import get_current_user
from .errors import to_http_exception


router = APIRouter(tags=["users"])


@router.post("/signup", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def sign_up(request: SignUpRequest) -> UserResponse:
    """
    Register a new user with a password

    Args:
        request: Sign-up request

    Returns:
        UserResponse with the created account and its access token
    """
    container = get_container()
    sign_up_use_case = container.get(SignUpUseCase)

    match await sign_up_use_case.execute(request):
        case Ok(user):
            return user
        case Err(error):
            raise to_http_exception(error)


@router.post("/signin", response_model=UserResponse)
async def sign_in(request: SignInRequest) -> UserResponse:
    """Authenticate with email and password and get a fresh access token"""
    container = get_container()
    sign_in_use_case = container.get(SignInUseCase)

    match await sign_in_use_case.execute(request):
        case Ok(user):
            return user
        case Err(error):
            raise to_http_exception(error)


@router.post("/external-signin", response_model=UserResponse)
async def external_sign_in(request: ExternalSignInRequest) -> UserResponse:
    """
    Sign in a user authenticated by an external identity provider

    Creates the account on first use and rotates the access token on every call.
    """
    container = get_container()
    external_sign_in_use_case = container.get(ExternalSignInUseCase)

    match await external_sign_in_use_case.execute(request):
        case Ok(user):
            return user
        case Err(error):
            raise to_http_exception(error)


@router.get("/user", response_model=UserResponse)
async def get_me(current_user: UserResponse = Depends(get_current_user)) -> UserResponse:
    """Get current authenticated user information"""
    return current_user


@router.patch("/user", response_model=UserResponse)
async def update_me(
    request: UserUpdateRequest,
    current_user: UserResponse = Depends(get_current_user),
) -> UserResponse:
    """
    Update the authenticated user's name, email or password

    Args:
        request: Fields to change
        current_user: Current authenticated user (from dependency)

    Returns:
        UserResponse with the updated account
    """
    container = get_container()
    update_use_case = container.get(UpdateUserUseCase)

    match await update_use_case.execute(current_user.id, request):
        case Ok(user):
            return user
        case Err(error):
            raise to_http_exception(error)


@router.get("/user/all", response_model=List[UserResponse])
async def read_all_users(current_user: UserResponse = Depends(get_current_user)) -> List[UserResponse]:
    """List all users (authenticated)"""
    container = get_container()
    read_all_use_case = container.get(ReadAllUsersUseCase)
    return await read_all_use_case.execute()


@router.get("/user/{user_id}", response_model=UserResponse)
async def read_user(user_id: str, current_user: UserResponse = Depends(get_current_user)) -> UserResponse:
    """Get a user by ID (authenticated)"""
    container = get_container()
    read_user_use_case = container.get(ReadUserUseCase)

    match await read_user_use_case.execute(user_id):
        case Ok(user):
            return user
        case Err(error):
            raise to_http_exception(error)
