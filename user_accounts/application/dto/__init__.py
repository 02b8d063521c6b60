from .auth_dto import SignUpRequest, SignInRequest, ExternalSignInRequest
from .user_dto import UserResponse, UserUpdateRequest

__all__ = [
    "SignUpRequest",
    "SignInRequest",
    "ExternalSignInRequest",
    "UserResponse",
    "UserUpdateRequest",
]
