from .user import (
    SignUpUseCase,
    SignInUseCase,
    ExternalSignInUseCase,
    UpdateUserUseCase,
    ReadUserUseCase,
    ReadAllUsersUseCase,
    AuthenticateUserUseCase,
)

__all__ = [
    "SignUpUseCase",
    "SignInUseCase",
    "ExternalSignInUseCase",
    "UpdateUserUseCase",
    "ReadUserUseCase",
    "ReadAllUsersUseCase",
    "AuthenticateUserUseCase",
]
