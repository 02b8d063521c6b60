from .sign_up import SignUpUseCase
from .sign_in import SignInUseCase
from .external_sign_in import ExternalSignInUseCase
from .update_user import UpdateUserUseCase
from .read_user import ReadUserUseCase
from .read_all_users import ReadAllUsersUseCase
from .authenticate_user import AuthenticateUserUseCase

__all__ = [
    "SignUpUseCase",
    "SignInUseCase",
    "ExternalSignInUseCase",
    "UpdateUserUseCase",
    "ReadUserUseCase",
    "ReadAllUsersUseCase",
    "AuthenticateUserUseCase",
]
