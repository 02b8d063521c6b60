from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.repositories.user_repository import UserRepository
from ...domain.ports import Encrypter, Hasher, IdGenerator
from ...application.use_cases.user import (
    SignUpUseCase,
    SignInUseCase,
    ExternalSignInUseCase,
    UpdateUserUseCase,
    ReadUserUseCase,
    ReadAllUsersUseCase,
    AuthenticateUserUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class UserProvider:
    """User account use case provider - registers all account-related use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all user account use cases.
        Use cases are created on-demand via factories.
        """
        max_id_attempts = get_settings().id_generation_max_attempts

        container.register_factory(
            SignUpUseCase,
            lambda: SignUpUseCase(
                user_repository=container.get(UserRepository),
                hasher=container.get(Hasher),
                encrypter=container.get(Encrypter),
                id_generator=container.get(IdGenerator),
                max_id_attempts=max_id_attempts,
            )
        )

        container.register_factory(
            SignInUseCase,
            lambda: SignInUseCase(
                user_repository=container.get(UserRepository),
                hasher=container.get(Hasher),
                encrypter=container.get(Encrypter),
            )
        )

        container.register_factory(
            ExternalSignInUseCase,
            lambda: ExternalSignInUseCase(
                user_repository=container.get(UserRepository),
                encrypter=container.get(Encrypter),
                id_generator=container.get(IdGenerator),
                max_id_attempts=max_id_attempts,
            )
        )

        container.register_factory(
            UpdateUserUseCase,
            lambda: UpdateUserUseCase(
                user_repository=container.get(UserRepository),
                hasher=container.get(Hasher),
            )
        )

        container.register_factory(
            ReadUserUseCase,
            lambda: ReadUserUseCase(user_repository=container.get(UserRepository))
        )

        container.register_factory(
            ReadAllUsersUseCase,
            lambda: ReadAllUsersUseCase(user_repository=container.get(UserRepository))
        )

        container.register_factory(
            AuthenticateUserUseCase,
            lambda: AuthenticateUserUseCase(
                user_repository=container.get(UserRepository),
                encrypter=container.get(Encrypter),
            )
        )
