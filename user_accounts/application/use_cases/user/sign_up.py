# Standard library imports
import logging
from typing import Union

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.ports import Encrypter, Hasher, IdGenerator
from ....domain.models.user import User
from ....domain.models.user_record import NewUserRecord
from ....domain.exceptions import ExistingUserError, ValidationError
from ....domain.result import Err, Ok, Result
from ...dto.auth_dto import SignUpRequest
from ...dto.user_dto import UserResponse
from .util import generate_unique_id

logger = logging.getLogger(__name__)

SignUpResult = Result[UserResponse, Union[ValidationError, ExistingUserError]]


class SignUpUseCase:
    """Use case for registering a new user with a password"""

    def __init__(
        self,
        user_repository: UserRepository,
        hasher: Hasher,
        encrypter: Encrypter,
        id_generator: IdGenerator,
        max_id_attempts: int = 10,
    ) -> None:
        self.user_repository = user_repository
        self.hasher = hasher
        self.encrypter = encrypter
        self.id_generator = id_generator
        self.max_id_attempts = max_id_attempts

    async def execute(self, request: SignUpRequest) -> SignUpResult:
        """
        Register a new user

        Args:
            request: Sign-up request with name, email and password

        Returns:
            Ok(UserResponse) for the created account, Err(ValidationError) for
            malformed input, Err(ExistingUserError) if the email is taken

        Raises:
            IdGenerationError: If no unused ID could be generated
            RepositoryError: If the repository fails
        """
        user_or_error = User.create(request.name, request.email, request.password)
        if user_or_error.is_error():
            return Err(user_or_error.value)
        user = user_or_error.value

        # Check if user already exists
        existing_user = await self.user_repository.find_by_email(user.email.value)
        if existing_user is not None:
            logger.info("Sign-up rejected: email already registered")
            return Err(ExistingUserError())

        password_hash = await self.hasher.hash(user.password.value)
        user_id = await generate_unique_id(self.user_repository, self.id_generator, self.max_id_attempts)
        access_token = await self.encrypter.encrypt(user_id)

        saved_user = await self.user_repository.add(
            NewUserRecord(
                id=user_id,
                name=user.name.value,
                email=user.email.value,
                access_token=access_token,
                password_hash=password_hash,
            )
        )
        logger.info(f"Registered user {saved_user.id}")

        return Ok(UserResponse.from_record(saved_user))
