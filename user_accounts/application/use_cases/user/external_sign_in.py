# Standard library imports
import logging
from typing import Union

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.ports import Encrypter, IdGenerator
from ....domain.models.user import User
from ....domain.models.user_record import NewUserRecord, UserChanges, UserRecord
from ....domain.exceptions import NonExistingUserError, ValidationError
from ....domain.result import Err, Ok, Result
from ...dto.auth_dto import ExternalSignInRequest
from ...dto.user_dto import UserResponse
from .util import generate_unique_id

logger = logging.getLogger(__name__)

ExternalSignInResult = Result[UserResponse, Union[ValidationError, NonExistingUserError]]


class ExternalSignInUseCase:
    """
    Use case for sign-in vouched for by an external identity provider.

    Upsert keyed on email: a known email gets a new access token, an
    unknown one gets a new password-less account. The token rotates on
    every call.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        encrypter: Encrypter,
        id_generator: IdGenerator,
        max_id_attempts: int = 10,
    ) -> None:
        self.user_repository = user_repository
        self.encrypter = encrypter
        self.id_generator = id_generator
        self.max_id_attempts = max_id_attempts

    async def execute(self, request: ExternalSignInRequest) -> ExternalSignInResult:
        """
        Sign in (or register) the externally authenticated user

        Args:
            request: Name and email asserted by the identity provider

        Returns:
            Ok(UserResponse) with a fresh token, Err(ValidationError) for malformed input
        """
        user_or_error = User.create(request.name, request.email)
        if user_or_error.is_error():
            return Err(user_or_error.value)
        user = user_or_error.value

        existing_user = await self.user_repository.find_by_email(user.email.value)

        user_data: UserRecord
        if existing_user is not None:
            access_token = await self.encrypter.encrypt(existing_user.id)
            updated_user = await self.user_repository.update_by_email(
                user.email.value, UserChanges(access_token=access_token)
            )
            if updated_user is None:
                # Removed between lookup and update
                return Err(NonExistingUserError())
            user_data = updated_user
            logger.info(f"External sign-in rotated token for user {user_data.id}")
        else:
            user_id = await generate_unique_id(self.user_repository, self.id_generator, self.max_id_attempts)
            access_token = await self.encrypter.encrypt(user_id)
            user_data = await self.user_repository.add(
                NewUserRecord(
                    id=user_id,
                    name=user.name.value,
                    email=user.email.value,
                    access_token=access_token,
                )
            )
            logger.info(f"External sign-in registered user {user_data.id}")

        return Ok(UserResponse.from_record(user_data))
