# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.ports import Encrypter, Hasher
from ....domain.models.user_record import UserChanges
from ....domain.exceptions import InvalidCredentialsError
from ....domain.result import Err, Ok, Result
from ...dto.auth_dto import SignInRequest
from ...dto.user_dto import UserResponse

logger = logging.getLogger(__name__)


class SignInUseCase:
    """Use case for authenticating with email and password"""

    def __init__(self, user_repository: UserRepository, hasher: Hasher, encrypter: Encrypter) -> None:
        self.user_repository = user_repository
        self.hasher = hasher
        self.encrypter = encrypter

    async def execute(self, request: SignInRequest) -> Result[UserResponse, InvalidCredentialsError]:
        """
        Check credentials and issue a fresh access token

        Accounts created through external sign-in have no password hash and
        cannot sign in this way.

        Args:
            request: Sign-in request with email and password

        Returns:
            Ok(UserResponse) with the rotated token, Err(InvalidCredentialsError) otherwise
        """
        user = await self.user_repository.find_by_email(request.email)
        if user is None or not user.password_hash:
            return Err(InvalidCredentialsError())

        if not await self.hasher.compare(request.password, user.password_hash):
            logger.info(f"Sign-in rejected for user {user.id}: wrong password")
            return Err(InvalidCredentialsError())

        access_token = await self.encrypter.encrypt(user.id)
        updated_user = await self.user_repository.update_by_id(user.id, UserChanges(access_token=access_token))
        if updated_user is None:
            # Removed between lookup and update
            return Err(InvalidCredentialsError())

        return Ok(UserResponse.from_record(updated_user))
