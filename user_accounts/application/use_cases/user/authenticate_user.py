# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.ports import Encrypter
from ....domain.exceptions import InvalidTokenError
from ....domain.result import Err, Ok, Result
from ...dto.user_dto import UserResponse

logger = logging.getLogger(__name__)


class AuthenticateUserUseCase:
    """Use case for resolving the user behind an access token"""

    def __init__(self, user_repository: UserRepository, encrypter: Encrypter) -> None:
        self.user_repository = user_repository
        self.encrypter = encrypter

    async def execute(self, token: str) -> Result[UserResponse, InvalidTokenError]:
        """
        Get the current user from an access token

        Only the most recently issued token of a user is accepted; sign-in
        and external sign-in rotate it.

        Args:
            token: Access token from the request

        Returns:
            Ok(UserResponse) for the token's owner, Err(InvalidTokenError) otherwise
        """
        user_id = await self.encrypter.decrypt(token)
        if not user_id:
            return Err(InvalidTokenError())

        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            return Err(InvalidTokenError("Access token refers to an unknown user"))

        if user.access_token != token:
            logger.info(f"Rejected superseded access token for user {user.id}")
            return Err(InvalidTokenError("Access token has been superseded"))

        return Ok(UserResponse.from_record(user))
