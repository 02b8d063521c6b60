# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import NonExistingUserError
from ....domain.result import Err, Ok, Result
from ...dto.user_dto import UserResponse


class ReadUserUseCase:
    """Use case for getting a user by ID"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, user_id: str) -> Result[UserResponse, NonExistingUserError]:
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            return Err(NonExistingUserError())
        return Ok(UserResponse.from_record(user))
