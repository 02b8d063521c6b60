# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import UserResponse


class ReadAllUsersUseCase:
    """Use case for listing every user"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self) -> List[UserResponse]:
        users = await self.user_repository.find_all()
        return [UserResponse.from_record(user) for user in users]
