# Standard library imports
import logging
from typing import Union

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.ports import Hasher
from ....domain.models.user import User
from ....domain.models.user_record import UserChanges
from ....domain.exceptions import ExistingUserError, NonExistingUserError, ValidationError
from ....domain.result import Err, Ok, Result
from ...dto.user_dto import UserResponse, UserUpdateRequest

logger = logging.getLogger(__name__)

UpdateUserResult = Result[UserResponse, Union[ValidationError, ExistingUserError, NonExistingUserError]]


class UpdateUserUseCase:
    """Use case for partially updating a user's name, email or password"""

    def __init__(self, user_repository: UserRepository, hasher: Hasher) -> None:
        self.user_repository = user_repository
        self.hasher = hasher

    async def execute(self, user_id: str, request: UserUpdateRequest) -> UpdateUserResult:
        """
        Update the supplied fields of a user

        The stored name and email are merged with the overrides and validated
        together, so the account is still a valid User afterwards. Only the
        supplied fields are written.

        Args:
            user_id: ID of the user to update
            request: Fields to change; None means unchanged

        Returns:
            Ok(UserResponse) with the updated account, Err(NonExistingUserError)
            for an unknown ID, Err(ValidationError) for malformed input,
            Err(ExistingUserError) if the new email belongs to another user
        """
        current_user = await self.user_repository.find_by_id(user_id)
        if current_user is None:
            return Err(NonExistingUserError())

        # Untouched stored fields are validated again alongside the overrides
        user_or_error = User.create(
            request.name if request.name is not None else current_user.name,
            request.email if request.email is not None else current_user.email,
            request.password,
        )
        if user_or_error.is_error():
            return Err(user_or_error.value)
        user = user_or_error.value

        changes = UserChanges()
        if request.name is not None:
            changes.name = user.name.value

        if request.email is not None:
            owner = await self.user_repository.find_by_email(user.email.value)
            if owner is not None and owner.id != current_user.id:
                logger.info(f"Update of user {user_id} rejected: email already registered")
                return Err(ExistingUserError())
            changes.email = user.email.value

        if user.password is not None:
            changes.password_hash = await self.hasher.hash(user.password.value)

        updated_user = await self.user_repository.update_by_id(user_id, changes)
        if updated_user is None:
            # Removed between lookup and update
            return Err(NonExistingUserError())

        logger.info(f"Updated user {user_id} ({', '.join(changes.to_dict()) or 'no fields'})")
        return Ok(UserResponse.from_record(updated_user))
