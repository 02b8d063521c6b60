# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.ports.id_generator import IdGenerator
from ....domain.exceptions import IdGenerationError

logger = logging.getLogger(__name__)


async def generate_unique_id(
    user_repository: UserRepository,
    id_generator: IdGenerator,
    max_attempts: int,
) -> str:
    """
    Generate an ID that no stored user has yet

    The check is not atomic with the later insert; the repository's key
    constraint rejects the rare concurrent duplicate.

    Args:
        user_repository: Repository used to look up candidates
        id_generator: Source of candidate IDs
        max_attempts: Number of candidates to try before giving up

    Returns:
        Unused user ID

    Raises:
        IdGenerationError: If every candidate was already taken
    """
    for attempt in range(1, max_attempts + 1):
        candidate = await id_generator.generate()
        if await user_repository.find_by_id(candidate) is None:
            return candidate
        logger.warning(f"Generated user id collided with an existing user (attempt {attempt}/{max_attempts})")

    raise IdGenerationError(max_attempts)
