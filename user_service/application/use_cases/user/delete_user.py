# Standard library imports
import logging

# Local application imports
from ....domain.exceptions import UserNotFoundError
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import UserDeleteRequest

logger = logging.getLogger(__name__)


class DeleteUserUseCase:
    """Use case for deleting a user by email"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: UserDeleteRequest) -> None:
        if not request.email:
            raise UserNotFoundError()

        await self.user_repository.delete(request.email)
        logger.info("Deleted user %s", request.email)
