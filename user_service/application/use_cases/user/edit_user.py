# Standard library imports
import logging

# Local application imports
from ....domain.exceptions import UserNotFoundError
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import UserEditRequest, UserReference

logger = logging.getLogger(__name__)


class EditUserUseCase:
    """Use case for changing a user's full name and/or password"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: UserEditRequest) -> UserReference:
        """
        Update an existing user

        Missing or empty full_name/password values keep the stored ones.

        Raises:
            UserNotFoundError: If no user has the given email
        """
        if not request.email:
            raise UserNotFoundError()

        user = await self.user_repository.update(
            request.email,
            full_name=request.full_name,
            password=request.password,
        )
        logger.info("Updated user %s", user.email)

        return UserReference(id=user.id or "", email=user.email)
