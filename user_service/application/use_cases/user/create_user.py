# Standard library imports
import logging

# Local application imports
from ....core.validators import validate_user_input
from ....domain.exceptions import InputValidationError
from ....domain.models.user import User
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import UserCreateRequest, UserReference

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    """Use case for creating a new user"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: UserCreateRequest) -> UserReference:
        """
        Create a new user

        Args:
            request: Creation request with full name, email and password

        Returns:
            UserReference with the new id and email

        Raises:
            InputValidationError: If any field fails its format rule
            UserAlreadyExistsError: If a user with this email already exists
        """
        errors = validate_user_input(request.email, request.full_name, request.password)
        if errors:
            raise InputValidationError(errors)

        # Password is stored as submitted (no hashing)
        new_user = User(
            id=None,  # Will be set by repository
            full_name=request.full_name,
            email=request.email,
            password=request.password,
        )

        # Duplicate emails are rejected by the unique index
        saved_user = await self.user_repository.create(new_user)
        logger.info("Created user %s", saved_user.email)

        return UserReference(id=saved_user.id or "", email=saved_user.email)
