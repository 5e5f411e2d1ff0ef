from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...infrastructure.storage.local_image_storage import LocalImageStorage
from ...application.use_cases.user import (
    CreateUserUseCase,
    DeleteUserUseCase,
    EditUserUseCase,
    ListUsersUseCase,
    UploadUserImageUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class UserProvider:
    """User use case provider - registers all user-related use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all user use cases.
        Use cases are created on-demand via factories.
        """
        container.register_factory(
            CreateUserUseCase,
            lambda: CreateUserUseCase(
                user_repository=container.get(UserRepository)
            )
        )

        container.register_factory(
            EditUserUseCase,
            lambda: EditUserUseCase(
                user_repository=container.get(UserRepository)
            )
        )

        container.register_factory(
            DeleteUserUseCase,
            lambda: DeleteUserUseCase(
                user_repository=container.get(UserRepository)
            )
        )

        container.register_factory(
            ListUsersUseCase,
            lambda: ListUsersUseCase(
                user_repository=container.get(UserRepository)
            )
        )

        container.register_factory(
            UploadUserImageUseCase,
            lambda: UploadUserImageUseCase(
                user_repository=container.get(UserRepository),
                image_storage=container.get(LocalImageStorage),
            )
        )
