# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import UserSummary


class ListUsersUseCase:
    """Use case for listing every user (name and email only)"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self) -> List[UserSummary]:
        users = await self.user_repository.list_all()
        return [UserSummary(full_name=user.full_name, email=user.email) for user in users]
