from abc import ABC, abstractmethod
from typing import List, Optional
from ..models.user import User


class UserRepository(ABC):
    """Repository interface - defines contract for user data access"""

    @abstractmethod
    async def ensure_indexes(self) -> None:
        """Create storage-level constraints (unique email)"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Insert a new user; raises UserAlreadyExistsError on duplicate email"""
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find user by email address"""
        pass

    @abstractmethod
    async def update(
        self,
        email: str,
        full_name: Optional[str] = None,
        password: Optional[str] = None,
    ) -> User:
        """Replace the given non-empty fields; raises UserNotFoundError when absent"""
        pass

    @abstractmethod
    async def delete(self, email: str) -> None:
        """Remove the user; raises UserNotFoundError when absent"""
        pass

    @abstractmethod
    async def list_all(self) -> List[User]:
        """Return every user with only full_name and email populated"""
        pass

    @abstractmethod
    async def set_image_path(self, email: str, image_path: str) -> bool:
        """Set image_path if not already set; returns False when nothing was updated"""
        pass
