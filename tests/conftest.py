"""
Shared pytest fixtures for user service tests.
"""
import os
from typing import Dict, List, Optional
from unittest.mock import patch
import uuid

import pytest

from user_service.core.config import Settings
from user_service.di.base_container import BaseContainer
from user_service.di.providers import UserProvider
from user_service.domain.exceptions import UserAlreadyExistsError, UserNotFoundError
from user_service.domain.models.user import User
from user_service.domain.repositories.user_repository import UserRepository
from user_service.infrastructure.storage.local_image_storage import LocalImageStorage


class InMemoryUserRepository(UserRepository):
    """Dict-backed UserRepository with the same contract as the MongoDB one."""

    def __init__(self) -> None:
        self.users: Dict[str, User] = {}
        self.indexes_ensured = False

    async def ensure_indexes(self) -> None:
        self.indexes_ensured = True

    async def create(self, user: User) -> User:
        if user.email in self.users:
            raise UserAlreadyExistsError()
        stored = User(
            id=uuid.uuid4().hex[:24],
            full_name=user.full_name,
            email=user.email,
            password=user.password,
            image_path=user.image_path,
        )
        self.users[stored.email] = stored
        return stored

    async def find_by_email(self, email: str) -> Optional[User]:
        return self.users.get(email)

    async def update(self, email, full_name=None, password=None) -> User:
        user = self.users.get(email)
        if user is None:
            raise UserNotFoundError()
        if full_name:
            user.full_name = full_name
        if password:
            user.password = password
        return user

    async def delete(self, email: str) -> None:
        if self.users.pop(email, None) is None:
            raise UserNotFoundError()

    async def list_all(self) -> List[User]:
        return [
            User(id=None, full_name=user.full_name, email=user.email, password="")
            for user in self.users.values()
        ]

    async def set_image_path(self, email: str, image_path: str) -> bool:
        user = self.users.get(email)
        if user is None or user.image_path:
            return False
        user.image_path = image_path
        return True


@pytest.fixture
def mock_env(tmp_path):
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_user_accounts",
        "IMAGE_UPLOAD_DIR": str(tmp_path / "images"),
        "IMAGE_UPLOAD_MAX_MB": "5",
        "EXPOSE_INTERNAL_ERRORS": "false",
        "LOG_LEVEL": "WARNING",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def settings(mock_env) -> Settings:
    return Settings()


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def image_storage(settings) -> LocalImageStorage:
    return LocalImageStorage(
        upload_dir=settings.image_upload_dir,
        max_bytes=settings.image_upload_max_bytes,
    )


@pytest.fixture
def container(settings, user_repository, image_storage) -> BaseContainer:
    """Container wired like DIContainer but with the in-memory repository."""
    container = BaseContainer()
    container.register_singleton(Settings, settings)
    container.register_singleton(UserRepository, user_repository)
    container.register_singleton(LocalImageStorage, image_storage)
    UserProvider.register(container)
    return container
