# Standard library imports
from typing import Optional

# Local application imports
from ..core.config import Settings, get_settings
from .base_container import BaseContainer
from .providers import (
    DatabaseProvider,
    RepositoryProvider,
    StorageProvider,
    UserProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Database connections (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depends on database
    3. Image storage (StorageProvider) - depends on settings
    4. Use cases (UserProvider) - depend on repositories and storage
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        super().__init__()
        self.settings = settings or get_settings()
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → storage → use cases
        """
        self.register_singleton(Settings, self.settings)

        DatabaseProvider.register(self)
        RepositoryProvider.register(self)
        StorageProvider.register(self)
        UserProvider.register(self)
