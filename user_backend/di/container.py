# Standard library imports
from typing import Optional

# Local application imports
from ..core.config import Settings, get_settings
from .base_container import BaseContainer
from .providers import (
    AuthProvider,
    DatabaseProvider,
    RepositoryProvider,
    ServiceProvider,
    UserProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Settings
    2. Database connections (DatabaseProvider)
    3. Repositories (RepositoryProvider) - depends on database
    4. Services (ServiceProvider) - token codec, email, image store
    5. Use cases (AuthProvider, UserProvider) - depend on all of the above
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        super().__init__()
        self.settings = settings or get_settings()
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: settings → database → repositories → services → use cases
        """
        self.register_singleton(Settings, self.settings)

        DatabaseProvider.register(self)
        RepositoryProvider.register(self)
        ServiceProvider.register(self)
        AuthProvider.register(self)
        UserProvider.register(self)


# Global container instance (singleton pattern)
_container: DIContainer | None = None


def get_container() -> DIContainer:
    """
    Get the global DI container instance (singleton pattern)

    Returns:
        DIContainer instance with all dependencies registered
    """
    global _container
    if _container is None:
        _container = DIContainer()
    return _container


def reset_container() -> None:
    """Drop the global container so the next get_container() rebuilds it"""
    global _container
    _container = None
