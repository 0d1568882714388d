from typing import TYPE_CHECKING
from ...core.config import Settings
from ...domain.repositories.user_repository import UserRepository
from ...infrastructure.storage.image_store import ImageStore
from ...application.use_cases.user.list_users import ListUsersUseCase
from ...application.use_cases.user.get_user import GetUserUseCase
from ...application.use_cases.user.update_user import UpdateUserUseCase
from ...application.use_cases.user.delete_user import DeleteUserUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class UserProvider:
    """User profile use case provider - list, get, update, delete"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all user profile use cases.
        Use cases are created on-demand via factories.
        """
        settings: Settings = container.get(Settings)

        container.register_factory(
            ListUsersUseCase,
            lambda: ListUsersUseCase(
                user_repository=container.get(UserRepository)
            )
        )

        container.register_factory(
            GetUserUseCase,
            lambda: GetUserUseCase(
                user_repository=container.get(UserRepository)
            )
        )

        container.register_factory(
            UpdateUserUseCase,
            lambda: UpdateUserUseCase(
                user_repository=container.get(UserRepository),
                image_store=container.get(ImageStore),
                hash_passwords=settings.hash_passwords,
            )
        )

        container.register_factory(
            DeleteUserUseCase,
            lambda: DeleteUserUseCase(
                user_repository=container.get(UserRepository),
                image_store=container.get(ImageStore),
            )
        )
