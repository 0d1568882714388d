from typing import TYPE_CHECKING
from ...core.config import Settings
from ...core.security import TokenCodec
from ...domain.repositories.user_repository import UserRepository
from ...infrastructure.notifications.email_dispatcher import EmailDispatcher
from ...infrastructure.storage.image_store import ImageStore
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.auth.verify_user_account import VerifyUserAccountUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class AuthProvider:
    """Registration use case provider - registers the register/verify flow"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all registration use cases.
        Use cases are created on-demand via factories.
        """
        settings: Settings = container.get(Settings)

        # Register RegisterUserUseCase
        container.register_factory(
            RegisterUserUseCase,
            lambda: RegisterUserUseCase(
                user_repository=container.get(UserRepository),
                image_store=container.get(ImageStore),
                token_codec=container.get(TokenCodec),
                email_dispatcher=container.get(EmailDispatcher),
                activation_key=settings.jwt_activation_key,
                client_url=settings.client_url,
            )
        )

        # Register VerifyUserAccountUseCase
        container.register_factory(
            VerifyUserAccountUseCase,
            lambda: VerifyUserAccountUseCase(
                user_repository=container.get(UserRepository),
                token_codec=container.get(TokenCodec),
                activation_key=settings.jwt_activation_key,
                hash_passwords=settings.hash_passwords,
            )
        )
