from typing import TYPE_CHECKING
from ...core.config import Settings
from ...core.security import TokenCodec
from ...infrastructure.notifications.email_dispatcher import EmailDispatcher
from ...infrastructure.storage.image_store import ImageStore

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ServiceProvider:
    """Infrastructure service provider - token codec, email dispatcher, image store"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register stateless infrastructure services as singletons,
        configured from the Settings registered in the container.
        """
        settings: Settings = container.get(Settings)

        container.register_singleton(
            TokenCodec,
            TokenCodec(algorithm=settings.jwt_algorithm)
        )

        container.register_singleton(
            EmailDispatcher,
            EmailDispatcher(
                smtp_host=settings.smtp_host,
                smtp_port=settings.smtp_port,
                smtp_user=settings.smtp_user,
                smtp_password=settings.smtp_password,
                email_from=settings.email_from,
                email_from_name=settings.email_from_name,
                use_tls=settings.smtp_use_tls,
                start_tls=settings.smtp_start_tls,
            )
        )

        container.register_singleton(
            ImageStore,
            ImageStore(
                max_file_size=settings.max_file_size,
                upload_dir=settings.image_upload_dir,
            )
        )
