# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....infrastructure.storage.image_store import ImageStore

logger = logging.getLogger(__name__)


class DeleteUserUseCase:
    """Use case for deleting a user and cleaning up their image"""

    def __init__(self, user_repository: UserRepository, image_store: ImageStore) -> None:
        self.user_repository = user_repository
        self.image_store = image_store

    async def execute(self, user_id: str) -> None:
        """
        Delete a user, then best-effort delete the stored image

        Args:
            user_id: ID of the user to delete

        Raises:
            NotFoundError: If the user does not exist (no image cleanup is attempted)
        """
        deleted_user = await self.user_repository.delete_by_id(user_id)
        logger.info("User %s deleted", deleted_user.id)

        await self.image_store.delete(deleted_user.image)
