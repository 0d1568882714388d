# Standard library imports
import logging
from typing import Any, Dict, Mapping, Optional

# Local application imports
from ....core.security import hash_password
from ....domain.constants import UserFields
from ....domain.models.user import UploadedImage
from ....domain.repositories.user_repository import UserRepository
from ....infrastructure.storage.image_store import ImageStore
from ...dto.user_dto import UserResponse

logger = logging.getLogger(__name__)


class UpdateUserUseCase:
    """Use case for updating a user's profile"""

    def __init__(
        self,
        user_repository: UserRepository,
        image_store: ImageStore,
        hash_passwords: bool = False,
    ) -> None:
        self.user_repository = user_repository
        self.image_store = image_store
        self.hash_passwords = hash_passwords

    async def execute(
        self,
        user_id: str,
        fields: Mapping[str, Any],
        image: Optional[UploadedImage] = None,
    ) -> UserResponse:
        """
        Apply a partial profile update

        Only name, password, phone, address and image can change; any other
        submitted key (email, is_admin, ...) is ignored.

        Args:
            user_id: ID of the user to update
            fields: Submitted fields; None values are treated as absent
            image: Optional new profile image

        Returns:
            UserResponse without password and image

        Raises:
            NotFoundError: If the user does not exist
            FileTooLargeError: If the image exceeds the size limit
            BadRequestError: If the image type is not allowed
        """
        await self.user_repository.get_by_id(user_id)

        updates: Dict[str, Any] = {
            key: value
            for key, value in fields.items()
            if key in UserFields.UPDATABLE and key != UserFields.IMAGE and value is not None
        }

        if UserFields.PASSWORD in updates and self.hash_passwords:
            updates[UserFields.PASSWORD] = hash_password(updates[UserFields.PASSWORD])

        if image is not None:
            self.image_store.validate(image)
            updates[UserFields.IMAGE] = self.image_store.encode(image)

        updated_user = await self.user_repository.update_by_id(user_id, updates)
        logger.info("User %s updated fields: %s", user_id, ", ".join(sorted(updates)) or "none")
        return UserResponse.from_user(updated_user)
