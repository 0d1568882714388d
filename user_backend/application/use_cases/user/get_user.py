# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import UserResponse


class GetUserUseCase:
    """Use case for fetching a single user"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, user_id: str) -> UserResponse:
        """
        Get a user by ID

        Raises:
            NotFoundError: If the user does not exist
        """
        user = await self.user_repository.get_by_id(user_id)
        return UserResponse.from_user(user)
