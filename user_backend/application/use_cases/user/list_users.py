# Standard library imports
from typing import Any, Optional

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import UserListResponse

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 5


def _positive_int(value: Any, default: int) -> int:
    """Parse a query value as a positive int, falling back to default."""
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if number > 0 else default


class ListUsersUseCase:
    """Use case for searching non-admin users page by page"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(
        self,
        search: Optional[str] = None,
        page: Any = None,
        limit: Any = None,
    ) -> UserListResponse:
        """
        List users matching a free-text search

        Args:
            search: Term matched against name, email and phone (empty matches all)
            page: 1-based page number, defaults to 1
            limit: Page size, defaults to 5

        Returns:
            UserListResponse with users and pagination links
        """
        result = await self.user_repository.list(
            search=(search or "").strip(),
            page=_positive_int(page, DEFAULT_PAGE),
            limit=_positive_int(limit, DEFAULT_LIMIT),
        )
        return UserListResponse.from_result(result)
