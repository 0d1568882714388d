from abc import ABC, abstractmethod
from typing import Any, Dict
from ..models.user import User
from ..models.pagination import PaginatedResult


class UserRepository(ABC):
    """Repository interface - defines contract for user data access"""

    @abstractmethod
    async def list(self, search: str, page: int, limit: int) -> PaginatedResult[User]:
        """Search non-admin users by name/email/phone, one page at a time"""
        pass

    @abstractmethod
    async def get_by_id(self, user_id: str) -> User:
        """Find user by ID; raises NotFoundError"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Insert a new user; raises ConflictError on duplicate email"""
        pass

    @abstractmethod
    async def update_by_id(self, user_id: str, fields: Dict[str, Any]) -> User:
        """Apply whitelisted fields; raises NotFoundError"""
        pass

    @abstractmethod
    async def delete_by_id(self, user_id: str) -> User:
        """Delete and return the removed user; raises NotFoundError"""
        pass

    @abstractmethod
    async def exists_by_email(self, email: str) -> bool:
        """Check whether a user with this email exists"""
        pass
