from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ...domain.models.user import User
from ...domain.models.pagination import PaginatedResult


class UserResponse(BaseModel):
    """DTO for user response (no password)"""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(serialization_alias="_id")
    name: str
    email: str
    phone: str = ""
    address: str = ""
    image: Optional[str] = None
    is_admin: bool = Field(default=False, serialization_alias="isAdmin")

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id or "",
            name=user.name,
            email=user.email,
            phone=user.phone,
            address=user.address,
            image=user.image,
            is_admin=user.is_admin,
        )


class UserUpdateRequest(BaseModel):
    """DTO for profile updates; every field is optional"""
    name: Optional[str] = Field(default=None, min_length=3, max_length=31)
    password: Optional[str] = Field(default=None, min_length=6, max_length=256)
    phone: Optional[str] = Field(default=None, min_length=1, max_length=32)
    address: Optional[str] = Field(default=None, min_length=3, max_length=256)

    model_config = ConfigDict(str_strip_whitespace=True)


class PaginationResponse(BaseModel):
    """DTO for page links of a user listing"""
    total_pages: int = Field(serialization_alias="totalPages")
    current_page: int = Field(serialization_alias="currentPage")
    previous_page: Optional[int] = Field(default=None, serialization_alias="previousPage")
    next_page: Optional[int] = Field(default=None, serialization_alias="nextPage")


class UserListResponse(BaseModel):
    """DTO for a page of users"""
    users: List[UserResponse]
    pagination: PaginationResponse

    @classmethod
    def from_result(cls, result: PaginatedResult[User]) -> "UserListResponse":
        return cls(
            users=[UserResponse.from_user(user) for user in result.items],
            pagination=PaginationResponse(
                total_pages=result.total_pages,
                current_page=result.current_page,
                previous_page=result.previous_page,
                next_page=result.next_page,
            ),
        )
