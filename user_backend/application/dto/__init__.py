from .auth_dto import UserRegistrationRequest, VerifyAccountRequest, RegistrationResponse
from .user_dto import (
    UserResponse,
    UserUpdateRequest,
    PaginationResponse,
    UserListResponse,
)

__all__ = [
    "UserRegistrationRequest",
    "VerifyAccountRequest",
    "RegistrationResponse",
    "UserResponse",
    "UserUpdateRequest",
    "PaginationResponse",
    "UserListResponse",
]
