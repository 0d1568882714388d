from .auth import (
    RegisterUserUseCase,
    VerifyUserAccountUseCase,
)
from .user import (
    ListUsersUseCase,
    GetUserUseCase,
    UpdateUserUseCase,
    DeleteUserUseCase,
)

__all__ = [
    "RegisterUserUseCase",
    "VerifyUserAccountUseCase",
    "ListUsersUseCase",
    "GetUserUseCase",
    "UpdateUserUseCase",
    "DeleteUserUseCase",
]
