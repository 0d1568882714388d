from .register_user import RegisterUserUseCase, ACTIVATION_TOKEN_TTL
from .verify_user_account import VerifyUserAccountUseCase

__all__ = [
    "RegisterUserUseCase",
    "VerifyUserAccountUseCase",
    "ACTIVATION_TOKEN_TTL",
]
