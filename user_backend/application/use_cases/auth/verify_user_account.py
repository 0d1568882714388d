# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....core.exceptions import ConflictError, InvalidTokenError, NotFoundError, UnauthorizedError
from ....core.security import TokenCodec, hash_password
from ....domain.models.user import PendingRegistration
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import UserResponse

logger = logging.getLogger(__name__)


class VerifyUserAccountUseCase:
    """Use case for redeeming an activation token and creating the user"""

    def __init__(
        self,
        user_repository: UserRepository,
        token_codec: TokenCodec,
        activation_key: str,
        hash_passwords: bool = False,
    ) -> None:
        self.user_repository = user_repository
        self.token_codec = token_codec
        self.activation_key = activation_key
        self.hash_passwords = hash_passwords

    async def execute(self, token: Optional[str]) -> UserResponse:
        """
        Create the user described by an activation token

        Args:
            token: Activation token from the email link

        Returns:
            UserResponse for the created user

        Raises:
            NotFoundError: If no token was supplied
            UnauthorizedError: If the token is invalid, tampered or expired
            ConflictError: If the email was registered in the meantime
        """
        if not token or not token.strip():
            raise NotFoundError("Token not found")

        try:
            claims = self.token_codec.verify(token.strip(), self.activation_key)
            pending = PendingRegistration.from_claims(claims)
        except (InvalidTokenError, ValueError, TypeError) as exception:
            logger.warning("Rejected activation token: %s", exception)
            raise UnauthorizedError("Unable to verify user")

        # Another verification of the same email may have completed first
        if await self.user_repository.exists_by_email(pending.email):
            raise ConflictError("User with this email already exists")

        password = hash_password(pending.password) if self.hash_passwords else pending.password
        user = await self.user_repository.create(pending.to_user(password=password))

        logger.info("User %s registered with email %s", user.id, user.email)
        return UserResponse.from_user(user)
